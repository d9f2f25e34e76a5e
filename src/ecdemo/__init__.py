"""
Copyright (c) 2026 The ecdemo developers

Distributed under the MIT software license, see the accompanying file LICENSE
or http://www.opensource.org/licenses/mit-license.php.

This code is a teaching aid. It is neither secure nor efficient: the curves are
tiny, the arithmetic is brute force and nothing runs in constant time. DO NOT
USE IT TO PROTECT ANYTHING.

This package demonstrates elliptic curve Diffie-Hellman key agreement and
ElGamal-style point encryption over a small curve y^2 = x^3 + ax + b (mod p).

Modules:
- point: Defines the Point class, with a separate point at infinity.
- curve: Contains the Curve class, which holds the curve parameters and
  implements the group law, scalar multiplication and point enumeration.
- modular: Modular reduction and brute-force modular inverse.
- codec: Embeds a plaintext integer into a curve point.
- protocol: Key pairs, shared secret derivation and encryption, and a single
  pass that runs them all.
- errors: Exceptions raised when parameters are unsuitable.
- constants: The default demonstration curve and inputs.
"""

from .point import Point
from .curve import Curve, all_points
from .modular import reduce, mod_inverse
from .codec import encode, message_bound, slot_width
from .protocol import (
    Ciphertext,
    Exchange,
    KeyPair,
    derive_shared_secret,
    encrypt,
    establish_keys,
    run_exchange,
)
from .errors import (
    CurveError,
    DegenerateCurve,
    EncodingNotFound,
    KeyAgreementError,
    NoInverseExists,
)
