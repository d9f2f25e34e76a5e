"""
This module composes the curve arithmetic into the two protocols the package
demonstrates: elliptic curve Diffie-Hellman key agreement between two parties
A and B, and ElGamal-style encryption of an encoded message with the agreed
secret.

The run_exchange function performs the whole computation in a single pass and
returns every intermediate value, so a front end only has to display them.
Only the forward direction is provided; there is no decryption.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Tuple
from .codec import encode, message_bound, slot_width
from .curve import Curve
from .errors import DegenerateCurve, KeyAgreementError
from .point import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    """A party's private scalar d and public point d * G."""

    private: int
    public: Point

    @classmethod
    def generate(cls, curve: Curve, base_point: Point, private: int) -> KeyPair:
        return cls(private, curve.multiply(base_point, private))


@dataclass(frozen=True)
class Ciphertext:
    """The encrypted point together with the sender's public key."""

    cipher_point: Point
    sender_public: Point

    def __str__(self) -> str:
        return f"{{{self.cipher_point},{self.sender_public}}}"


@dataclass(frozen=True)
class Exchange:
    """Every value computed by one run of the key agreement and encryption."""

    curve: Curve
    base_point: Point
    curve_points: Tuple[Point, ...]
    party_a: KeyPair
    party_b: KeyPair
    shared_secret_a: Point
    shared_secret_b: Point
    bound: int
    slot_width: int
    message: int
    encoded_message: Point
    ciphertext: Ciphertext


def establish_keys(
    curve: Curve, base_point: Point, private_a: int, private_b: int
) -> Tuple[KeyPair, KeyPair]:
    """
    Derive the key pairs of parties A and B from their private scalars.

    Returns:
    Tuple[KeyPair, KeyPair]: The key pairs of A and B, whose public points are
    private_a * G and private_b * G.
    """
    party_a = KeyPair.generate(curve, base_point, private_a)
    party_b = KeyPair.generate(curve, base_point, private_b)
    logger.debug("public key of A: %s, public key of B: %s", party_a.public, party_b.public)
    return party_a, party_b


def derive_shared_secret(curve: Curve, own_private: int, other_public: Point) -> Point:
    """Compute the ECDH shared secret own_private * other_public."""
    return curve.multiply(other_public, own_private)


def encrypt(curve: Curve, plaintext_point: Point, shared_secret: Point) -> Point:
    """Encrypt an encoded message by adding the shared secret to it."""
    return curve.add(plaintext_point, shared_secret)


def run_exchange(
    curve: Curve, base_point: Point, private_a: int, private_b: int, message: int
) -> Exchange:
    """
    Run key agreement between A and B, then encrypt a message from A to B.

    Parameters:
    curve (Curve): The curve to work on.
    base_point (Point): The generator G.
    private_a (int): The private scalar of party A.
    private_b (int): The private scalar of party B.
    message (int): The plaintext integer.

    Returns:
    Exchange: All intermediate and final values of the run.

    Raises:
    DegenerateCurve: If the curve has no affine points.
    KeyAgreementError: If the two shared secrets differ, as can happen when the
    base point is not on the curve.
    EncodingNotFound: If the message cannot be embedded in the curve.
    NoInverseExists: If the modulus is not prime.
    """
    curve_points = curve.points()
    if not curve_points:
        raise DegenerateCurve(f"The curve {curve} has no affine points.")

    party_a, party_b = establish_keys(curve, base_point, private_a, private_b)

    shared_secret_a = derive_shared_secret(curve, party_a.private, party_b.public)
    shared_secret_b = derive_shared_secret(curve, party_b.private, party_a.public)
    if shared_secret_a != shared_secret_b:
        raise KeyAgreementError(
            f"Shared secrets differ: A computed {shared_secret_a}, B computed {shared_secret_b}."
        )
    logger.debug("shared secret: %s", shared_secret_a)

    bound = message_bound(message)
    h = slot_width(curve.p, bound)
    encoded_message = encode(message, curve_points, bound, curve.p)

    cipher_point = encrypt(curve, encoded_message, shared_secret_a)
    ciphertext = Ciphertext(cipher_point, party_a.public)
    logger.debug("ciphertext: %s", ciphertext)

    return Exchange(
        curve=curve,
        base_point=base_point,
        curve_points=curve_points,
        party_a=party_a,
        party_b=party_b,
        shared_secret_a=shared_secret_a,
        shared_secret_b=shared_secret_b,
        bound=bound,
        slot_width=h,
        message=message,
        encoded_message=encoded_message,
        ciphertext=ciphertext,
    )
