"""
Modular arithmetic over the prime field of a curve.

The inverse is found by brute force, which is only reasonable for the tiny
moduli this package is meant to demonstrate.
"""

import logging
from .errors import NoInverseExists

logger = logging.getLogger(__name__)


def reduce(n: int, p: int) -> int:
    """Return n mod p normalized into [0, p) regardless of the sign of n."""
    return n % p


def mod_inverse(n: int, p: int) -> int:
    """
    Compute the multiplicative inverse of n modulo p by linear scan.

    Parameters:
    n (int): The value to invert. Negative values are reduced first.
    p (int): The modulus.

    Returns:
    int: The x in [1, p) such that (n * x) mod p == 1.

    Raises:
    NoInverseExists: If gcd(n, p) != 1, for instance when n is a multiple of p
    or p is not prime.
    """
    n = reduce(n, p)
    for x in range(1, p):
        if (n * x) % p == 1:
            return x

    logger.debug("inverse of %d mod %d not found", n, p)
    raise NoInverseExists(n, p)
