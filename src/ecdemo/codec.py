"""
Embedding of plaintext integers into curve points.

Each message m owns a contiguous range of h = p // M candidate x-coordinates,
starting at m * h, where M is the smallest power of two that is at least m.
The encoded point is the first enumerated curve point whose x-coordinate falls
in that range, trying the candidates in ascending order.
"""

import logging
from typing import Sequence
from .errors import DegenerateCurve, EncodingNotFound
from .modular import reduce
from .point import Point

logger = logging.getLogger(__name__)


def message_bound(message: int) -> int:
    """
    Return the smallest power of two M with message <= M.

    Messages of 1 or less, negative ones included, give M = 1.
    """
    if not isinstance(message, int):
        raise ValueError("The message must be an integer.")

    bound = 1
    while message > bound:
        bound *= 2
    return bound


def slot_width(p: int, bound: int) -> int:
    """Return h, the number of x-coordinates reserved for each message."""
    return p // bound


def encode(message: int, curve_points: Sequence[Point], bound: int, p: int) -> Point:
    """
    Encode a message as a point on the curve.

    Parameters:
    message (int): The plaintext integer.
    curve_points (Sequence[Point]): Every affine point of the curve, in
        enumeration order.
    bound (int): M, as returned by message_bound for this message.
    p (int): The prime modulus of the curve.

    Returns:
    Point: The first point whose x-coordinate equals reduce(m * h + j, p) for
    the smallest j in [0, h) that has one.

    Raises:
    DegenerateCurve: If curve_points is empty.
    EncodingNotFound: If none of the h candidates is the x-coordinate of a
    curve point, including the case h == 0 where the message is too large.
    """
    if not curve_points:
        raise DegenerateCurve("The curve has no points to encode a message with.")

    h = slot_width(p, bound)
    for j in range(h):
        x = reduce(message * h + j, p)
        for point in curve_points:
            if point.x == x:
                logger.debug("message %d encoded at x=%d after %d attempts", message, x, j + 1)
                return point

    raise EncodingNotFound(message, h)
