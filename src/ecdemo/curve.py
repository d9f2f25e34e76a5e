"""
This module defines the Curve class, which holds the parameters of a short
Weierstrass curve y^2 = x^3 + ax + b (mod p) and implements its group law.

The Curve provides point addition, doubling, negation and scalar
multiplication, the brute-force enumeration of every affine point, and a
membership check. Non-singularity and primality of p are assumed, never
verified; a bad modulus surfaces as NoInverseExists from the group law.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Tuple
from .modular import reduce, mod_inverse
from .point import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Curve:
    """Class representing the curve parameters and its group operations."""

    p: int
    a: int
    b: int

    def __post_init__(self):
        if not all(isinstance(arg, int) for arg in (self.p, self.a, self.b)):
            raise ValueError("All curve parameters (p, a, b) must be integers.")
        if self.p < 2:
            raise ValueError("The modulus p must be at least 2.")

    def contains(self, point: Point) -> bool:
        """
        Check whether a point satisfies the curve equation.

        The point at infinity lies on every curve.
        """
        if point.is_zero():
            return True
        x, y = point.coordinates()
        return reduce(y * y, self.p) == self._rhs(x)

    def _rhs(self, x: int) -> int:
        return reduce(x * x * x + self.a * x + self.b, self.p)

    def points(self) -> Tuple[Point, ...]:
        """
        Enumerate every affine point of the curve by brute force.

        For each x in [0, p) the right-hand side of the curve equation is
        compared against y^2 for every y in [0, p), so the cost is O(p^2).

        Returns:
        Tuple[Point, ...]: The points ordered by increasing x, then increasing
        y. An empty tuple is a valid result for a curve with no affine points.
        """
        points = []
        for x in range(self.p):
            rhs = self._rhs(x)
            for y in range(self.p):
                if reduce(y * y, self.p) == rhs:
                    points.append(Point(x, y))

        logger.debug("curve %s has %d affine points", self, len(points))
        return tuple(points)

    def negate(self, point: Point) -> Point:
        """
        Negate the point by reflecting it over the x-axis.

        Returns:
        Point: (x, -y mod p), or the point at infinity if the point is at
        infinity.
        """
        if point.is_zero():
            return point
        x, y = point.coordinates()
        return Point(x, reduce(-y, self.p))

    def double(self, point: Point) -> Point:
        """Double the point on the curve."""
        return self.add(point, point)

    def add(self, first: Point, second: Point) -> Point:
        """
        Add two points on the curve.

        Parameters:
        first (Point): The left operand.
        second (Point): The right operand.

        Returns:
        Point: The sum of the two points as a new Point object.

        Raises:
        NoInverseExists: If the slope denominator has no inverse modulo p,
        which only happens when p is not prime.
        ValueError: If either operand is not a Point.
        """
        if not isinstance(first, Point) or not isinstance(second, Point):
            raise ValueError("Both operands must be instances of Point")

        if first.is_zero():
            return second
        if second.is_zero():
            return first

        x1, y1 = first.coordinates()
        x2, y2 = second.coordinates()

        # P + (-P), and doubling a point of order 2
        if x1 == x2 and (y1 != y2 or y1 == 0):
            return Point.infinity()

        if first == second:
            numerator = reduce(3 * x1 * x1 + self.a, self.p)
            denominator = mod_inverse(2 * y1, self.p)
        else:
            numerator = reduce(y2 - y1, self.p)
            denominator = mod_inverse(x2 - x1, self.p)

        s = reduce(numerator * denominator, self.p)
        sum_x = reduce(s * s - x1 - x2, self.p)
        sum_y = reduce(s * (x1 - sum_x) - y1, self.p)

        return Point(sum_x, sum_y)

    def subtract(self, first: Point, second: Point) -> Point:
        """Subtract the second point from the first."""
        return self.add(first, self.negate(second))

    def multiply(self, point: Point, scalar: int) -> Point:
        """
        Multiply a point by a non-negative integer scalar using the
        double-and-add method, consuming the scalar from its least significant
        bit.

        Parameters:
        point (Point): The point to multiply.
        scalar (int): The scalar to multiply the point by.

        Returns:
        Point: The result of the scalar multiplication. A zero scalar yields
        the point at infinity.

        Raises:
        ValueError: If the scalar is not an integer or is negative.
        NoInverseExists: Propagated from the group law.
        """
        if not isinstance(scalar, int):
            raise ValueError("The scalar must be an integer")
        if scalar < 0:
            raise ValueError("The scalar must not be negative")

        p = point
        r = Point.infinity()

        while scalar > 0:
            if scalar & 1:
                r = self.add(r, p)
            p = self.add(p, p)
            scalar >>= 1

        return r

    def __str__(self) -> str:
        return f"y^2 = x^3 + {self.a}x + {self.b} (mod {self.p})"


def all_points(curve: Curve) -> Tuple[Point, ...]:
    """Return every affine point of the curve in enumeration order."""
    return curve.points()
