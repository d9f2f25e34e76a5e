"""
This module defines the Point class, which represents points on a small
elliptic curve y^2 = x^3 + ax + b over a prime field.

A Point is a plain value: it does not know which curve it belongs to. The group
law lives on the Curve class, which must be handed explicitly to every
operation. The point at infinity is its own variant with no coordinates, so it
can never be confused with an affine point such as (0, 0).
"""

from __future__ import annotations
from typing import Iterator, Optional, Tuple


class Point:
    """Class representing an elliptic curve point."""

    __slots__ = ("x", "y")

    def __init__(self, x: Optional[int] = None, y: Optional[int] = None):
        """
        Initialize a point on an elliptic curve.

        Parameters:
        x (Optional[int], optional): The x-coordinate of the point.
            Defaults to None, representing the point at infinity.
        y (Optional[int], optional): The y-coordinate of the point.
            Defaults to None, also representing the point at infinity.

        Raises:
        ValueError: If only one of the coordinates is given.
        """
        if (x is None) != (y is None):
            raise ValueError("Both coordinates must be given, or neither.")

        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    @classmethod
    def infinity(cls) -> Point:
        """Return the point at infinity, the identity of the group."""
        return cls()

    def is_zero(self) -> bool:
        """
        Check if the point is the identity element (point at infinity).

        Returns:
        bool: True if the point is at infinity, False otherwise.
        """
        return self.x is None

    def coordinates(self) -> Tuple[int, int]:
        """
        Return the affine coordinates of the point.

        Raises:
        ValueError: If the point is at infinity.
        """
        if self.x is None or self.y is None:
            raise ValueError("The point at infinity has no affine coordinates.")
        return self.x, self.y

    def __iter__(self) -> Iterator[Optional[int]]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        """
        Determine if this point is equal to another point by comparing their
        coordinates. The point at infinity only equals itself.
        """
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        """
        Return a human-readable string representation of the point.

        Returns:
        str: "(x,y)" for an affine point, "O" for the point at infinity.
        """
        if self.is_zero():
            return "O"
        return f"({self.x},{self.y})"

    def __repr__(self) -> str:
        if self.is_zero():
            return f"{self.__class__.__name__}(x=None, y=None)"
        return f"{self.__class__.__name__}(x={self.x}, y={self.y})"
