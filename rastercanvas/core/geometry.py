"""Geometry primitives: Vector and Rectangle.

Vector is the 2D point/direction type consumed by every drawing operation.
Arithmetic is split on purpose: add()/sub() return new vectors, while
rotate()/scale() mutate in place so a direction can be stepped incrementally.

Example:
    >>> v = Vector(0.0, 5.0)
    >>> p = Vector(10.0, 10.0).add(v)
    >>> v.rotate(0.03)
    >>> v.scale(0.999)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vector:
    """2D vector with float coordinates.

    Attributes:
        x: Horizontal component
        y: Vertical component
    """

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vector) -> Vector:
        """Return self + other as a new Vector."""
        return Vector(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector) -> Vector:
        """Return self - other as a new Vector."""
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> None:
        """Multiply both components by factor, in place."""
        self.x *= factor
        self.y *= factor

    def rotate(self, angle: float) -> None:
        """Rotate about the origin by angle (radians), in place.

        Args:
            angle: Rotation angle; positive values rotate from +x towards +y
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        x = self.x * cos_a - self.y * sin_a
        y = self.x * sin_a + self.y * cos_a
        self.x, self.y = x, y

    def length(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def copy(self) -> Vector:
        return Vector(self.x, self.y)

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.sub(other)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rectangle:
    """Half-open integer rectangle [min_x, max_x) x [min_y, max_y).

    Attributes:
        min_x: Left edge (inclusive)
        min_y: Top edge (inclusive)
        max_x: Right edge (exclusive)
        max_y: Bottom edge (exclusive)
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def __post_init__(self) -> None:
        """Validate Rectangle corners."""
        if self.max_x < self.min_x or self.max_y < self.min_y:
            raise ValueError(
                f"max corner must not precede min corner: "
                f"min=({self.min_x}, {self.min_y}), max=({self.max_x}, {self.max_y})"
            )

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return (self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        """Check whether integer point (x, y) lies inside the rectangle."""
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y
