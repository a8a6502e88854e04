"""Points and vectors in an N-dimensional space."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from numbers import Real

__all__ = ["Point", "Vector"]


def _as_coords(values: Iterable[float]) -> tuple[float, ...]:
    return tuple(float(value) for value in values)


def _check_same_dimension(first: tuple[float, ...], second: tuple[float, ...]) -> None:
    if len(first) != len(second):
        raise ValueError("Both operands must have the same dimension.")


@dataclass(frozen=True)
class Point:
    """A point given by its coordinates."""

    coords: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _as_coords(self.coords))


@dataclass(frozen=True)
class Vector:
    """A vector given by its coordinates."""

    coords: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _as_coords(self.coords))

    @classmethod
    def from_points(cls, point1: Point, point2: Point) -> Vector:
        """Return the vector leading from ``point1`` to ``point2``."""
        _check_same_dimension(point1.coords, point2.coords)
        return cls(b - a for a, b in zip(point1.coords, point2.coords))

    def angle_between(self, other: Vector) -> float:
        """Return the angle to ``other`` in radians; zero vectors raise."""
        cosine = self.dot_product(other) / (self.magnitude() * other.magnitude())
        return math.acos(max(-1.0, min(1.0, cosine)))

    def cross_product(self, other: Vector) -> Vector:
        """Return the cross product; only defined for 3D vectors."""
        if len(self.coords) != 3 or len(other.coords) != 3:
            raise ValueError("Cross product is only defined for 3D vectors.")
        x1, y1, z1 = self.coords
        x2, y2, z2 = other.coords
        return Vector((y1 * z2 - z1 * y2, z1 * x2 - x1 * z2, x1 * y2 - y1 * x2))

    def dot_product(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        _check_same_dimension(self.coords, other.coords)
        return sum(a * b for a, b in zip(self.coords, other.coords))

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(sum(x * x for x in self.coords))

    def normalize(self) -> Vector:
        """Return the unit vector in the same direction; a zero vector raises."""
        magnitude = self.magnitude()
        return Vector(x / magnitude for x in self.coords)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_dimension(self.coords, other.coords)
        return Vector(a + b for a, b in zip(self.coords, other.coords))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_dimension(self.coords, other.coords)
        return Vector(a - b for a, b in zip(self.coords, other.coords))

    def __mul__(self, rhs: float) -> Vector:
        if not isinstance(rhs, Real):
            return NotImplemented
        return Vector(x * rhs for x in self.coords)

    def __rmul__(self, lhs: float) -> Vector:
        return self.__mul__(lhs)