"""Two-dimensional vector with component-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Iterator

# Machine epsilon of a single-precision float; used for approximate equality.
FLOAT_EPSILON = 2.0**-23


@dataclass(eq=False)
class Vec2:
    """A mutable pair of floats.

    Arithmetic is component-wise. Equality is approximate: two vectors are
    equal when each component differs by at most single-precision epsilon.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, scalar: float) -> Vec2:
        """Return a vector with both components set to ``scalar``."""
        return cls(scalar, scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vec2(self.x * float(other), self.y * float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Vec2:
        if isinstance(other, Real):
            return Vec2(self.x * float(other), self.y * float(other))
        return NotImplemented

    def __truediv__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x / other.x, self.y / other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return abs(self.x - other.x) <= FLOAT_EPSILON and abs(self.y - other.y) <= FLOAT_EPSILON

    __hash__ = None  # type: ignore[assignment]