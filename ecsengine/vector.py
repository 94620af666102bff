"""Two-dimensional vector used for positions and scales."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


def _divide(value: Real, divisor: Real) -> Real:
    """Divide like the vector's element type: integers truncate toward zero."""
    if isinstance(value, int) and isinstance(divisor, int):
        quotient = abs(value) // abs(divisor)
        return quotient if (value >= 0) == (divisor > 0) else -quotient
    return value / divisor


@dataclass
class Vect2D:
    """A mutable 2D vector with element-wise arithmetic."""

    x: Real = 0
    y: Real = 0

    def __add__(self, other: Vect2D) -> Vect2D:
        return Vect2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vect2D) -> Vect2D:
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: Vect2D) -> Vect2D:
        return Vect2D(self.x - other.x, self.y - other.y)

    def __isub__(self, other: Vect2D) -> Vect2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, scalar: Real) -> Vect2D:
        return Vect2D(self.x * scalar, self.y * scalar)

    def __truediv__(self, d: Real) -> Vect2D:
        """Divide both elements by ``d``; dividing by zero yields the zero vector."""
        if d == 0:
            return Vect2D()
        return Vect2D(_divide(self.x, d), _divide(self.y, d))

    def zero(self) -> Vect2D:
        """Set both elements to 0 and return this vector."""
        self.x = 0
        self.y = 0
        return self

    def ones(self) -> Vect2D:
        """Set both elements to 1 and return this vector."""
        self.x = 1
        self.y = 1
        return self

    def __str__(self) -> str:
        return f"({self.x:g} {self.y:g})"