"""Two-dimensional vector used for positions, velocities and sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_ZERO_THRESHOLD = 0.01


@dataclass
class Vector2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, other):
        """Dot product with another vector, or scaling by a number."""
        if isinstance(other, Vector2):
            return self.x * other.x + self.y * other.y
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __lt__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.length() < other.length()

    def __gt__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.length() > other.length()

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def approx_zero(self) -> bool:
        return self.length() < _ZERO_THRESHOLD