"""Two-dimensional vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float
    y: float

    def rotated(self, rad: float) -> Vector2:
        """Return this vector rotated by *rad* radians."""
        cos_r = math.cos(rad)
        sin_r = math.sin(rad)
        return Vector2(
            cos_r * self.x - sin_r * self.y,
            sin_r * self.x + cos_r * self.y,
        )

    def normalized(self) -> Vector2:
        """Return the unit vector in this direction; a zero vector raises ZeroDivisionError."""
        length = math.sqrt(self.x * self.x + self.y * self.y)
        return Vector2(self.x / length, self.y / length)

    def scaled(self, factor: float) -> Vector2:
        """Return this vector multiplied by *factor*."""
        return Vector2(self.x * factor, self.y * factor)

    def divided(self, divisor: float) -> Vector2:
        """Return this vector divided by *divisor*."""
        return Vector2(self.x / divisor, self.y / divisor)