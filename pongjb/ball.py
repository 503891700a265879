"""The ball: a circle moving at a constant speed along a compass-style heading."""

from __future__ import annotations

import math


class Ball:
    """A round ball positioned by the top-left corner of its bounding box.

    The heading is in degrees: 0 points down, 90 right, 180 up and 270 left.
    """

    def __init__(self, x: float, y: float, speed: float = 500.0, radius: float = 8.0) -> None:
        self.x = x
        self.y = y
        self.speed = speed
        self.radius = radius
        self._heading = 90.0
        self._x_multiplier = 1.0
        self._y_multiplier = 0.0

    @property
    def heading(self) -> float:
        """Current heading in degrees, from 0 to 360 inclusive."""
        return self._heading

    @heading.setter
    def heading(self, value: float) -> None:
        if value < 0 or value > 360:
            raise ValueError("Invalid argument range. Heading can range from 0 to 360")
        self._heading = value
        radians = math.radians(value)
        self._x_multiplier = math.sin(radians)
        self._y_multiplier = math.cos(radians)

    @property
    def heading_direction(self) -> str:
        """``"right"`` while the heading is below 180 degrees, else ``"left"``."""
        return "right" if 180 - self._heading > 0 else "left"

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box as ``(left, top, width, height)``."""
        diameter = self.radius * 2
        return (self.x, self.y, diameter, diameter)

    def move(self, dt: float) -> None:
        """Advance the ball along its heading for ``dt`` seconds."""
        distance = self.speed * dt
        self.x += distance * self._x_multiplier
        self.y += distance * self._y_multiplier