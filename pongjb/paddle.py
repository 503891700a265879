"""Player paddles that move vertically within the playfield."""

from __future__ import annotations

from enum import Enum


class Controls(str, Enum):
    """Which keys drive a paddle."""

    WS = "WS"
    ARROWS = "Arrows"


class Direction(str, Enum):
    """Vertical movement direction."""

    UP = "up"
    DOWN = "down"


class Paddle:
    """A white rectangle positioned by its top-left corner."""

    color = (255, 255, 255)

    def __init__(self, width: float, height: float, speed: float, controls: Controls | str) -> None:
        self.width = width
        self.height = height
        self.speed = speed
        self.controls = Controls(controls)
        self.x = 0.0
        self.y = 0.0

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box as ``(left, top, width, height)``."""
        return (self.x, self.y, self.width, self.height)

    def move(self, dt: float, direction: Direction | str, vertical_bounds: float) -> None:
        """Move for ``dt`` seconds, unless already past the edge in that direction.

        Unknown directions leave the paddle where it is.
        """
        if not self.y < 0 and direction == Direction.UP:
            self.y -= self.speed * dt
        if not self.y + self.height > vertical_bounds and direction == Direction.DOWN:
            self.y += self.speed * dt