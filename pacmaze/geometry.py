"""Screen constants, vectors, rectangles and movement directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SCREEN_WIDTH = 608
SCREEN_HEIGHT = 672
FPS = 60
FRAME_TIME = 1000 // FPS
ROWS = 21
COLUMNS = 19
CELL_SIZE = 32


@dataclass(frozen=True)
class Vector2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __mul__(self, other: Vector2) -> Vector2:
        return Vector2(self.x * other.x, self.y * other.y)


class Direction(Enum):
    """The four directions an actor can face."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GhostMode(Enum):
    """What a ghost is currently doing."""

    FLEE = 0
    HUNT = 1


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with float coordinates."""

    x: float
    y: float
    w: float
    h: float

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.h
            and self.y + self.h > other.y
        )

    def moved(self, direction: Direction, distance: float) -> Rect:
        """Return a copy shifted by ``distance`` towards ``direction``."""
        if direction is Direction.UP:
            return Rect(self.x, self.y - distance, self.w, self.h)
        if direction is Direction.DOWN:
            return Rect(self.x, self.y + distance, self.w, self.h)
        if direction is Direction.LEFT:
            return Rect(self.x - distance, self.y, self.w, self.h)
        return Rect(self.x + distance, self.y, self.w, self.h)