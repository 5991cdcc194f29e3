"""The player-controlled Pacman."""

from __future__ import annotations

import logging
import math

import pygame

from .animation import Animation
from .geometry import CELL_SIZE, Direction, Rect, Vector2
from .maze import Maze

log = logging.getLogger(__name__)

_PROBE_DISTANCE = 1.0


def _step(velocity: Vector2, direction: Direction, delta_time: float) -> float:
    if direction in (Direction.UP, Direction.DOWN):
        return velocity.y * delta_time
    return velocity.x * delta_time


class Pacman:
    """Pacman: moves through the maze, eats pellets and can be killed."""

    def __init__(
        self,
        image: str,
        direction: Direction,
        position: Vector2,
        dimensions: Vector2 = Vector2(32.0, 32.5),
        velocity: Vector2 = Vector2(32.0, 32.0),
    ) -> None:
        self.image = image
        self.direction = direction
        self.position = position
        self.velocity = velocity
        self.alive = True
        self.animation = Animation(image, dimensions)
        self.rect = Rect(position.x, position.y, CELL_SIZE - 4, CELL_SIZE - 4)

    def draw(self, surface: pygame.Surface, count: float) -> None:
        """Draw Pacman facing its direction, at the frame for ``count``."""
        self.animation.change_sprite(self.direction)
        self.animation.animate(count)
        self.animation.draw(surface, self.rect)

    def update(self, delta_time: float, maze: Maze) -> None:
        """Advance one frame, stopping at walls and eating a pellet."""
        target = self.rect.moved(self.direction, _step(self.velocity, self.direction, delta_time))
        if maze.collides(target):
            target = self.rect
        self.eat_pellet(maze.pellets, target)
        self.rect = target

    def kill(self) -> None:
        """Mark Pacman as dead."""
        self.alive = False

    def change_direction(self, direction: Direction, maze: Maze) -> None:
        """Turn towards ``direction`` unless blocked or reversing."""
        probe = self.rect.moved(direction, _PROBE_DISTANCE)
        if self.direction is not direction.opposite() and not maze.collides(probe):
            self.direction = direction

    def eat_pellet(self, pellets: list[tuple[int, int]], rect: Rect) -> bool:
        """Remove the first pellet within reach of ``rect``; True if one was eaten."""
        centre_x = rect.x + rect.w / 2
        centre_y = rect.y + rect.h / 2
        for index, (x, y) in enumerate(pellets):
            if math.hypot(centre_x - x, centre_y - y) < rect.w / 2:
                del pellets[index]
                log.info("Pellet eaten!")
                return True
        return False