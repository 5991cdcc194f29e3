"""Ghosts: wander the maze, turning at junctions and catching Pacman."""

from __future__ import annotations

import logging
import math
import random
import time

import pygame

from .animation import Animation
from .geometry import (
    CELL_SIZE,
    COLUMNS,
    ROWS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Direction,
    GhostMode,
    Rect,
    Vector2,
)
from .maze import Maze
from .player import Pacman

log = logging.getLogger(__name__)

_generator = random.Random(int(time.time()))

_COMPASS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
_VERTICAL = (Direction.UP, Direction.DOWN)
_TEST_DISTANCE = 2.0
_GRID_ALIGN_THRESHOLD = 2.0
_TURN_PROBABILITY = 60


def random_between(low: int, high: int, rng: random.Random | None = None) -> int:
    """Pick an integer in ``[low, high]``; ranges of width one or less give ``low``."""
    if high < low:
        low, high = high, low
    if high - low <= 1:
        return low
    return (rng or _generator).randint(low, high)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _wrap(rect: Rect) -> Rect:
    x, y = rect.x, rect.y
    if x > SCREEN_WIDTH:
        x = -rect.w
    if x + rect.w < 0:
        x = float(SCREEN_WIDTH)
    if y > SCREEN_HEIGHT:
        y = -rect.h
    if y + rect.h < 0:
        y = float(SCREEN_HEIGHT)
    return Rect(x, y, rect.w, rect.h)


class Ghost:
    """A ghost that roams the maze and kills Pacman on contact."""

    def __init__(
        self,
        image: str,
        position: Vector2,
        move_speed: Vector2,
        direction: Direction,
        name: str,
        rng: random.Random | None = None,
    ) -> None:
        self.image = image
        self.position = position
        self.move_speed = move_speed
        self.direction = direction
        self.name = name
        self.mode = GhostMode.HUNT
        self.animation = Animation(image, Vector2(CELL_SIZE, 31))
        self.rect = Rect(
            position.x,
            position.y,
            SCREEN_WIDTH / COLUMNS - 2,
            SCREEN_HEIGHT / ROWS - 2,
        )
        self._rng = rng
        self._candidates: list[Direction] = [direction]

    def draw(self, surface: pygame.Surface, count: float) -> None:
        """Draw the ghost facing its direction, at the frame for ``count``."""
        self.animation.change_sprite(self.direction)
        self.animation.animate(count)
        self.animation.draw(surface, self.rect)

    def check_pacman(self, pacman: Pacman) -> None:
        """Kill Pacman if he overlaps this ghost."""
        if pacman.rect.intersects(self.rect):
            pacman.kill()

    def possible_directions(self, maze: Maze, rect: Rect) -> list[Direction]:
        """Work out which ways are open from ``rect`` without turning back.

        Turning back is offered only when nothing else is open; a ghost that
        cannot move at all keeps its current direction.
        """
        opposite = self.direction.opposite()
        candidates = [
            direction
            for direction in _COMPASS
            if direction is not opposite
            and not maze.collides(rect.moved(direction, _TEST_DISTANCE))
        ]
        for direction in candidates:
            log.debug("%s possible %s", self.name, direction.name.lower())
        if not candidates:
            if not maze.collides(rect.moved(opposite, _TEST_DISTANCE)):
                candidates.append(opposite)
                log.debug("%s forced to use opposite direction: %s", self.name, opposite.name)
            else:
                candidates.append(self.direction)
                log.debug("%s is completely trapped, keeping direction", self.name)
        self._candidates = candidates
        return list(candidates)

    def choose_direction(self, maze: Maze) -> None:
        """Take one of the pending candidate directions and forget the rest."""
        if not self._candidates:
            log.debug("%s has no candidate directions", self.name)
            self._candidates = [
                direction
                for direction in _COMPASS
                if not maze.collides(self.rect.moved(direction, _TEST_DISTANCE))
            ]
            if not self._candidates:
                log.debug("%s is trapped, keeping direction", self.name)
                self._candidates = [self.direction]

        if len(self._candidates) == 1:
            index = 0
        else:
            index = random_between(0, len(self._candidates) - 1, self._rng)
        self.direction = self._candidates[index]
        log.debug("%s chose direction: %s", self.name, self.direction.name)
        self._candidates = []

    def _advance(self, rect: Rect, x_step: float, y_step: float) -> Rect:
        step = y_step if self.direction in _VERTICAL else x_step
        return rect.moved(self.direction, step)

    def update(self, delta_time: float, maze: Maze, pacman: Pacman) -> None:
        """Move one frame, turning at walls and sometimes at junctions."""
        x_step = self.move_speed.x * delta_time
        y_step = self.move_speed.y * delta_time
        target = self._advance(self.rect, x_step, y_step)

        at_junction = False
        grid_x = _round_half_away(self.rect.x / CELL_SIZE) * CELL_SIZE
        grid_y = _round_half_away(self.rect.y / CELL_SIZE) * CELL_SIZE
        if (
            abs(self.rect.x - grid_x) < _GRID_ALIGN_THRESHOLD
            and abs(self.rect.y - grid_y) < _GRID_ALIGN_THRESHOLD
        ):
            at_junction = len(self.possible_directions(maze, self.rect)) >= 2

        if maze.collides(target):
            self.possible_directions(maze, self.rect)
            self.choose_direction(maze)
            target = self._advance(self.rect, x_step, y_step)
            if maze.collides(target):
                target = self.rect
        elif at_junction and random_between(0, 99, self._rng) < _TURN_PROBABILITY:
            self.choose_direction(maze)
            target = self._advance(self.rect, x_step, y_step)

        self.rect = _wrap(target)
        self.check_pacman(pacman)