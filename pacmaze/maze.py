"""The maze: walls, pellets and the starting cells of every actor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .geometry import CELL_SIZE, COLUMNS, ROWS, SCREEN_HEIGHT, SCREEN_WIDTH, Rect, Vector2

log = logging.getLogger(__name__)

WALL = "X"
WALL_COLOUR = (122, 213, 234)
PELLET_COLOUR = (255, 255, 255)

_CELL_WIDTH = SCREEN_WIDTH / COLUMNS
_CELL_HEIGHT = SCREEN_HEIGHT / ROWS
_ROW_STEP = SCREEN_HEIGHT // ROWS

_MARKERS = {
    "P": "pacman_start",
    "r": "red_start",
    "b": "blue_start",
    "o": "orange_start",
    "p": "pink_start",
}


@dataclass
class Maze:
    """A parsed maze layout."""

    rows: list[str] = field(default_factory=list)
    walls: list[Rect] = field(default_factory=list)
    pellets: list[tuple[int, int]] = field(default_factory=list)
    pacman_start: Vector2 = Vector2()
    red_start: Vector2 = Vector2()
    blue_start: Vector2 = Vector2()
    pink_start: Vector2 = Vector2()
    orange_start: Vector2 = Vector2()

    def is_wall_at(self, x: float, y: float) -> bool:
        """True if the point lies inside or on the border of a wall."""
        return any(
            wall.x <= x <= wall.x + wall.w and wall.y <= y <= wall.y + wall.h
            for wall in self.walls
        )

    def collides(self, rect: Rect) -> bool:
        """True if ``rect`` overlaps any wall."""
        return any(rect.intersects(wall) for wall in self.walls)

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every wall onto ``surface``."""
        for wall in self.walls:
            surface.fill(WALL_COLOUR, pygame.Rect(int(wall.x), int(wall.y), int(wall.w), int(wall.h)))

    def draw_pellets(self, surface: pygame.Surface) -> None:
        """Plot every remaining pellet as a single pixel."""
        bounds = surface.get_rect()
        for x, y in self.pellets:
            if bounds.collidepoint(x, y):
                surface.set_at((x, y), PELLET_COLOUR)


def parse_maze(text: str) -> Maze:
    """Build a maze from its text layout, one character per cell."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    starts: dict[str, Vector2] = {}
    walls: list[Rect] = []
    pellets: list[tuple[int, int]] = []
    half = CELL_SIZE // 2

    for row, line in enumerate(lines):
        y = row * _ROW_STEP
        for col, char in enumerate(line):
            x = int(col * _CELL_WIDTH)
            if char in _MARKERS:
                starts[_MARKERS[char]] = Vector2(float(x), float(y))
                if char == "r":
                    log.debug("red x: %d, red y: %d", x, y)
            else:
                pellets.append((x - half, y - half))
            if char == WALL:
                walls.append(Rect(float(x), float(int(row * _CELL_HEIGHT)), _CELL_WIDTH, _CELL_HEIGHT))

    return Maze(rows=lines, walls=walls, pellets=pellets, **starts)


def load_maze(path: str | Path) -> Maze:
    """Read and parse a maze layout file."""
    return parse_maze(Path(path).read_text())