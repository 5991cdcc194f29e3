"""The game window, main loop and command entry point."""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

import pygame

from .geometry import FPS, FRAME_TIME, SCREEN_HEIGHT, SCREEN_WIDTH, Direction, Vector2
from .ghost import Ghost
from .maze import load_maze
from .player import Pacman

log = logging.getLogger(__name__)

BACKGROUND = (2, 25, 25)
GHOST_SPEED = Vector2(32.0, 32.0)
PACMAN_DIMENSIONS = Vector2(32.0, 32.5)
PACMAN_SPEED = Vector2(32.0, 32.0)

_KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class Game:
    """Owns the window, the maze and every actor, and runs the frame loop."""

    def __init__(
        self,
        title: str = "Pacman",
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        maze_path: str | Path = "map.txt",
        sprite_dir: str | Path = "pacman sprites",
        rng: random.Random | None = None,
    ) -> None:
        self.screen_width = width
        self.screen_height = height
        self.maze = load_maze(maze_path)
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.running = True
        self.count = 0

        sprites = Path(sprite_dir)
        maze = self.maze
        self.ghosts = [
            Ghost(str(sprites / "red sprites.png"), maze.red_start, GHOST_SPEED, Direction.UP, "Blinky", rng),
            Ghost(str(sprites / "blue sprites.png"), maze.blue_start, GHOST_SPEED, Direction.LEFT, "Inky", rng),
            Ghost(str(sprites / "pink sprites.png"), maze.pink_start, GHOST_SPEED, Direction.DOWN, "Pinky", rng),
            Ghost(str(sprites / "orange sprites.png"), maze.orange_start, GHOST_SPEED, Direction.RIGHT, "Clyde", rng),
        ]
        self.pacman = Pacman(
            str(sprites / "pacman sprites.png"),
            Direction.RIGHT,
            maze.pacman_start,
            PACMAN_DIMENSIONS,
            PACMAN_SPEED,
        )
        self._closed = False

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Shut the window down."""
        if self._closed:
            return
        self._closed = True
        pygame.quit()
        print("The game is over, thank you for your patronage")

    def process_events(self) -> None:
        """Handle quit requests and arrow keys."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                print("Game instance terminated")
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    print("Game instance killed")
                elif event.key in _KEY_DIRECTIONS:
                    self.pacman.change_direction(_KEY_DIRECTIONS[event.key], self.maze)

    def update(self, dt: float) -> None:
        """Advance every actor by one frame and end the game if Pacman died."""
        self.count += 1
        self.pacman.update(dt, self.maze)
        for ghost in self.ghosts:
            ghost.update(dt, self.maze, self.pacman)
        if not self.pacman.alive:
            self.running = False
            print("Pacman is dead")
        if self.count == FPS:
            self.count = 0
        pygame.time.delay(FRAME_TIME)

    def draw(self) -> None:
        """Render the maze, pellets and actors and show the frame."""
        self.screen.fill(BACKGROUND)
        self.maze.draw(self.screen)
        self.maze.draw_pellets(self.screen)
        self.pacman.draw(self.screen, self.count)
        for ghost in self.ghosts:
            ghost.draw(self.screen, self.count)
        pygame.display.flip()

    def run(self) -> None:
        """Run frames until the game stops."""
        previous = pygame.time.get_ticks() / 1000.0
        while self.running:
            current = pygame.time.get_ticks() / 1000.0
            delta = current - previous
            self.process_events()
            self.update(delta)
            self.draw()
            previous = current
            pygame.time.delay(FRAME_TIME)


def main(argv: list[str] | None = None) -> int:
    """Start a game in a window."""
    parser = argparse.ArgumentParser(prog="pacmaze", description="Play Pacman.")
    parser.add_argument("--map", default="map.txt", help="maze layout file")
    parser.add_argument("--sprites", default="pacman sprites", help="directory of sprite sheets")
    args = parser.parse_args(argv)
    with Game("Pacman", SCREEN_WIDTH, SCREEN_HEIGHT, args.map, args.sprites) as game:
        game.run()
    return 0