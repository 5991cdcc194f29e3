import pygame
import pytest

from pacmaze.game import Game
from pacmaze.geometry import FPS, Direction
from pacmaze.maze import WALL_COLOUR

LAYOUT = "XXXXXXXX\nXP.....X\nX......X\nX.rbop.X\nXXXXXXXX\n"
SPRITES = ("red", "blue", "pink", "orange", "pacman")


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    maze_file = tmp_path / "map.txt"
    maze_file.write_text(LAYOUT)
    sheet = pygame.Surface((64, 128))
    sheet.fill((200, 200, 0))
    for colour in SPRITES:
        pygame.image.save(sheet, str(tmp_path / f"{colour} sprites.png"))
    instance = Game("Pacman", maze_path=maze_file, sprite_dir=tmp_path)
    pygame.event.clear()
    yield instance
    instance.close()


def test_actors_start_at_maze_markers(game):
    assert game.pacman.rect.x == game.maze.pacman_start.x
    assert game.pacman.rect.y == game.maze.pacman_start.y
    assert [ghost.name for ghost in game.ghosts] == ["Blinky", "Inky", "Pinky", "Clyde"]
    assert game.ghosts[0].rect.x == game.maze.red_start.x
    assert game.running is True


def test_quit_event_stops_game(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.process_events()
    assert game.running is False


def test_escape_key_stops_game(game):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    game.process_events()
    assert game.running is False


def test_arrow_key_turns_pacman(game):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
    game.process_events()
    assert game.pacman.direction is Direction.DOWN
    assert game.running is True


def test_update_counts_frames_and_wraps(game):
    game.update(0.0)
    assert game.count == 1
    game.count = FPS - 1
    game.update(0.0)
    assert game.count == 0


def test_update_ends_game_when_pacman_dies(game):
    game.pacman.kill()
    game.update(0.0)
    assert game.running is False


def test_draw_paints_walls(game):
    game.draw()
    assert tuple(game.screen.get_at((5, 5)))[:3] == WALL_COLOUR


def test_close_is_idempotent(game, tmp_path):
    game.close()
    game.close()
    assert pygame.display.get_init() is False

    fresh = Game("Pacman", maze_path=tmp_path / "map.txt", sprite_dir=tmp_path)
    try:
        assert fresh.running is True
        fresh.draw()
        assert tuple(fresh.screen.get_at((5, 5)))[:3] == WALL_COLOUR
    finally:
        fresh.close()