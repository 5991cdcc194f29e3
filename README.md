# pacmaze

A small Pac-Man style arcade game built on pygame. Pac-Man moves through a
maze read from a plain text file and eats pellets. Four ghosts wander the
corridors. When a ghost hits a wall it picks a new open way at random. At a
junction it turns at random 60% of the time. The game ends when a ghost
touches Pac-Man.

## Installing

```
pip install .
```

This needs `pygame`.

## Playing

```
pacmaze [--map FILE] [--sprites DIR]
```

- `--map` is the maze layout file. The default is `map.txt` in the current
  directory.
- `--sprites` is the directory of sprite sheets. The default is
  `pacman sprites`. It must hold `pacman sprites.png`, `red sprites.png`,
  `blue sprites.png`, `pink sprites.png` and `orange sprites.png`. Each
  sheet has one row per direction: right, left, up, down, at y = 0, 32, 64
  and 96. Each row has two 32-pixel frames that alternate every half second.

Controls:

- The arrow keys turn Pac-Man. He only turns when the way is free of walls
  and the turn is not a straight reversal.
- Escape, or closing the window, quits.

The window is 608 × 672 pixels. Pac-Man and the ghosts move at 32 pixels per
second. A ghost that leaves one edge of the screen comes back at the
opposite edge. Pac-Man eats a pellet when it lies within half his width of
his centre.

## Maze files

A maze is a grid of 19 columns and 21 rows of 32-pixel cells. There is one
character per cell:

| Char  | Meaning                    |
|-------|----------------------------|
| `X`   | wall                       |
| `P`   | Pac-Man's start            |
| `r`   | red ghost (Blinky) start   |
| `b`   | blue ghost (Inky) start    |
| `p`   | pink ghost (Pinky) start   |
| `o`   | orange ghost (Clyde) start |

Every cell that is not a start marker, walls included, gets a pellet. The
pellet sits 16 pixels up and left of the cell's top-left corner.

## Using it as a library

```python
from pacmaze.maze import parse_maze, load_maze
from pacmaze.geometry import Rect, Direction

maze = parse_maze("XXX\nXPX\nXXX\n")
maze.is_wall_at(10, 10)                  # True
maze.collides(Rect(32, 32, 28, 28))      # False: touching edges do not count
maze.pacman_start                        # Vector2(x=32.0, y=32.0)
Direction.UP.opposite()                  # Direction.DOWN
```

- `pacmaze.geometry` defines the screen constants, `Vector2`, `Rect`
  (`intersects`, `moved`), `Direction` and `GhostMode`.
- `pacmaze.maze` defines `Maze` (`rows`, `walls`, `pellets`, the `*_start`
  positions, `is_wall_at`, `collides`, `draw`, `draw_pellets`), and also
  `parse_maze` and `load_maze`.
- `pacmaze.player.Pacman` moves, turns, eats pellets (`eat_pellet`) and can
  be killed (`kill`, `alive`).
- `pacmaze.ghost.Ghost` wanders the maze. It takes an optional
  `random.Random` so that its choices can be repeated. `random_between` is
  the integer picker it uses.
- `pacmaze.game.Game` opens the window and runs the loop (`run`). It works
  as a context manager that shuts pygame down on exit.

Progress messages from the maze, player and ghosts go to the `logging`
module. The game's start and end messages are printed to standard output.

## What it does not do

There is no score, no lives counter and no win when the pellets are gone.
There are no power pellets. Ghosts have a `mode`, but they never flee: they
only wander and never chase Pac-Man. The package ships no maze file and no
sprite sheets. You must supply them.

## Tests

```
pip install .[test]
pytest
```