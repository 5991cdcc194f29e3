"""A small Pac-Man style maze game built on pygame: maze parsing, actors and the game loop."""

__version__ = "0.1.0"