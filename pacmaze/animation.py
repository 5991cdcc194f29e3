"""Sprite-sheet animation for actors."""

from __future__ import annotations

from dataclasses import replace

import pygame

from .geometry import FPS, Direction, Rect, Vector2

_FRAME_WIDTH = 32

_SHEET_ROWS = {
    Direction.RIGHT: 0,
    Direction.LEFT: 32,
    Direction.UP: 64,
    Direction.DOWN: 96,
}


class Animation:
    """Selects a frame from a sprite sheet and draws it."""

    def __init__(self, filename: str, clip_size: Vector2) -> None:
        self.filename = filename
        self.clip = Rect(0.0, 0.0, clip_size.x, clip_size.y)
        self._image: pygame.Surface | None = None

    def animate(self, count: float) -> None:
        """Switch frames according to the frame counter within a second."""
        if FPS / 2 <= count < FPS:
            if self.clip.x < _FRAME_WIDTH:
                self.clip = replace(self.clip, x=self.clip.x + _FRAME_WIDTH)
        elif 0 < count < FPS / 2:
            if self.clip.x > 0:
                self.clip = replace(self.clip, x=0.0)

    def change_sprite(self, direction: Direction) -> None:
        """Select the sprite-sheet row for ``direction``."""
        self.clip = replace(self.clip, y=float(_SHEET_ROWS[direction]))

    def draw(self, surface: pygame.Surface, dst: Rect) -> None:
        """Draw the current frame scaled into ``dst``."""
        if self._image is None:
            self._image = pygame.image.load(self.filename)
        clip = self.clip
        area = pygame.Rect(int(clip.x), int(clip.y), int(clip.w), int(clip.h)).clip(
            self._image.get_rect()
        )
        if area.width <= 0 or area.height <= 0:
            return
        frame = self._image.subsurface(area)
        size = (max(int(dst.w), 0), max(int(dst.h), 0))
        surface.blit(pygame.transform.scale(frame, size), (int(dst.x), int(dst.y)))