"""Sprite-sheet frame animation."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

import pygame

from towerdefence.timer import Timer


class Animation:
    """Steps through frames cut from a texture grid at a fixed interval."""

    def __init__(
        self,
        interval: float = 0.0,
        loop: bool = True,
        on_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        self.loop = loop
        self.on_finished = on_finished
        self.texture: Optional[pygame.Surface] = None
        self._frames: list[pygame.Rect] = []
        self._idx_frame = 0
        self._frame_size = (0, 0)
        self._timer = Timer(interval, False, self._advance)

    @property
    def interval(self) -> float:
        return self._timer.wait_time

    @interval.setter
    def interval(self, value: float) -> None:
        self._timer.wait_time = value

    @property
    def frame_index(self) -> int:
        return self._idx_frame

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def frame_size(self) -> tuple[int, int]:
        return self._frame_size

    def set_frames(
        self, texture: pygame.Surface, columns: int, rows: int, indices: Iterable[int]
    ) -> None:
        """Use ``texture`` as a ``columns`` x ``rows`` grid and play ``indices``."""
        self.texture = texture
        width_tex, height_tex = texture.get_size()
        width_frame = width_tex // columns
        height_frame = height_tex // rows
        self._frame_size = (width_frame, height_frame)
        self._frames = [
            pygame.Rect(
                idx % columns * width_frame,
                idx // columns * height_frame,
                width_frame,
                height_frame,
            )
            for idx in indices
        ]

    def reset(self) -> None:
        self._idx_frame = 0
        self._timer.restart()

    def frame_rect(self) -> pygame.Rect:
        """Source rectangle of the current frame."""
        return self._frames[self._idx_frame]

    def update(self, delta: float) -> None:
        self._timer.update(delta)

    def render(self, surface: pygame.Surface, position, angle: float = 0.0) -> None:
        """Draw the current frame with its top-left at ``position``, rotated clockwise by ``angle`` degrees."""
        if self.texture is None or not self._frames:
            return
        x, y = position
        frame = self.texture.subsurface(self.frame_rect())
        if angle:
            width, height = self._frame_size
            rotated = pygame.transform.rotate(frame, -angle)
            dest = rotated.get_rect(center=(int(x) + width / 2, int(y) + height / 2))
            surface.blit(rotated, dest)
        else:
            surface.blit(frame, (int(x), int(y)))

    def _advance(self) -> None:
        if not self._frames:
            return
        self._idx_frame += 1
        if self._idx_frame >= len(self._frames):
            self._idx_frame = 0 if self.loop else len(self._frames) - 1
            if not self.loop and self.on_finished is not None:
                self.on_finished()