"""Game-over banner showing the win or loss text."""

from __future__ import annotations

from typing import Optional

import pygame

from towerdefence.config import Config
from towerdefence.resources import ResID, Resources
from towerdefence.timer import Timer
from towerdefence.vector import Vector2

FOREGROUND_SIZE = (646, 215)
BACKGROUND_SIZE = (1282, 209)
DISPLAY_TIME = 5.0


class Banner:
    """Shown when the game ends; reports when it has been displayed long enough."""

    def __init__(self, config: Config, resources: Resources) -> None:
        self.config = config
        self.resources = resources
        self.center_position = Vector2()
        self._ended = False
        self._timer = Timer(DISPLAY_TIME, True, self._finish)
        self._foreground: Optional[pygame.Surface] = None
        self._background: Optional[pygame.Surface] = None

    def _finish(self) -> None:
        self._ended = True

    def end_display(self) -> bool:
        return self._ended

    def update(self, delta: float) -> None:
        self._timer.update(delta)
        text_id = ResID.TEX_UI_WIN_TEXT if self.config.is_game_win else ResID.TEX_UI_LOSS_TEXT
        self._foreground = self.resources.texture(text_id)
        self._background = self.resources.texture(ResID.TEX_UI_GAME_OVER_BAR)

    def render(self, surface: pygame.Surface) -> None:
        self._blit_centered(surface, self._background, BACKGROUND_SIZE)
        self._blit_centered(surface, self._foreground, FOREGROUND_SIZE)

    def _blit_centered(
        self, surface: pygame.Surface, texture: Optional[pygame.Surface], size: tuple[int, int]
    ) -> None:
        if texture is None:
            return
        width, height = size
        if texture.get_size() != size:
            texture = pygame.transform.scale(texture, size)
        x = int(self.center_position.x - width / 2)
        y = int(self.center_position.y - height / 2)
        surface.blit(texture, (x, y))