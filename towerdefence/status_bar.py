"""Heads-up display: home health, coin count and the player's mana."""

from __future__ import annotations

from typing import Optional

import pygame

from towerdefence.resources import ResID, Resources

SIZE_HEART = 32
SIZE_AVATAR = 78
SIZE_PLAYER_AVATAR = 65
SIZE_COIN = 32
WIDTH_MP_BAR = 200
HEIGHT_MP_BAR = 20
WIDTH_BORDER_MP_BAR = 4
OFFSET_SHADOW = (2, 2)
COLOR_TEXT_BACKGROUND = (175, 175, 175, 255)
COLOR_TEXT_FOREGROUND = (255, 255, 255, 255)
COLOR_MP_BAR_BACKGROUND = (48, 40, 51, 255)
COLOR_MP_BAR_FOREGROUND = (144, 121, 173, 255)


def _scaled(texture: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
    if texture.get_size() != size:
        return pygame.transform.scale(texture, size)
    return texture


class StatusBar:
    """Draws the status panel in the top-left corner of the screen."""

    def __init__(self, resources: Resources, coins, home, player, position=(0, 0)) -> None:
        self.resources = resources
        self.coins = coins
        self.home = home
        self.player = player
        self.position = (int(position[0]), int(position[1]))
        self.text = ""
        self._text_background: Optional[pygame.Surface] = None
        self._text_foreground: Optional[pygame.Surface] = None

    def update(self) -> None:
        """Re-render the coin count text."""
        font = self.resources.font(ResID.FONT_MAIN)
        self.text = str(int(self.coins.num_coin))
        self._text_background = font.render(self.text, True, COLOR_TEXT_BACKGROUND)
        self._text_foreground = font.render(self.text, True, COLOR_TEXT_FOREGROUND)

    def render(self, surface: pygame.Surface) -> None:
        x, y = self.position
        textures = self.resources.texture

        surface.blit(
            _scaled(textures(ResID.TEX_UI_HOME_AVATAR), (SIZE_AVATAR, SIZE_AVATAR)), (x, y)
        )

        heart = _scaled(textures(ResID.TEX_UI_HEART), (SIZE_HEART, SIZE_HEART))
        left = x + SIZE_AVATAR + 15
        for i in range(int(self.home.num_hp)):
            surface.blit(heart, (left + i * (SIZE_HEART + 2), y))

        coin_y = y + SIZE_AVATAR - SIZE_COIN
        surface.blit(_scaled(textures(ResID.TEX_UI_COIN), (SIZE_COIN, SIZE_COIN)), (left, coin_y))

        if self._text_background is not None and self._text_foreground is not None:
            height_text = self._text_background.get_height()
            text_x = left + SIZE_COIN + 10 + OFFSET_SHADOW[0]
            text_y = coin_y + int((SIZE_COIN - height_text) / 2) + OFFSET_SHADOW[1]
            surface.blit(self._text_background, (text_x, text_y))
            surface.blit(
                self._text_foreground,
                (text_x - OFFSET_SHADOW[0], text_y - OFFSET_SHADOW[1]),
            )

        avatar_y = y + SIZE_AVATAR + 5
        surface.blit(
            _scaled(
                textures(ResID.TEX_UI_PLAYER_AVATAR),
                (SIZE_PLAYER_AVATAR, SIZE_PLAYER_AVATAR),
            ),
            (x + (SIZE_AVATAR - SIZE_PLAYER_AVATAR) // 2, avatar_y),
        )

        bar_y = avatar_y + 10
        pygame.draw.rect(
            surface,
            COLOR_MP_BAR_BACKGROUND,
            pygame.Rect(left, bar_y, WIDTH_MP_BAR + 1, HEIGHT_MP_BAR + 1),
            border_radius=4,
        )

        inner_w = WIDTH_MP_BAR - 2 * WIDTH_BORDER_MP_BAR
        inner_h = HEIGHT_MP_BAR - 2 * WIDTH_BORDER_MP_BAR
        progress = self.player.mp / 100
        fill = int(inner_w * progress)
        pygame.draw.rect(
            surface,
            COLOR_MP_BAR_FOREGROUND,
            pygame.Rect(
                left + WIDTH_BORDER_MP_BAR,
                bar_y + WIDTH_BORDER_MP_BAR,
                fill + 1,
                inner_h + 1,
            ),
            border_radius=2,
        )