"""Radial pop-up panels for placing and upgrading towers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional

import pygame

from towerdefence.kinds import TowerType
from towerdefence.resources import ResID, Resources
from towerdefence.tilemap import SIZE_TILE

SIZE_BUTTON = 48
PANEL_WIDTH = 144
PANEL_HEIGHT = 144
OFFSET_TOP = (48, 6)
OFFSET_LEFT = (8, 80)
OFFSET_RIGHT = (90, 80)
OFFSET_SHADOW = (3, 3)
COLOR_TEXT_BACKGROUND = (175, 175, 175, 255)
COLOR_TEXT_FOREGROUND = (255, 255, 255, 255)
COLOR_REGION_FRAME = (30, 80, 162, 175)
COLOR_REGION_CONTENT = (0, 149, 217, 75)
MAX_TEXT = "MAX"


class HoveredTarget(Enum):
    NONE = auto()
    TOP = auto()
    LEFT = auto()
    RIGHT = auto()


_BUTTON_OFFSETS = {
    HoveredTarget.TOP: OFFSET_TOP,
    HoveredTarget.LEFT: OFFSET_LEFT,
    HoveredTarget.RIGHT: OFFSET_RIGHT,
}


def _scaled(texture: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
    if texture.get_size() != size:
        return pygame.transform.scale(texture, size)
    return texture


class Panel(ABC):
    """A panel with three buttons around a selected tile, each showing a price."""

    _TEXTURES: dict[HoveredTarget, ResID] = {}

    def __init__(self, resources: Resources, towers, coins) -> None:
        self.resources = resources
        self.towers = towers
        self.coins = coins
        self.visible = False
        self.idx_tile_selected: tuple[int, int] = (0, 0)
        self.center_pos: tuple[int, int] = (0, 0)
        self.hovered_target = HoveredTarget.NONE
        self.val_top = 0
        self.val_left = 0
        self.val_right = 0
        self.text = ""
        self._tex_cursor = resources.texture(ResID.TEX_UI_SELECT_CURSOR)
        self._textures = {
            target: resources.texture(res_id) for target, res_id in self._TEXTURES.items()
        }
        self._text_background: Optional[pygame.Surface] = None
        self._text_foreground: Optional[pygame.Surface] = None

    def show(self) -> None:
        self.visible = True

    def _target_at(self, pos: tuple[int, int]) -> HoveredTarget:
        cx, cy = self.center_pos
        for target, (ox, oy) in _BUTTON_OFFSETS.items():
            rect = pygame.Rect(
                cx - PANEL_WIDTH // 2 + ox,
                cy - PANEL_HEIGHT // 2 + oy,
                SIZE_BUTTON,
                SIZE_BUTTON,
            )
            if rect.collidepoint(pos):
                return target
        return HoveredTarget.NONE

    def _hovered_value(self) -> int:
        return {
            HoveredTarget.TOP: self.val_top,
            HoveredTarget.LEFT: self.val_left,
            HoveredTarget.RIGHT: self.val_right,
        }.get(self.hovered_target, 0)

    def handle_event(self, event: pygame.event.Event) -> None:
        if not self.visible:
            return
        if event.type == pygame.MOUSEMOTION:
            self.hovered_target = self._target_at(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            handler = {
                HoveredTarget.TOP: self.on_click_top,
                HoveredTarget.LEFT: self.on_click_left,
                HoveredTarget.RIGHT: self.on_click_right,
            }.get(self.hovered_target)
            if handler is not None:
                handler()
            self.visible = False

    def update(self) -> None:
        """Re-render the price of the hovered button."""
        if not self.visible or self.hovered_target is HoveredTarget.NONE:
            return
        val = self._hovered_value()
        self.text = MAX_TEXT if val < 0 else str(val)
        font = self.resources.font(ResID.FONT_MAIN)
        self._text_background = font.render(self.text, True, COLOR_TEXT_BACKGROUND)
        self._text_foreground = font.render(self.text, True, COLOR_TEXT_FOREGROUND)

    def render(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        cx, cy = self.center_pos
        surface.blit(
            _scaled(self._tex_cursor, (SIZE_TILE, SIZE_TILE)),
            (cx - SIZE_TILE // 2, cy - SIZE_TILE // 2),
        )

        texture = self._textures.get(self.hovered_target)
        if texture is not None:
            surface.blit(
                _scaled(texture, (PANEL_WIDTH, PANEL_HEIGHT)),
                (cx - PANEL_WIDTH // 2, cy - PANEL_HEIGHT // 2),
            )

        if (
            self.hovered_target is HoveredTarget.NONE
            or self._text_background is None
            or self._text_foreground is None
        ):
            return
        width_text = self._text_background.get_width()
        x = cx - width_text // 2 + OFFSET_SHADOW[0]
        y = cy + PANEL_HEIGHT // 2 + OFFSET_SHADOW[1]
        surface.blit(self._text_background, (x, y))
        surface.blit(self._text_foreground, (x - OFFSET_SHADOW[0], y - OFFSET_SHADOW[1]))

    @abstractmethod
    def on_click_top(self) -> None:
        """Act on a click on the top button."""

    @abstractmethod
    def on_click_left(self) -> None:
        """Act on a click on the left button."""

    @abstractmethod
    def on_click_right(self) -> None:
        """Act on a click on the right button."""


class PlacePanel(Panel):
    """Buys a new tower: axeman on top, archer on the left, gunner on the right."""

    _TEXTURES = {
        HoveredTarget.NONE: ResID.TEX_UI_PLACE_IDLE,
        HoveredTarget.TOP: ResID.TEX_UI_PLACE_HOVERED_TOP,
        HoveredTarget.LEFT: ResID.TEX_UI_PLACE_HOVERED_LEFT,
        HoveredTarget.RIGHT: ResID.TEX_UI_PLACE_HOVERED_RIGHT,
    }

    def __init__(self, resources: Resources, towers, coins) -> None:
        super().__init__(resources, towers, coins)
        self.reg_top = 0
        self.reg_left = 0
        self.reg_right = 0

    def update(self) -> None:
        self.val_top = int(self.towers.place_cost(TowerType.AXEMAN))
        self.val_left = int(self.towers.place_cost(TowerType.ARCHER))
        self.val_right = int(self.towers.place_cost(TowerType.GUNNER))
        self.reg_top = int(self.towers.damage_range(TowerType.AXEMAN)) * SIZE_TILE
        self.reg_left = int(self.towers.damage_range(TowerType.ARCHER)) * SIZE_TILE
        self.reg_right = int(self.towers.damage_range(TowerType.GUNNER)) * SIZE_TILE
        super().update()

    def render(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        radius = {
            HoveredTarget.TOP: self.reg_top,
            HoveredTarget.LEFT: self.reg_left,
            HoveredTarget.RIGHT: self.reg_right,
        }.get(self.hovered_target, 0)
        if radius > 0:
            side = 2 * radius + 2
            overlay = pygame.Surface((side, side), pygame.SRCALPHA)
            centre = (radius + 1, radius + 1)
            pygame.draw.circle(overlay, COLOR_REGION_CONTENT, centre, radius)
            pygame.draw.circle(overlay, COLOR_REGION_FRAME, centre, radius, 1)
            cx, cy = self.center_pos
            surface.blit(overlay, (cx - radius - 1, cy - radius - 1))
        super().render(surface)

    def _buy(self, tower_type: TowerType, cost: int) -> None:
        if cost <= self.coins.num_coin:
            self.towers.place(tower_type, self.idx_tile_selected)
            self.coins.decrease(cost)

    def on_click_top(self) -> None:
        self._buy(TowerType.AXEMAN, self.val_top)

    def on_click_left(self) -> None:
        self._buy(TowerType.ARCHER, self.val_left)

    def on_click_right(self) -> None:
        self._buy(TowerType.GUNNER, self.val_right)


class UpgradePanel(Panel):
    """Raises the level of a tower type: axeman on top, archer left, gunner right."""

    _TEXTURES = {
        HoveredTarget.NONE: ResID.TEX_UI_UPGRADE_IDLE,
        HoveredTarget.TOP: ResID.TEX_UI_UPGRADE_HOVERED_TOP,
        HoveredTarget.LEFT: ResID.TEX_UI_UPGRADE_HOVERED_LEFT,
        HoveredTarget.RIGHT: ResID.TEX_UI_UPGRADE_HOVERED_RIGHT,
    }

    def update(self) -> None:
        self.val_top = int(self.towers.upgrade_cost(TowerType.AXEMAN))
        self.val_left = int(self.towers.upgrade_cost(TowerType.ARCHER))
        self.val_right = int(self.towers.upgrade_cost(TowerType.GUNNER))
        super().update()

    def _upgrade(self, tower_type: TowerType, cost: int) -> None:
        if 0 < cost <= self.coins.num_coin:
            self.towers.upgrade(tower_type)
            self.coins.decrease(cost)

    def on_click_top(self) -> None:
        self._upgrade(TowerType.AXEMAN, self.val_top)

    def on_click_left(self) -> None:
        self._upgrade(TowerType.ARCHER, self.val_left)

    def on_click_right(self) -> None:
        self._upgrade(TowerType.GUNNER, self.val_right)