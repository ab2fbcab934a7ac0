"""Placing, upgrading and running the towers."""

from __future__ import annotations

import pygame

from towerdefence.bullet_manager import BulletManager
from towerdefence.config import Config
from towerdefence.enemy_manager import EnemyManager
from towerdefence.kinds import TowerType
from towerdefence.resources import ResID, Resources
from towerdefence.tilemap import SIZE_TILE
from towerdefence.towers import Tower
from towerdefence.vector import Vector2

MAX_LEVEL = 9


class TowerManager:
    """Holds the placed towers and answers cost questions per tower type."""

    def __init__(
        self,
        config: Config,
        resources: Resources,
        enemies: EnemyManager,
        bullets: BulletManager,
    ) -> None:
        self.config = config
        self.resources = resources
        self.enemies = enemies
        self.bullets = bullets
        self.towers: list[Tower] = []

    def place_cost(self, tower_type: TowerType) -> float:
        template = self.config.tower_template(tower_type)
        return template.cost[self.config.tower_level(tower_type)]

    def upgrade_cost(self, tower_type: TowerType) -> float:
        """Cost of the next level, or -1 when the type is at its highest level."""
        level = self.config.tower_level(tower_type)
        if level == MAX_LEVEL:
            return -1
        return self.config.tower_template(tower_type).upgrade_cost[level]

    def damage_range(self, tower_type: TowerType) -> float:
        template = self.config.tower_template(tower_type)
        return template.view_range[self.config.tower_level(tower_type)]

    def place(self, tower_type: TowerType, idx: tuple[int, int]) -> Tower:
        """Build a tower in the centre of tile ``idx`` and mark the tile taken."""
        tower = Tower(tower_type, self.config, self.resources, self.enemies, self.bullets)
        rect = self.config.rect_tile_map
        x, y = idx
        tower.position = Vector2(
            rect.x + x * SIZE_TILE + SIZE_TILE // 2,
            rect.y + y * SIZE_TILE + SIZE_TILE // 2,
        )
        self.towers.append(tower)
        self.config.game_map.place_tower(idx)
        self.resources.play_sound(ResID.SOUND_PLACE_TOWER)
        return tower

    def upgrade(self, tower_type: TowerType) -> None:
        level = self.config.tower_level(tower_type)
        self.config.tower_levels[tower_type] = min(level + 1, MAX_LEVEL)
        self.resources.play_sound(ResID.SOUND_TOWER_LEVEL_UP)

    def update(self, delta: float) -> None:
        for tower in self.towers:
            tower.update(delta)

    def render(self, surface: pygame.Surface) -> None:
        for tower in self.towers:
            tower.render(surface)