"""Owner of every enemy on the field, with their collisions."""

from __future__ import annotations

import random
from typing import Optional

import pygame

from towerdefence.bullet_manager import BulletManager
from towerdefence.coins import CoinManager
from towerdefence.config import Config
from towerdefence.enemies import Enemy
from towerdefence.home import HomeManager
from towerdefence.kinds import EnemyType
from towerdefence.resources import Resources
from towerdefence.tilemap import SIZE_TILE
from towerdefence.vector import Vector2


class EnemyManager:
    """Spawns enemies, moves them and resolves hits on the home and by bullets."""

    def __init__(
        self,
        config: Config,
        resources: Resources,
        bullets: BulletManager,
        coins: CoinManager,
        home: HomeManager,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.resources = resources
        self.bullets = bullets
        self.coins = coins
        self.home = home
        self.enemies: list[Enemy] = []
        self._rng = rng if rng is not None else random.Random()

    def spawn(self, enemy_type: EnemyType, spawn_point: int) -> Optional[Enemy]:
        """Create an enemy at the start of the route for ``spawn_point``.

        Returns ``None`` when the map has no such spawn point.
        """
        route = self.config.game_map.spawner_routes.get(spawn_point)
        if route is None:
            return None

        enemy = Enemy(enemy_type, self.config, self.resources)
        enemy.on_skill_released = self._recover_around

        rect = self.config.rect_tile_map
        x, y = route[0]
        enemy.position = Vector2(
            rect.x + x * SIZE_TILE + SIZE_TILE // 2,
            rect.y + y * SIZE_TILE + SIZE_TILE // 2,
        )
        enemy.set_route(route)
        self.enemies.append(enemy)
        return enemy

    def cleared(self) -> bool:
        return not self.enemies

    def update(self, delta: float) -> None:
        for enemy in self.enemies:
            enemy.update(delta)
        self._process_home_collision()
        self._process_bullet_collision()
        self.enemies = [enemy for enemy in self.enemies if not enemy.can_remove()]

    def render(self, surface: pygame.Surface) -> None:
        for enemy in self.enemies:
            enemy.render(surface)

    def _recover_around(self, source: Enemy) -> None:
        radius = source.recover_radius()
        if radius < 0:
            return
        for target in self.enemies:
            if (target.position - source.position).length() <= radius:
                target.increase_hp(source.recover_intensity)

    def _process_home_collision(self) -> None:
        rect = self.config.rect_tile_map
        home_x, home_y = self.config.game_map.idx_home
        left = rect.x + home_x * SIZE_TILE
        top = rect.y + home_y * SIZE_TILE

        for enemy in self.enemies:
            if enemy.can_remove():
                continue
            pos = enemy.position
            if left <= pos.x <= left + SIZE_TILE and top <= pos.y <= top + SIZE_TILE:
                enemy.make_invalid()
                self.home.decrease_hp(enemy.damage)

    def _process_bullet_collision(self) -> None:
        for enemy in self.enemies:
            if enemy.can_remove():
                continue
            enemy_pos = enemy.position
            half_w, half_h = enemy.size.x / 2, enemy.size.y / 2

            for bullet in self.bullets.bullets:
                if not bullet.collisional:
                    continue
                bullet_pos = bullet.position
                if not (
                    enemy_pos.x - half_w <= bullet_pos.x <= enemy_pos.x + half_w
                    and enemy_pos.y - half_h <= bullet_pos.y <= enemy_pos.y + half_h
                ):
                    continue

                if bullet.damage_range < 0:
                    self._hit(enemy, bullet.damage)
                else:
                    for target in self.enemies:
                        if (target.position - bullet_pos).length() <= bullet.damage_range:
                            self._hit(target, bullet.damage)

                bullet.on_collide(enemy)

    def _hit(self, enemy: Enemy, damage: float) -> None:
        enemy.decrease_hp(damage)
        if enemy.can_remove():
            self._try_spawn_coin(enemy.position, enemy.reward_ratio)

    def _try_spawn_coin(self, position: Vector2, ratio: float) -> None:
        if self._rng.randrange(100) / 100 <= ratio:
            self.coins.spawn(position)