"""Owner of every projectile in flight."""

from __future__ import annotations

import pygame

from towerdefence.bullets import ArrowBullet, AxeBullet, Bullet, ShellBullet
from towerdefence.config import Config
from towerdefence.kinds import BulletType
from towerdefence.resources import Resources
from towerdefence.vector import Vector2

_BULLET_CLASSES: dict[BulletType, type[Bullet]] = {
    BulletType.ARROW: ArrowBullet,
    BulletType.AXE: AxeBullet,
    BulletType.SHELL: ShellBullet,
}


class BulletManager:
    """Creates bullets, moves them each frame and drops the spent ones."""

    def __init__(self, config: Config, resources: Resources) -> None:
        self.config = config
        self.resources = resources
        self.bullets: list[Bullet] = []

    def fire(
        self,
        bullet_type: BulletType,
        position: Vector2,
        velocity: Vector2,
        damage: float,
    ) -> Bullet:
        """Launch a new bullet and return it."""
        bullet_class = _BULLET_CLASSES.get(bullet_type, ArrowBullet)
        bullet = bullet_class(self.config, self.resources)
        bullet.position = Vector2(position.x, position.y)
        bullet.velocity = velocity
        bullet.damage = damage
        self.bullets.append(bullet)
        return bullet

    def update(self, delta: float) -> None:
        for bullet in self.bullets:
            bullet.update(delta)
        self.bullets = [bullet for bullet in self.bullets if not bullet.can_remove()]

    def render(self, surface: pygame.Surface) -> None:
        for bullet in self.bullets:
            bullet.render(surface)