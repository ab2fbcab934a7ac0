"""Projectiles fired by towers."""

from __future__ import annotations

import math
import random

import pygame

from towerdefence.animation import Animation
from towerdefence.config import Config
from towerdefence.resources import ResID, Resources
from towerdefence.vector import Vector2

_ARROW_HIT_SOUNDS = (
    ResID.SOUND_ARROW_HIT_1,
    ResID.SOUND_ARROW_HIT_2,
    ResID.SOUND_ARROW_HIT_3,
)
_AXE_HIT_SOUNDS = (
    ResID.SOUND_AXE_HIT_1,
    ResID.SOUND_AXE_HIT_2,
    ResID.SOUND_AXE_HIT_3,
)


class Bullet:
    """A moving projectile that dies when it leaves the map or hits an enemy."""

    def __init__(self, config: Config, resources: Resources) -> None:
        self.config = config
        self.resources = resources
        self.size = Vector2()
        self.position = Vector2()
        self.damage = 0.0
        self.damage_range = -1.0
        self.can_rotate = False
        self.angle = 0.0
        self.animation = Animation()
        self._velocity = Vector2()
        self._valid = True
        self._collisional = True

    @property
    def velocity(self) -> Vector2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vector2) -> None:
        self._velocity = Vector2(value.x, value.y)
        if self.can_rotate:
            self.angle = math.degrees(math.atan2(value.y, value.x))

    @property
    def collisional(self) -> bool:
        """Whether the bullet can still hit an enemy."""
        return self._collisional

    def disable_collide(self) -> None:
        self._collisional = False

    def make_invalid(self) -> None:
        self._valid = False
        self._collisional = False

    def can_remove(self) -> bool:
        return not self._valid

    def update(self, delta: float) -> None:
        self.animation.update(delta)
        self.position = self.position + self._velocity * delta

        rect = self.config.rect_tile_map
        half_w, half_h = self.size.x / 2, self.size.y / 2
        if (
            self.position.x - half_w <= rect.x
            or self.position.x + half_w >= rect.x + rect.w
            or self.position.y - half_h <= rect.y
            or self.position.y + half_h >= rect.y + rect.h
        ):
            self._valid = False

    def render(self, surface: pygame.Surface) -> None:
        point = (
            int(self.position.x - self.size.x / 2),
            int(self.position.y - self.size.y / 2),
        )
        self.animation.render(surface, point, self.angle)

    def on_collide(self, enemy) -> None:
        self.make_invalid()


class ArrowBullet(Bullet):
    """An arrow that turns to face its direction of flight."""

    def __init__(self, config: Config, resources: Resources) -> None:
        super().__init__(config, resources)
        self.animation = Animation(0.1, True)
        self.animation.set_frames(resources.texture(ResID.TEX_BULLET_ARROW), 2, 1, [0, 1])
        self.can_rotate = True
        self.size = Vector2(48, 48)

    def on_collide(self, enemy) -> None:
        self.resources.play_sound(random.choice(_ARROW_HIT_SOUNDS))
        super().on_collide(enemy)


class AxeBullet(Bullet):
    """A spinning axe that slows the enemy it hits."""

    def __init__(self, config: Config, resources: Resources) -> None:
        super().__init__(config, resources)
        self.animation = Animation(0.1, True)
        self.animation.set_frames(resources.texture(ResID.TEX_BULLET_AXE), 4, 2, range(8))
        self.size = Vector2(48, 48)

    def on_collide(self, enemy) -> None:
        self.resources.play_sound(random.choice(_AXE_HIT_SOUNDS))
        enemy.slow_down()
        super().on_collide(enemy)


class ShellBullet(Bullet):
    """A shell that explodes on impact and damages everything in range."""

    def __init__(self, config: Config, resources: Resources) -> None:
        super().__init__(config, resources)
        self.animation = Animation(0.1, True)
        self.animation.set_frames(resources.texture(ResID.TEX_BULLET_SHELL), 2, 1, [0, 1])
        self.size = Vector2(48, 48)

        self.explode_animation = Animation(0.1, False, self.make_invalid)
        self.explode_animation.set_frames(
            resources.texture(ResID.TEX_EFFECT_EXPLODE), 5, 1, range(5)
        )
        self.damage_range = 96.0
        self.explode_size = Vector2(96, 96)

    def on_collide(self, enemy) -> None:
        self.resources.play_sound(ResID.SOUND_SHELL_HIT)
        self.disable_collide()

    def update(self, delta: float) -> None:
        if self.collisional:
            super().update(delta)
            return
        self.explode_animation.update(delta)

    def render(self, surface: pygame.Surface) -> None:
        if self.collisional:
            super().render(surface)
            return
        point = (
            int(self.position.x - self.explode_size.x / 2),
            int(self.position.y - self.explode_size.y / 2),
        )
        self.explode_animation.render(surface, point)