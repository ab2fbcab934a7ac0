"""Towers that shoot at the enemy furthest along its route."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

import pygame

from towerdefence.animation import Animation
from towerdefence.bullet_manager import BulletManager
from towerdefence.config import Config
from towerdefence.enemies import Enemy
from towerdefence.enemy_manager import EnemyManager
from towerdefence.kinds import BulletType, Facing, TowerType
from towerdefence.resources import ResID, Resources
from towerdefence.tilemap import SIZE_TILE
from towerdefence.timer import Timer
from towerdefence.vector import Vector2

_FRAME_INTERVAL = 0.2
_TOWER_SIZE = 48
_ROWS = 8


@dataclass(frozen=True)
class _Kind:
    texture: ResID
    columns: int
    idle: dict
    fire: dict
    fire_speed: float
    bullet_type: BulletType
    fire_sounds: tuple


_KINDS = {
    TowerType.ARCHER: _Kind(
        ResID.TEX_ARCHER,
        3,
        {Facing.UP: [3, 4], Facing.DOWN: [0, 1], Facing.LEFT: [6, 7], Facing.RIGHT: [9, 10]},
        {
            Facing.UP: [15, 16, 17],
            Facing.DOWN: [12, 13, 14],
            Facing.LEFT: [18, 19, 20],
            Facing.RIGHT: [21, 22, 23],
        },
        6.0,
        BulletType.ARROW,
        (ResID.SOUND_ARROW_FIRE_1, ResID.SOUND_ARROW_FIRE_2),
    ),
    TowerType.AXEMAN: _Kind(
        ResID.TEX_AXEMAN,
        3,
        {Facing.UP: [3, 4], Facing.DOWN: [0, 1], Facing.LEFT: [9, 10], Facing.RIGHT: [6, 7]},
        {
            Facing.UP: [15, 16, 17],
            Facing.DOWN: [12, 13, 14],
            Facing.LEFT: [21, 22, 23],
            Facing.RIGHT: [18, 19, 20],
        },
        5.0,
        BulletType.AXE,
        (ResID.SOUND_AXE_FIRE,),
    ),
    TowerType.GUNNER: _Kind(
        ResID.TEX_GUNNER,
        4,
        {Facing.UP: [4, 5], Facing.DOWN: [0, 1], Facing.LEFT: [12, 13], Facing.RIGHT: [8, 9]},
        {
            Facing.UP: [20, 21, 22, 23],
            Facing.DOWN: [16, 17, 18, 19],
            Facing.LEFT: [28, 29, 30, 31],
            Facing.RIGHT: [24, 25, 26, 27],
        },
        6.0,
        BulletType.SHELL,
        (ResID.SOUND_SHELL_FIRE,),
    ),
}


class Tower:
    """A tower of one :class:`TowerType` whose stats follow the type's level."""

    def __init__(
        self,
        tower_type: TowerType,
        config: Config,
        resources: Resources,
        enemies: EnemyManager,
        bullets: BulletManager,
    ) -> None:
        self.tower_type = tower_type
        self.config = config
        self.resources = resources
        self.enemies = enemies
        self.bullets = bullets

        kind = _KINDS[tower_type]
        self._kind = kind
        self.fire_speed = kind.fire_speed
        self.bullet_type = kind.bullet_type
        self.size = Vector2(_TOWER_SIZE, _TOWER_SIZE)
        self.position = Vector2()
        self.facing = Facing.RIGHT
        self.can_fire = True
        self._timer_fire = Timer(0.0, True, self._ready)

        texture = resources.texture(kind.texture)
        self._idle: dict[Facing, Animation] = {}
        self._fire: dict[Facing, Animation] = {}
        for facing in Facing:
            idle = Animation(_FRAME_INTERVAL, True)
            idle.set_frames(texture, kind.columns, _ROWS, kind.idle[facing])
            self._idle[facing] = idle
            fire = Animation(_FRAME_INTERVAL, False, self._show_idle)
            fire.set_frames(texture, kind.columns, _ROWS, kind.fire[facing])
            self._fire[facing] = fire
        self._anim_current = self._idle[Facing.RIGHT]

    @property
    def animation(self) -> Animation:
        """The animation currently playing."""
        return self._anim_current

    def _ready(self) -> None:
        self.can_fire = True

    def _show_idle(self) -> None:
        self._anim_current = self._idle[self.facing]

    def target_enemy(self) -> Optional[Enemy]:
        """The enemy in view that is furthest along its route, if any."""
        template = self.config.tower_template(self.tower_type)
        view_range = template.view_range[self.config.tower_level(self.tower_type)]
        best: Optional[Enemy] = None
        best_progress = -1.0
        for enemy in self.enemies.enemies:
            if (self.position - enemy.position).length() <= view_range * SIZE_TILE:
                progress = enemy.route_progress()
                if progress > best_progress:
                    best_progress = progress
                    best = enemy
        return best

    def update(self, delta: float) -> None:
        self._timer_fire.update(delta)
        self._anim_current.update(delta)
        if self.can_fire:
            self._fire_at_target()

    def render(self, surface: pygame.Surface) -> None:
        point = (
            int(self.position.x - self.size.x / 2),
            int(self.position.y - self.size.y / 2),
        )
        self._anim_current.render(surface, point)

    def _fire_at_target(self) -> None:
        target = self.target_enemy()
        if target is None:
            return

        self.can_fire = False
        template = self.config.tower_template(self.tower_type)
        level = self.config.tower_level(self.tower_type)
        damage = template.damage[level]
        self._timer_fire.wait_time = template.interval[level]
        self._timer_fire.restart()
        self.resources.play_sound(random.choice(self._kind.fire_sounds))

        direction = (target.position - self.position).normalize()
        self.bullets.fire(
            self.bullet_type,
            self.position,
            direction * (self.fire_speed * SIZE_TILE),
            damage,
        )

        if abs(direction.x) > abs(direction.y):
            self.facing = Facing.RIGHT if direction.x > 0 else Facing.LEFT
        else:
            self.facing = Facing.DOWN if direction.y > 0 else Facing.UP
        self._anim_current = self._fire[self.facing]
        self._anim_current.reset()