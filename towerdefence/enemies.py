"""Enemies that walk a route toward the home."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import pygame

from towerdefence.animation import Animation
from towerdefence.config import Config
from towerdefence.kinds import EnemyType, Facing
from towerdefence.resources import ResID, Resources
from towerdefence.tilemap import SIZE_TILE, Route
from towerdefence.timer import Timer
from towerdefence.vector import Vector2

_FRAME_INTERVAL = 0.1
_SKETCH_DURATION = 0.075
_SLOW_AMOUNT = 0.5
_SLOW_DURATION = 1.0
_ENEMY_SIZE = 48
_HP_BAR_SIZE = (40, 8)
_HP_BAR_OFFSET_Y = 2
_COLOR_BORDER = (116, 185, 124, 255)
_COLOR_CONTENT = (226, 255, 194, 255)


@dataclass(frozen=True)
class _Sprite:
    texture: ResID
    sketch: ResID
    columns: int
    rows: int
    frames: dict


def _five_by_four(texture: ResID, sketch: ResID) -> _Sprite:
    return _Sprite(
        texture,
        sketch,
        5,
        4,
        {
            Facing.DOWN: range(0, 5),
            Facing.UP: range(5, 10),
            Facing.RIGHT: range(10, 15),
            Facing.LEFT: range(15, 20),
        },
    )


_SPRITES = {
    EnemyType.SLIM: _Sprite(
        ResID.TEX_SLIME,
        ResID.TEX_SLIME_SKETCH,
        6,
        4,
        {
            Facing.DOWN: range(0, 6),
            Facing.UP: range(6, 12),
            Facing.RIGHT: range(12, 18),
            Facing.LEFT: range(18, 24),
        },
    ),
    EnemyType.KING_SLIM: _Sprite(
        ResID.TEX_KING_SLIME,
        ResID.TEX_KING_SLIME_SKETCH,
        6,
        4,
        {
            Facing.DOWN: range(0, 6),
            Facing.LEFT: range(6, 12),
            Facing.RIGHT: range(12, 18),
            Facing.UP: range(18, 24),
        },
    ),
    EnemyType.SKELETON: _five_by_four(ResID.TEX_SKELETON, ResID.TEX_SKELETON_SKETCH),
    EnemyType.GOBLIN: _five_by_four(ResID.TEX_GOBLIN, ResID.TEX_GOBLIN_SKETCH),
    EnemyType.GOBLIN_PRIEST: _five_by_four(
        ResID.TEX_GOBLIN_PRIEST, ResID.TEX_GOBLIN_PRIEST_SKETCH
    ),
}


class Enemy:
    """An enemy of one :class:`EnemyType`, walking its route tile by tile."""

    def __init__(self, enemy_type: EnemyType, config: Config, resources: Resources) -> None:
        self.enemy_type = enemy_type
        self.config = config
        template = config.enemy_template(enemy_type)
        self.max_hp = template.hp
        self.hp = self.max_hp
        self.max_speed = template.speed
        self.speed = self.max_speed
        self.damage = template.damage
        self.reward_ratio = template.damage
        self.recover_interval = template.recover_interval
        self.recover_range = template.recover_range
        self.recover_intensity = template.recover_intensity

        self.size = Vector2(_ENEMY_SIZE, _ENEMY_SIZE)
        self.position = Vector2()
        self.velocity = Vector2()
        self.direction = Vector2()
        self.on_skill_released: Optional[Callable[[Enemy], None]] = None

        self.route: Optional[Route] = None
        self.idx_target = 0
        self.position_target = Vector2()

        self._valid = True
        self._show_sketch = False
        self._timer_skill = Timer(0.0, False, self._release_skill)
        self._timer_sketch = Timer(_SKETCH_DURATION, True, self._hide_sketch)
        self._timer_restore_speed = Timer(0.0, True, self._restore_speed)

        sprite = _SPRITES[enemy_type]
        self._animations: dict[bool, dict[Facing, Animation]] = {}
        for sketch, res_id in ((False, sprite.texture), (True, sprite.sketch)):
            texture = resources.texture(res_id)
            animations = {}
            for facing, indices in sprite.frames.items():
                animation = Animation(_FRAME_INTERVAL, True)
                animation.set_frames(texture, sprite.columns, sprite.rows, indices)
                animations[facing] = animation
            self._animations[sketch] = animations
        self._anim_current: Optional[Animation] = None

    @property
    def name(self) -> str:
        return self.enemy_type.value

    def _release_skill(self) -> None:
        if self.on_skill_released is not None:
            self.on_skill_released(self)

    def _hide_sketch(self) -> None:
        self._show_sketch = False

    def _restore_speed(self) -> None:
        self.speed = self.max_speed

    def set_route(self, route: Route) -> None:
        self.route = route
        self._refresh_target_position()

    def _refresh_target_position(self) -> None:
        if self.route is None or self.idx_target >= len(self.route):
            return
        x, y = self.route[self.idx_target]
        rect = self.config.rect_tile_map
        self.position_target = Vector2(
            rect.x + x * SIZE_TILE + SIZE_TILE // 2,
            rect.y + y * SIZE_TILE + SIZE_TILE // 2,
        )

    def update(self, delta: float) -> None:
        self._timer_skill.update(delta)
        self._timer_sketch.update(delta)
        self._timer_restore_speed.update(delta)

        move_distance = self.velocity * delta
        target_distance = self.position_target - self.position
        step = move_distance if move_distance < target_distance else target_distance
        self.position = self.position + step

        if (self.position_target - self.position).approx_zero():
            self.idx_target += 1
            self._refresh_target_position()
            self.direction = (self.position_target - self.position).normalize()

        self.velocity = self.direction * (self.speed * SIZE_TILE)

        if abs(self.direction.x) > abs(self.direction.y):
            facing = Facing.RIGHT if self.direction.x > 0 else Facing.LEFT
        else:
            facing = Facing.DOWN if self.direction.y > 0 else Facing.UP
        self._anim_current = self._animations[self._show_sketch][facing]
        self._anim_current.update(delta)

    def render(self, surface: pygame.Surface) -> None:
        if self._anim_current is not None:
            point = (
                int(self.position.x - self.size.x / 2),
                int(self.position.y - self.size.y / 2),
            )
            self._anim_current.render(surface, point)

        if self.hp < self.max_hp:
            bar_w, bar_h = _HP_BAR_SIZE
            x = int(self.position.x - bar_w / 2)
            y = int(self.position.y - self.size.y / 2 - bar_h - _HP_BAR_OFFSET_Y)
            fill_w = int(bar_w * (self.hp / self.max_hp))
            if fill_w > 0:
                pygame.draw.rect(surface, _COLOR_CONTENT, pygame.Rect(x, y, fill_w, bar_h))
            pygame.draw.rect(surface, _COLOR_BORDER, pygame.Rect(x, y, bar_w, bar_h), 1)

    def increase_hp(self, val: float) -> None:
        self.hp = min(self.hp + val, self.max_hp)

    def decrease_hp(self, val: float) -> None:
        self.hp -= val
        if self.hp <= 0:
            self.hp = 0
            self._valid = False
        self._show_sketch = True
        self._timer_sketch.restart()

    def slow_down(self) -> None:
        self.speed = self.max_speed - _SLOW_AMOUNT
        self._timer_restore_speed.wait_time = _SLOW_DURATION
        self._timer_restore_speed.restart()

    def make_invalid(self) -> None:
        self._valid = False

    def can_remove(self) -> bool:
        return not self._valid

    def recover_radius(self) -> float:
        return SIZE_TILE * self.recover_range

    def route_progress(self) -> float:
        """Index of the target tile relative to the last tile of the route."""
        if self.route is None:
            raise ValueError("enemy has no route")
        if len(self.route) == 1:
            return 1.0
        return self.idx_target / (len(self.route) - 1)