"""The player character: movement, flash and impact skills, coin pickup."""

from __future__ import annotations

from typing import Optional

import pygame

from towerdefence.animation import Animation
from towerdefence.coins import CoinManager
from towerdefence.config import Config
from towerdefence.enemy_manager import EnemyManager
from towerdefence.kinds import Facing
from towerdefence.resources import ResID, Resources
from towerdefence.tilemap import SIZE_TILE
from towerdefence.timer import Timer
from towerdefence.vector import Vector2

_FRAME_INTERVAL = 0.1
_MP_TICK = 0.1
_MAX_MP = 100
_PLAYER_SIZE = 96
_COIN_VALUE = 10
_FLASH_LENGTH, _FLASH_BREADTH = 300, 68
_IMPACT_LENGTH, _IMPACT_BREADTH = 60, 140

_MOVE_KEYS = {
    pygame.K_w: Facing.UP,
    pygame.K_a: Facing.LEFT,
    pygame.K_s: Facing.DOWN,
    pygame.K_d: Facing.RIGHT,
}

_IDLE_FRAMES = {
    Facing.UP: [4, 5, 6, 7],
    Facing.DOWN: [0, 1, 2, 3],
    Facing.LEFT: [8, 9, 10, 11],
    Facing.RIGHT: [12, 13, 14, 15],
}
_ATTACK_FRAMES = {
    Facing.UP: [20, 21],
    Facing.DOWN: [16, 17],
    Facing.LEFT: [24, 25],
    Facing.RIGHT: [28, 29],
}

# (columns, rows, frame order) of the effect sheets per facing.
_EFFECT_LAYOUT = {
    Facing.UP: (5, 1, [0, 1, 2, 3, 4]),
    Facing.DOWN: (5, 1, [4, 3, 2, 1, 0]),
    Facing.LEFT: (1, 5, [4, 3, 2, 1, 0]),
    Facing.RIGHT: (1, 5, [0, 1, 2, 3, 4]),
}
_FLASH_TEXTURES = {
    Facing.UP: ResID.TEX_EFFECT_FLASH_UP,
    Facing.DOWN: ResID.TEX_EFFECT_FLASH_DOWN,
    Facing.LEFT: ResID.TEX_EFFECT_FLASH_LEFT,
    Facing.RIGHT: ResID.TEX_EFFECT_FLASH_RIGHT,
}
_IMPACT_TEXTURES = {
    Facing.UP: ResID.TEX_EFFECT_IMPACT_UP,
    Facing.DOWN: ResID.TEX_EFFECT_IMPACT_DOWN,
    Facing.LEFT: ResID.TEX_EFFECT_IMPACT_LEFT,
    Facing.RIGHT: ResID.TEX_EFFECT_IMPACT_RIGHT,
}


def _inside(rect: pygame.Rect, pos: Vector2) -> bool:
    return rect.x <= pos.x <= rect.x + rect.w and rect.y <= pos.y <= rect.y + rect.h


class PlayerManager:
    """The controllable hero who fights alongside the towers."""

    def __init__(
        self,
        config: Config,
        resources: Resources,
        enemies: EnemyManager,
        coins: CoinManager,
    ) -> None:
        self.config = config
        self.resources = resources
        self.enemies = enemies
        self.coins = coins

        template = config.player_template
        self.size = Vector2(_PLAYER_SIZE, _PLAYER_SIZE)
        rect = config.rect_tile_map
        self.position = Vector2(rect.x + rect.w // 2, rect.y + rect.h // 2)
        self.velocity = Vector2()
        self.speed = template.speed
        self.mp = float(_MAX_MP)
        self.facing = Facing.RIGHT

        self.can_release_flash = True
        self.releasing_flash = False
        self.releasing_impact = False
        self.flash_hitbox = pygame.Rect(0, 0, 0, 0)
        self.impact_hitbox = pygame.Rect(0, 0, 0, 0)
        self._moving = {facing: False for facing in Facing}

        self._timer_mp = Timer(_MP_TICK, False, self._regenerate_mp)
        self._timer_flash_cd = Timer(template.skill_interval, True, self._flash_ready)

        tex_player = resources.texture(ResID.TEX_PLAYER)
        self._idle = {
            facing: self._animation(tex_player, 4, 8, frames, True)
            for facing, frames in _IDLE_FRAMES.items()
        }
        self._attack = {
            facing: self._animation(tex_player, 4, 8, frames, True)
            for facing, frames in _ATTACK_FRAMES.items()
        }
        self._flash = {
            facing: self._animation(
                resources.texture(_FLASH_TEXTURES[facing]),
                *_EFFECT_LAYOUT[facing],
                False,
                self._end_flash,
            )
            for facing in Facing
        }
        self._impact = {
            facing: self._animation(
                resources.texture(_IMPACT_TEXTURES[facing]),
                *_EFFECT_LAYOUT[facing],
                False,
                self._end_impact,
            )
            for facing in Facing
        }
        self._anim_current = self._idle[Facing.RIGHT]
        self._anim_flash: Optional[Animation] = None
        self._anim_impact: Optional[Animation] = None

    @staticmethod
    def _animation(texture, columns, rows, frames, loop, on_finished=None) -> Animation:
        animation = Animation(_FRAME_INTERVAL, loop, on_finished)
        animation.set_frames(texture, columns, rows, frames)
        return animation

    def _regenerate_mp(self) -> None:
        interval = self.config.player_template.skill_interval
        self.mp = float(min(int(self.mp + _MAX_MP / (interval / _MP_TICK)), _MAX_MP))

    def _flash_ready(self) -> None:
        self.can_release_flash = True

    def _end_flash(self) -> None:
        self.releasing_flash = False

    def _end_impact(self) -> None:
        self.releasing_impact = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in _MOVE_KEYS:
                self._moving[_MOVE_KEYS[event.key]] = True
            elif event.key == pygame.K_j:
                self.release_flash()
            elif event.key == pygame.K_k:
                self.release_impact()
        elif event.type == pygame.KEYUP and event.key in _MOVE_KEYS:
            self._moving[_MOVE_KEYS[event.key]] = False

    def _hitbox(self, length: int, breadth: int) -> pygame.Rect:
        half = self.size.x / 2
        px, py = self.position.x, self.position.y
        if self.facing is Facing.LEFT:
            return pygame.Rect(int(px - half - length), int(py - breadth // 2), length, breadth)
        if self.facing is Facing.RIGHT:
            return pygame.Rect(int(px + half), int(py - breadth // 2), length, breadth)
        if self.facing is Facing.UP:
            return pygame.Rect(int(px - breadth // 2), int(py - half - length), breadth, length)
        return pygame.Rect(int(px - breadth // 2), int(py + half), breadth, length)

    def release_flash(self) -> None:
        """Start the flash attack in the facing direction, if it is available."""
        if not self.can_release_flash or self.releasing_flash:
            return
        self._anim_flash = self._flash[self.facing]
        self.flash_hitbox = self._hitbox(_FLASH_LENGTH, _FLASH_BREADTH)
        self.releasing_flash = True
        self._anim_flash.reset()
        self._timer_flash_cd.restart()
        self.resources.play_sound(ResID.SOUND_FLASH)

    def release_impact(self) -> None:
        """Spend a full mana bar on the impact skill in the facing direction."""
        if self.mp < _MAX_MP or self.releasing_impact:
            return
        self._anim_impact = self._impact[self.facing]
        self.impact_hitbox = self._hitbox(_IMPACT_LENGTH, _IMPACT_BREADTH)
        self.mp = 0.0
        self.releasing_impact = True
        self._anim_impact.reset()
        self.resources.play_sound(ResID.SOUND_IMPACT)

    def update(self, delta: float) -> None:
        self._timer_mp.update(delta)
        self._timer_flash_cd.update(delta)

        moving = self._moving
        direction = Vector2(
            float(moving[Facing.RIGHT]) - moving[Facing.LEFT],
            float(moving[Facing.DOWN]) - moving[Facing.UP],
        ).normalize()
        self.velocity = direction * (self.speed * SIZE_TILE)

        if not self.releasing_flash and not self.releasing_impact:
            self.position = self.position + self.velocity * delta
            rect = self.config.rect_tile_map
            self.position.x = min(max(self.position.x, rect.x), rect.x + rect.w)
            self.position.y = min(max(self.position.y, rect.y), rect.y + rect.h)

            if direction.y < 0:
                self.facing = Facing.UP
            if direction.y > 0:
                self.facing = Facing.DOWN
            if direction.x < 0:
                self.facing = Facing.LEFT
            if direction.x > 0:
                self.facing = Facing.RIGHT
            self._anim_current = self._idle[self.facing]
        else:
            self._anim_current = self._attack[self.facing]

        self._anim_current.update(delta)

        if self.releasing_flash and self._anim_flash is not None:
            self._anim_flash.update(delta)
            damage = self.config.player_template.normal_attack_damage * delta
            for enemy in self.enemies.enemies:
                if not enemy.can_remove() and _inside(self.flash_hitbox, enemy.position):
                    enemy.decrease_hp(damage)

        if self.releasing_impact and self._anim_impact is not None:
            self._anim_impact.update(delta)
            damage = self.config.player_template.skill_damage * delta
            for enemy in self.enemies.enemies:
                if not enemy.can_remove() and _inside(self.impact_hitbox, enemy.position):
                    enemy.decrease_hp(damage)
                    enemy.slow_down()

        half_w, half_h = self.size.x / 2, self.size.y / 2
        for prop in self.coins.props:
            if prop.can_remove():
                continue
            pos = prop.position
            if (
                self.position.x - half_w <= pos.x <= self.position.x + half_w
                and self.position.y - half_h <= pos.y <= self.position.y + half_h
            ):
                self.coins.increase(_COIN_VALUE)
                prop.make_invalid()
                self.resources.play_sound(ResID.SOUND_COIN)

    def render(self, surface: pygame.Surface) -> None:
        point = (
            int(self.position.x - self.size.x / 2),
            int(self.position.y - self.size.y / 2),
        )
        self._anim_current.render(surface, point)
        if self.releasing_flash and self._anim_flash is not None:
            self._anim_flash.render(surface, self.flash_hitbox.topleft)
        if self.releasing_impact and self._anim_impact is not None:
            self._anim_impact.render(surface, self.impact_hitbox.topleft)