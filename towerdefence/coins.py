"""Coin pickups dropped by enemies and the player's coin purse."""

from __future__ import annotations

import math
import random
import time
from typing import Callable, Optional

import pygame

from towerdefence.config import Config
from towerdefence.resources import ResID, Resources
from towerdefence.tilemap import SIZE_TILE
from towerdefence.timer import Timer
from towerdefence.vector import Vector2

_JUMPING_INTERVAL = 0.75
_DISAPPEAR_INTERVAL = 10.0
_GRAVITY = 490.0
_COIN_SIZE = 16


class CoinProp:
    """A coin that hops out sideways, then bobs in place until it vanishes."""

    def __init__(
        self,
        position: Vector2,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.monotonic
        self.position = Vector2(position.x, position.y)
        self.size = Vector2(_COIN_SIZE, _COIN_SIZE)
        side = 1 if rng.randrange(2) else -1
        self.velocity = Vector2(side * 2 * SIZE_TILE, -3 * SIZE_TILE)
        self.jumping = True
        self._valid = True
        self._timer_jump = Timer(_JUMPING_INTERVAL, True, self._end_jump)
        self._timer_disappear = Timer(_DISAPPEAR_INTERVAL, True, self.make_invalid)

    def _end_jump(self) -> None:
        self.jumping = False

    def make_invalid(self) -> None:
        self._valid = False

    def can_remove(self) -> bool:
        return not self._valid

    def update(self, delta: float) -> None:
        self._timer_jump.update(delta)
        self._timer_disappear.update(delta)

        if self.jumping:
            self.velocity.y += _GRAVITY * delta
        else:
            self.velocity.x = 0.0
            self.velocity.y = math.sin(self._clock() * 4) * 30

        self.position = self.position + self.velocity * delta

    def render(self, surface: pygame.Surface, texture: pygame.Surface) -> None:
        width, height = int(self.size.x), int(self.size.y)
        if texture.get_size() != (width, height):
            texture = pygame.transform.scale(texture, (width, height))
        surface.blit(
            texture,
            (int(self.position.x - self.size.x / 2), int(self.position.y - self.size.y / 2)),
        )


class CoinManager:
    """Holds the coin count and the coin pickups on the field."""

    def __init__(
        self,
        config: Config,
        resources: Resources,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.resources = resources
        self.num_coin = config.INITIAL_COIN
        self.props: list[CoinProp] = []
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock

    def increase(self, val: float) -> None:
        self.num_coin += val

    def decrease(self, val: float) -> None:
        self.num_coin -= val
        if self.num_coin <= 0:
            self.num_coin = 0

    def spawn(self, position: Vector2) -> CoinProp:
        prop = CoinProp(position, self._rng, self._clock)
        self.props.append(prop)
        return prop

    def update(self, delta: float) -> None:
        for prop in self.props:
            prop.update(delta)
        self.props = [prop for prop in self.props if not prop.can_remove()]

    def render(self, surface: pygame.Surface) -> None:
        if not self.props:
            return
        texture = self.resources.texture(ResID.TEX_COIN)
        for prop in self.props:
            prop.render(surface, texture)