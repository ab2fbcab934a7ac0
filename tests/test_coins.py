import random

import pygame
import pytest

from towerdefence.coins import CoinManager, CoinProp
from towerdefence.config import Config
from towerdefence.resources import ResID, Resources
from towerdefence.tilemap import SIZE_TILE
from towerdefence.vector import Vector2


@pytest.fixture
def manager():
    resources = Resources()
    texture = pygame.Surface((16, 16))
    texture.fill((255, 0, 0))
    resources.textures[ResID.TEX_COIN] = texture
    return CoinManager(Config(), resources, random.Random(3), lambda: 0.0)


def test_initial_coin_count(manager):
    assert manager.num_coin == Config.INITIAL_COIN


def test_increase_adds(manager):
    manager.increase(25)
    assert manager.num_coin == Config.INITIAL_COIN + 25


def test_decrease_clamps_at_zero(manager):
    manager.decrease(Config.INITIAL_COIN * 5)
    assert manager.num_coin == 0


def test_spawned_prop_starts_with_jump_velocity(manager):
    prop = manager.spawn(Vector2(40, 60))
    assert prop in manager.props
    assert prop.position == Vector2(40, 60)
    assert abs(prop.velocity.x) == 2 * SIZE_TILE
    assert prop.velocity.y == -3 * SIZE_TILE


def test_prop_copies_position():
    origin = Vector2(5, 5)
    prop = CoinProp(origin, random.Random(1), lambda: 0.0)
    prop.update(0.1)
    assert origin == Vector2(5, 5)


def test_gravity_slows_the_rise():
    prop = CoinProp(Vector2(100, 100), random.Random(1), lambda: 0.0)
    prop.update(0.1)
    assert prop.velocity.y > -3 * SIZE_TILE
    assert prop.position.y < 100
    assert prop.jumping


def test_after_jump_coin_bobs_with_clock():
    prop = CoinProp(Vector2(100, 100), random.Random(1), lambda: 0.0)
    prop.update(0.8)
    assert not prop.jumping
    resting = Vector2(prop.position.x, prop.position.y)
    prop.update(0.1)
    assert prop.velocity == Vector2(0.0, 0.0)
    assert prop.position == resting


def test_props_disappear_after_timeout(manager):
    manager.spawn(Vector2(40, 60))
    manager.update(5.0)
    assert len(manager.props) == 1
    manager.update(5.0)
    assert manager.props == []


def test_invalid_prop_is_removed(manager):
    prop = manager.spawn(Vector2(40, 60))
    prop.make_invalid()
    assert prop.can_remove()
    manager.update(0.01)
    assert manager.props == []


def test_render_draws_coin_texture(manager):
    manager.spawn(Vector2(50, 50))
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    manager.render(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)