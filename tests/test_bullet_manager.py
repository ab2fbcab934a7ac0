import pygame
import pytest

from towerdefence.bullet_manager import BulletManager
from towerdefence.bullets import ArrowBullet, AxeBullet, ShellBullet
from towerdefence.config import Config
from towerdefence.kinds import BulletType
from towerdefence.resources import TEXTURE_FILES, ResID, Resources
from towerdefence.vector import Vector2

RED = (255, 0, 0, 255)


def _surface(size, color):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color)
    return surface


@pytest.fixture
def resources():
    res = Resources()
    for res_id in TEXTURE_FILES:
        res.textures[res_id] = _surface((480, 480), (90, 90, 90, 255))
    res.textures[ResID.TEX_BULLET_ARROW] = _surface((96, 48), RED)
    return res


@pytest.fixture
def config():
    cfg = Config()
    cfg.rect_tile_map = pygame.Rect(0, 0, 480, 480)
    return cfg


@pytest.fixture
def manager(config, resources):
    return BulletManager(config, resources)


def test_fire_sets_bullet_state(manager):
    bullet = manager.fire(BulletType.ARROW, Vector2(100, 120), Vector2(5, 0), 7.5)
    assert manager.bullets == [bullet]
    assert bullet.position == Vector2(100, 120)
    assert bullet.velocity == Vector2(5, 0)
    assert bullet.damage == 7.5


@pytest.mark.parametrize(
    "bullet_type, expected",
    [
        (BulletType.ARROW, ArrowBullet),
        (BulletType.AXE, AxeBullet),
        (BulletType.SHELL, ShellBullet),
    ],
)
def test_fire_creates_matching_class(manager, bullet_type, expected):
    bullet = manager.fire(bullet_type, Vector2(200, 200), Vector2(1, 1), 1)
    assert type(bullet) is expected


def test_fire_copies_position(manager):
    position = Vector2(200, 200)
    bullet = manager.fire(BulletType.AXE, position, Vector2(0, 0), 1)
    position.x = 10
    assert bullet.position.x == 200


def test_arrow_faces_flight_direction(manager):
    bullet = manager.fire(BulletType.ARROW, Vector2(200, 200), Vector2(0, 10), 1)
    assert bullet.angle == pytest.approx(90.0)


def test_update_removes_bullets_leaving_map(manager):
    manager.fire(BulletType.ARROW, Vector2(240, 240), Vector2(1000, 0), 1)
    kept = manager.fire(BulletType.AXE, Vector2(240, 240), Vector2(0, 0), 1)
    manager.update(1.0)
    assert manager.bullets == [kept]


def test_update_removes_invalidated_bullets(manager):
    first = manager.fire(BulletType.ARROW, Vector2(240, 240), Vector2(0, 0), 1)
    second = manager.fire(BulletType.ARROW, Vector2(240, 240), Vector2(0, 0), 1)
    first.make_invalid()
    manager.update(0.01)
    assert manager.bullets == [second]


def test_update_keeps_order(manager):
    bullets = [
        manager.fire(BulletType.SHELL, Vector2(100 + i * 50, 200), Vector2(0, 0), 1)
        for i in range(4)
    ]
    manager.update(0.01)
    assert manager.bullets == bullets


def test_render_draws_bullet(manager):
    surface = pygame.Surface((480, 480))
    surface.fill((0, 0, 0))
    manager.fire(BulletType.ARROW, Vector2(240, 240), Vector2(1, 0), 1)
    manager.render(surface)
    assert tuple(surface.get_at((240, 240)))[:3] == RED[:3]