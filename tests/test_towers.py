import random

import pygame
import pytest

from towerdefence.bullet_manager import BulletManager
from towerdefence.bullets import ArrowBullet, AxeBullet, ShellBullet
from towerdefence.coins import CoinManager
from towerdefence.config import Config
from towerdefence.enemy_manager import EnemyManager
from towerdefence.home import HomeManager
from towerdefence.kinds import EnemyType, Facing, TowerType
from towerdefence.resources import TEXTURE_FILES, Resources
from towerdefence.tilemap import SIZE_TILE
from towerdefence.towers import Tower
from towerdefence.vector import Vector2

_CELLS = [r"0\-1\4\1", r"0\-1\4", r"0\-1\4", r"0\-1\4", r"0\-1\0\0"]


def _world():
    config = Config()
    config.game_map.parse(",".join(_CELLS) + "\n")
    config.rect_tile_map = pygame.Rect(0, 0, 240, 48)
    resources = Resources()
    for res_id in TEXTURE_FILES:
        resources.textures[res_id] = pygame.Surface((192, 384))
    bullets = BulletManager(config, resources)
    coins = CoinManager(config, resources, random.Random(1), lambda: 0.0)
    home = HomeManager(config, resources)
    enemies = EnemyManager(config, resources, bullets, coins, home, random.Random(0))
    return config, resources, enemies, bullets


def _tower(tower_type, position):
    config, resources, enemies, bullets = _world()
    tower = Tower(tower_type, config, resources, enemies, bullets)
    tower.position = position
    return tower, config, enemies, bullets


def test_no_enemy_means_no_shot():
    tower, _, _, bullets = _tower(TowerType.ARCHER, Vector2(120, 24))
    tower.update(0.0)
    assert bullets.bullets == []
    assert tower.can_fire


def test_fires_at_enemy_in_range():
    tower, config, enemies, bullets = _tower(TowerType.ARCHER, Vector2(120, 24))
    enemies.spawn(EnemyType.SLIM, 1)
    tower.update(0.0)
    assert len(bullets.bullets) == 1
    bullet = bullets.bullets[0]
    assert isinstance(bullet, ArrowBullet)
    assert bullet.damage == config.tower_template(TowerType.ARCHER).damage[0]
    assert bullet.velocity.length() == pytest.approx(tower.fire_speed * SIZE_TILE)
    assert bullet.velocity.x < 0
    assert tower.facing == Facing.LEFT
    assert not tower.can_fire


def test_enemy_out_of_range_is_ignored():
    tower, _, enemies, bullets = _tower(TowerType.ARCHER, Vector2(1000, 24))
    enemies.spawn(EnemyType.SLIM, 1)
    assert tower.target_enemy() is None
    tower.update(0.0)
    assert bullets.bullets == []


def test_targets_enemy_furthest_along_route():
    tower, _, enemies, _ = _tower(TowerType.ARCHER, Vector2(120, 24))
    enemies.spawn(EnemyType.SLIM, 1)
    ahead = enemies.spawn(EnemyType.GOBLIN, 1)
    ahead.idx_target = 3
    assert tower.target_enemy() is ahead


def test_waits_for_interval_between_shots():
    tower, config, enemies, bullets = _tower(TowerType.ARCHER, Vector2(120, 24))
    enemies.spawn(EnemyType.SLIM, 1)
    interval = config.tower_template(TowerType.ARCHER).interval[0]
    tower.update(0.0)
    tower.update(interval / 2)
    assert len(bullets.bullets) == 1
    tower.update(interval)
    assert len(bullets.bullets) == 2


def test_damage_follows_tower_level():
    tower, config, enemies, bullets = _tower(TowerType.ARCHER, Vector2(120, 24))
    config.tower_template(TowerType.ARCHER).damage[2] = 40
    config.tower_levels[TowerType.ARCHER] = 2
    enemies.spawn(EnemyType.SLIM, 1)
    tower.update(0.0)
    assert bullets.bullets[0].damage == 40


@pytest.mark.parametrize(
    "tower_type, bullet_class",
    [
        (TowerType.ARCHER, ArrowBullet),
        (TowerType.AXEMAN, AxeBullet),
        (TowerType.GUNNER, ShellBullet),
    ],
)
def test_tower_type_chooses_bullet(tower_type, bullet_class):
    tower, _, enemies, bullets = _tower(tower_type, Vector2(24, 100))
    enemies.spawn(EnemyType.SLIM, 1)
    tower.update(0.0)
    assert isinstance(bullets.bullets[0], bullet_class)
    assert tower.facing == Facing.UP