import random

import pygame

from towerdefence.bullet_manager import BulletManager
from towerdefence.coins import CoinManager
from towerdefence.config import Config
from towerdefence.enemy_manager import EnemyManager
from towerdefence.home import HomeManager
from towerdefence.kinds import EnemyType, TowerType
from towerdefence.resources import TEXTURE_FILES, Resources
from towerdefence.tower_manager import MAX_LEVEL, TowerManager
from towerdefence.vector import Vector2

_CELLS = [r"0\-1\4\1", r"0\-1\4", r"0\-1\4", r"0\-1\4", r"0\-1\0\0"]


def _manager():
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
    return TowerManager(config, resources, enemies, bullets), config, enemies, bullets


def test_default_place_cost():
    manager, *_ = _manager()
    assert manager.place_cost(TowerType.ARCHER) == 10


def test_place_marks_tile_and_centres_tower():
    manager, config, *_ = _manager()
    tower = manager.place(TowerType.GUNNER, (1, 0))
    assert config.game_map.tiles[0][1].has_tower
    assert tower.position == Vector2(72, 24)
    assert manager.towers == [tower]


def test_upgrade_raises_level_and_changes_costs():
    manager, config, *_ = _manager()
    template = config.tower_template(TowerType.AXEMAN)
    template.cost[1] = 30
    template.view_range[1] = 4
    template.upgrade_cost[1] = 50
    manager.upgrade(TowerType.AXEMAN)
    assert config.tower_level(TowerType.AXEMAN) == 1
    assert manager.place_cost(TowerType.AXEMAN) == 30
    assert manager.damage_range(TowerType.AXEMAN) == 4
    assert manager.upgrade_cost(TowerType.AXEMAN) == 50
    assert config.tower_level(TowerType.ARCHER) == 0


def test_level_caps_and_upgrade_cost_becomes_negative():
    manager, config, *_ = _manager()
    for _ in range(MAX_LEVEL + 3):
        manager.upgrade(TowerType.ARCHER)
    assert config.tower_level(TowerType.ARCHER) == MAX_LEVEL
    assert manager.upgrade_cost(TowerType.ARCHER) == -1


def test_update_runs_placed_towers():
    manager, _, enemies, bullets = _manager()
    manager.place(TowerType.ARCHER, (2, 0))
    enemies.spawn(EnemyType.SLIM, 1)
    manager.update(0.0)
    assert len(bullets.bullets) == 1