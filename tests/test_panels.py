import pygame
import pytest

from towerdefence.bullet_manager import BulletManager
from towerdefence.coins import CoinManager
from towerdefence.config import Config
from towerdefence.enemy_manager import EnemyManager
from towerdefence.home import HomeManager
from towerdefence.kinds import TowerType
from towerdefence.panels import (
    MAX_TEXT,
    OFFSET_LEFT,
    OFFSET_RIGHT,
    OFFSET_TOP,
    PANEL_HEIGHT,
    PANEL_WIDTH,
    HoveredTarget,
    PlacePanel,
    UpgradePanel,
)
from towerdefence.resources import ResID, Resources
from towerdefence.tilemap import GameMap
from towerdefence.tower_manager import TowerManager

FILL = (10, 20, 30)
MAP_TEXT = "\n".join(
    [
        r"0\-1\0\-1,0\5\0\-1",
        r"0\-1\2\1,0\-1\0\0",
    ]
)
CENTER = (200, 200)


@pytest.fixture
def world():
    pygame.font.init()
    resources = Resources()
    for res_id in ResID:
        if res_id.name.startswith("TEX_"):
            texture = pygame.Surface((192, 384))
            texture.fill(FILL)
            resources.textures[res_id] = texture
    resources.fonts[ResID.FONT_MAIN] = pygame.font.Font(None, 32)

    config = Config()
    game_map = GameMap()
    game_map.parse(MAP_TEXT)
    config.game_map = game_map
    config.rect_tile_map = pygame.Rect(0, 0, 96, 96)

    bullets = BulletManager(config, resources)
    coins = CoinManager(config, resources)
    home = HomeManager(config, resources)
    enemies = EnemyManager(config, resources, bullets, coins, home)
    towers = TowerManager(config, resources, enemies, bullets)
    return config, resources, towers, coins


def _button_pos(offset):
    return (
        CENTER[0] - PANEL_WIDTH // 2 + offset[0] + 1,
        CENTER[1] - PANEL_HEIGHT // 2 + offset[1] + 1,
    )


def _hover(panel, offset):
    pos = _button_pos(offset)
    panel.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=pos))
    return pos


def _click(panel, pos):
    panel.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1))


def _panel(cls, world):
    _, resources, towers, coins = world
    panel = cls(resources, towers, coins)
    panel.center_pos = CENTER
    panel.idx_tile_selected = (0, 0)
    return panel


def test_hidden_panel_ignores_motion(world):
    panel = _panel(PlacePanel, world)
    _hover(panel, OFFSET_TOP)
    assert panel.hovered_target is HoveredTarget.NONE


@pytest.mark.parametrize(
    "offset, target",
    [
        (OFFSET_TOP, HoveredTarget.TOP),
        (OFFSET_LEFT, HoveredTarget.LEFT),
        (OFFSET_RIGHT, HoveredTarget.RIGHT),
    ],
)
def test_motion_over_button_hovers_it(world, offset, target):
    panel = _panel(PlacePanel, world)
    panel.show()
    _hover(panel, offset)
    assert panel.hovered_target is target


def test_motion_away_clears_hover(world):
    panel = _panel(PlacePanel, world)
    panel.show()
    _hover(panel, OFFSET_TOP)
    panel.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0)))
    assert panel.hovered_target is HoveredTarget.NONE


def test_place_top_buys_axeman(world):
    _, _, towers, coins = world
    panel = _panel(PlacePanel, world)
    coins.num_coin = 1000
    cost = int(towers.place_cost(TowerType.AXEMAN))
    panel.update()
    panel.show()
    pos = _hover(panel, OFFSET_TOP)
    _click(panel, pos)
    assert len(towers.towers) == 1
    assert towers.towers[0].tower_type is TowerType.AXEMAN
    assert coins.num_coin == 1000 - cost
    assert panel.visible is False


def test_place_without_enough_coins_does_nothing(world):
    _, _, towers, coins = world
    panel = _panel(PlacePanel, world)
    coins.num_coin = towers.place_cost(TowerType.ARCHER) - 1
    before = coins.num_coin
    panel.update()
    panel.show()
    pos = _hover(panel, OFFSET_LEFT)
    _click(panel, pos)
    assert towers.towers == []
    assert coins.num_coin == before


def test_click_outside_buttons_only_hides(world):
    _, _, towers, coins = world
    panel = _panel(PlacePanel, world)
    coins.num_coin = 1000
    panel.update()
    panel.show()
    _click(panel, (0, 0))
    assert towers.towers == []
    assert coins.num_coin == 1000
    assert panel.visible is False


def test_upgrade_left_raises_archer_level(world):
    config, _, towers, coins = world
    panel = _panel(UpgradePanel, world)
    coins.num_coin = 1000
    level = config.tower_level(TowerType.ARCHER)
    cost = int(towers.upgrade_cost(TowerType.ARCHER))
    panel.update()
    panel.show()
    pos = _hover(panel, OFFSET_LEFT)
    _click(panel, pos)
    assert config.tower_level(TowerType.ARCHER) == level + 1
    assert coins.num_coin == 1000 - cost


def test_upgrade_at_max_level_is_refused(world):
    config, _, _, coins = world
    config.tower_levels[TowerType.GUNNER] = 9
    panel = _panel(UpgradePanel, world)
    coins.num_coin = 1000
    panel.update()
    assert panel.val_right == -1
    panel.show()
    pos = _hover(panel, OFFSET_RIGHT)
    panel.update()
    assert panel.text == MAX_TEXT
    _click(panel, pos)
    assert config.tower_level(TowerType.GUNNER) == 9
    assert coins.num_coin == 1000


def test_update_renders_hovered_price(world):
    _, _, towers, _ = world
    panel = _panel(PlacePanel, world)
    panel.show()
    _hover(panel, OFFSET_TOP)
    panel.update()
    assert panel.text == str(int(towers.place_cost(TowerType.AXEMAN)))


def test_render_draws_only_when_visible(world):
    panel = _panel(PlacePanel, world)
    surface = pygame.Surface((400, 400))
    panel.render(surface)
    assert surface.get_at(CENTER) == (0, 0, 0, 255)
    panel.show()
    panel.render(surface)
    assert surface.get_at(CENTER) == (*FILL, 255)