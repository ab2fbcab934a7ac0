"""The game window, main loop and the wiring of every manager."""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path
from typing import Optional

import pygame

from towerdefence.banner import Banner
from towerdefence.bullet_manager import BulletManager
from towerdefence.coins import CoinManager
from towerdefence.config import Config, ConfigError
from towerdefence.enemy_manager import EnemyManager
from towerdefence.home import HomeManager
from towerdefence.panels import PlacePanel, UpgradePanel
from towerdefence.player import PlayerManager
from towerdefence.resources import ResID, ResourceError, Resources
from towerdefence.status_bar import StatusBar
from towerdefence.tilemap import SIZE_TILE, Direction, GameMap, MapError
from towerdefence.tower_manager import TowerManager
from towerdefence.waves import WaveManager

FRAME_TIME = 1.0 / 60
MUSIC_FADE_MS = 1500
STATUS_BAR_POSITION = (15, 15)


def tile_at(rect_tile_map, game_map: GameMap, x: int, y: int) -> Optional[tuple[int, int]]:
    """Index of the tile under screen point (x, y), or None outside the map."""
    if (
        x < rect_tile_map.x
        or x > rect_tile_map.x + rect_tile_map.w
        or y < rect_tile_map.y
        or y > rect_tile_map.y + rect_tile_map.h
    ):
        return None
    ix = min((x - rect_tile_map.x) // SIZE_TILE, game_map.width() - 1)
    iy = min((y - rect_tile_map.y) // SIZE_TILE, game_map.height() - 1)
    return (ix, iy)


def tile_center(rect_tile_map, idx: tuple[int, int]) -> tuple[int, int]:
    """Screen coordinates of the centre of tile ``idx``."""
    x, y = idx
    return (
        rect_tile_map.x + x * SIZE_TILE + SIZE_TILE // 2,
        rect_tile_map.y + y * SIZE_TILE + SIZE_TILE // 2,
    )


def can_place_tower(game_map: GameMap, idx: tuple[int, int]) -> bool:
    """A tower fits on a bare tile that is not a path and has no tower yet."""
    x, y = idx
    tile = game_map.tiles[y][x]
    return tile.decoration < 0 and tile.direction == Direction.NONE and not tile.has_tower


def _tile_area(index: int, per_line: int) -> pygame.Rect:
    return pygame.Rect(
        (index % per_line) * SIZE_TILE,
        (index // per_line) * SIZE_TILE,
        SIZE_TILE,
        SIZE_TILE,
    )


class Game:
    """Owns the window and runs input, update and render each frame."""

    def __init__(self, config_dir="../config", resources_dir="../resources") -> None:
        pygame.init()
        pygame.mixer.init(44100, -16, 2, 2048)

        config_dir = Path(config_dir)
        self.config = Config()
        self.config.game_map = GameMap()
        self.config.game_map.load(config_dir / "map.csv")
        self.config.load_game_config(config_dir / "config.json")
        self.config.load_level_config(config_dir / "level.json")

        basic = self.config.basic_template
        self.screen = pygame.display.set_mode((basic.window_width, basic.window_height))
        pygame.display.set_caption(basic.window_title)

        self.resources = Resources()
        self.resources.load(resources_dir)
        self.tile_map_surface = self._generate_tile_map()

        config, resources = self.config, self.resources
        self.bullets = BulletManager(config, resources)
        self.coins = CoinManager(config, resources)
        self.home = HomeManager(config, resources)
        self.enemies = EnemyManager(config, resources, self.bullets, self.coins, self.home)
        self.towers = TowerManager(config, resources, self.enemies, self.bullets)
        self.waves = WaveManager(config, self.enemies, self.coins)
        self.player = PlayerManager(config, resources, self.enemies, self.coins)

        self.status_bar = StatusBar(
            resources, self.coins, self.home, self.player, STATUS_BAR_POSITION
        )
        self.banner = Banner(config, resources)
        self.place_panel = PlacePanel(resources, self.towers, self.coins)
        self.upgrade_panel = UpgradePanel(resources, self.towers, self.coins)

        self.quit_requested = False
        self._game_over_last_tick = False

    def _generate_tile_map(self) -> pygame.Surface:
        game_map = self.config.game_map
        tileset = self.resources.texture(ResID.TEX_TILESET)
        per_line = math.ceil(tileset.get_width() / SIZE_TILE)

        width = game_map.width() * SIZE_TILE
        height = game_map.height() * SIZE_TILE
        surface = pygame.Surface((width, height), pygame.SRCALPHA)

        basic = self.config.basic_template
        self.config.rect_tile_map = pygame.Rect(
            int((basic.window_width - width) / 2),
            int((basic.window_height - height) / 2),
            width,
            height,
        )

        for y, row in enumerate(game_map.tiles):
            for x, tile in enumerate(row):
                dst = (x * SIZE_TILE, y * SIZE_TILE)
                surface.blit(tileset, dst, _tile_area(tile.terrain, per_line))
                if tile.decoration >= 0:
                    surface.blit(tileset, dst, _tile_area(tile.decoration, per_line))

        home = self.resources.texture(ResID.TEX_HOME)
        if home.get_size() != (SIZE_TILE, SIZE_TILE):
            home = pygame.transform.scale(home, (SIZE_TILE, SIZE_TILE))
        hx, hy = game_map.idx_home
        surface.blit(home, (hx * SIZE_TILE, hy * SIZE_TILE))
        return surface

    def handle_event(self, event: pygame.event.Event) -> None:
        game_over = self.config.is_game_over
        if event.type == pygame.QUIT:
            self.quit_requested = True
        elif event.type == pygame.MOUSEBUTTONDOWN and not game_over:
            rect = self.config.rect_tile_map
            game_map = self.config.game_map
            idx = tile_at(rect, game_map, *event.pos)
            if idx is not None:
                center = tile_center(rect, idx)
                if idx == tuple(game_map.idx_home):
                    panel = self.upgrade_panel
                elif can_place_tower(game_map, idx):
                    panel = self.place_panel
                else:
                    panel = None
                if panel is not None:
                    panel.idx_tile_selected = idx
                    panel.center_pos = center
                    panel.show()

        if not game_over:
            self.place_panel.handle_event(event)
            self.upgrade_panel.handle_event(event)
            self.player.handle_event(event)

    def update(self, delta: float) -> None:
        config = self.config
        if not config.is_game_over:
            self.status_bar.update()
            self.place_panel.update()
            self.upgrade_panel.update()
            self.waves.update(delta)
            self.enemies.update(delta)
            self.towers.update(delta)
            self.bullets.update(delta)
            self.coins.update(delta)
            self.player.update(delta)
            return

        if not self._game_over_last_tick:
            if pygame.mixer.get_init():
                pygame.mixer.music.fadeout(MUSIC_FADE_MS)
            self.resources.play_sound(
                ResID.SOUND_WIN if config.is_game_win else ResID.SOUND_LOSS
            )
        self._game_over_last_tick = True

        self.banner.update(delta)
        if self.banner.end_display():
            self.quit_requested = True

    def render(self) -> None:
        rect = self.config.rect_tile_map
        self.screen.blit(self.tile_map_surface, (rect.x, rect.y))

        self.enemies.render(self.screen)
        self.towers.render(self.screen)
        self.bullets.render(self.screen)
        self.coins.render(self.screen)
        self.player.render(self.screen)

        if not self.config.is_game_over:
            self.place_panel.render(self.screen)
            self.upgrade_panel.render(self.screen)
            self.status_bar.render(self.screen)
        else:
            width, height = self.screen.get_size()
            self.banner.center_position.x = width / 2
            self.banner.center_position.y = height / 2
            self.banner.render(self.screen)

        pygame.display.flip()

    def run(self) -> int:
        """Play until the window is closed or the end banner has been shown."""
        if pygame.mixer.get_init():
            pygame.mixer.music.load(str(self.resources.music(ResID.MUSIC_BGM)))
            pygame.mixer.music.play(-1, fade_ms=MUSIC_FADE_MS)

        last = time.perf_counter()
        while not self.quit_requested:
            for event in pygame.event.get():
                self.handle_event(event)

            now = time.perf_counter()
            delta = now - last
            last = now
            if delta < FRAME_TIME:
                pygame.time.delay(int((FRAME_TIME - delta) * 1000))

            self.update(delta)
            self.screen.fill((0, 0, 0))
            self.render()
        return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="towerdefence", description="Tower defence game.")
    parser.add_argument("--config-dir", default="../config", help="directory of map and config files")
    parser.add_argument("--resources-dir", default="../resources", help="directory of game assets")
    args = parser.parse_args(argv)

    try:
        try:
            game = Game(args.config_dir, args.resources_dir)
        except (MapError, ConfigError, ResourceError, pygame.error, OSError) as exc:
            print(f"game failed to start: {exc}", file=sys.stderr)
            return 1
        return game.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())