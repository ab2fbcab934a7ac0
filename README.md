# towerdefence

This is a tile-based tower defence game built on pygame. Enemies spawn at
points on a tile map and walk along routes toward your home. You place
archer, axeman and gunner towers and spend coins to upgrade each tower kind.
You also steer a hero who picks up the coins that defeated enemies drop and
who has two attacks. If you survive every wave, you win.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the game

```
towerdefence [--config-dir DIR] [--resources-dir DIR]
```

`--config-dir` defaults to `../config` and `--resources-dir` defaults to
`../resources`. If the map, the configuration or the assets cannot be loaded,
the command prints `game failed to start: ...` and exits with status 1.

The configuration directory holds three files:

- `map.csv`: the tile map. Each cell is `terrain\decoration\direction\flag`.
  - A direction of 1–4 (up, down, left, right) marks a route tile.
  - A flag of `0` marks the home.
  - A positive flag marks an enemy spawn point with that number.
  - Blank lines are skipped.
- `config.json`: an object with four sections.
  - `basic`: `window_title`, `window_width`, `window_height`.
  - `player`: `speed`, `normal_attack_interval`, `normal_attack_damage`,
    `skill_interval`, `skill_damage`.
  - `tower`: `archer`, `axeman` and `gunner`. Each holds per-level arrays
    `interval`, `damage`, `view_range`, `cost` and `upgrade_cost`.
  - `enemy`: `slim`, `king_slim`, `skeleton`, `goblin`, `goblin_priest`.
    Each holds `hp`, `speed`, `damage`, `reward_ratio`, `recover_interval`,
    `recover_range` and `recover_intensity`.
- `level.json`: an array of waves. Each wave has `rewards`, `interval` and a
  `spawn_list` of events. Each event has `interval`, `point` and `enemy`.
  The `enemy` value is one of `Slim`, `KingSlim`, `Skeleton`, `Goblin`,
  `GoblinPriest`.

The resources directory holds the textures (PNG), sound effects, the
background music and the `ipix.ttf` font.

## Controls

- Click an empty tile to open the placement panel. It only opens on a tile
  with no decoration, no route and no tower.
  - Top button: axeman.
  - Left button: archer.
  - Right button: gunner.
- Click the home tile to open the upgrade panel. Each button raises the level
  of one tower kind, up to the tenth level. A kind at its highest level shows
  `MAX`.
- `W` `A` `S` `D` move the hero. The hero collects any coin it touches, and
  each coin is worth 10.
- `J` releases a flash attack in the direction the hero faces. It then has a
  cooldown.
- `K` releases an impact attack. It needs a full mana bar, and it slows the
  enemies it hits.

## Using the pieces

The game logic can also be used from Python. This loads and inspects a map
and its routes:

```python
from towerdefence.tilemap import GameMap

game_map = GameMap()
game_map.load("config/map.csv")  # raises MapError if unreadable or empty
print(game_map.width, game_map.height, game_map.idx_home)
for point, route in game_map.spawner_routes.items():
    print(point, route.points)
```

This loads the configuration:

```python
from towerdefence.config import Config, parse_levels

config = Config()
config.load_game_config("config/config.json")   # raises ConfigError
config.load_level_config("config/level.json")   # raises ConfigError
print(len(config.waves), config.basic.window_title)

waves = parse_levels([{"spawn_list": [{"enemy": "Goblin", "point": 1}]}])
```

Other building blocks:

- `towerdefence.vector.Vector2`
- `towerdefence.timer.Timer`
- `towerdefence.animation.Animation`
- the managers in `bullet_manager`, `enemy_manager`, `tower_manager`,
  `waves`, `coins`, `home` and `player`
- the UI pieces in `banner`, `status_bar` and `panels`