"""Game and level configuration loaded from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

import pygame

from towerdefence.kinds import EnemyType, TowerType
from towerdefence.tilemap import GameMap


class ConfigError(Exception):
    """Raised when a configuration file is missing or malformed."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _levels(first: float, count: int = 10) -> list[float]:
    return [first] + [0.0] * (count - 1)


@dataclass
class BasicTemplate:
    window_title: str = "TowerDefence"
    window_width: int = 1280
    window_height: int = 720


@dataclass
class PlayerTemplate:
    speed: float = 5.0
    normal_attack_interval: float = 0.5
    normal_attack_damage: float = 10.0
    skill_interval: float = 10.0
    skill_damage: float = 5.0


@dataclass
class TowerTemplate:
    """Per-level tower stats; level ``i`` uses index ``i``."""

    interval: list[float] = field(default_factory=lambda: _levels(1.0))
    damage: list[float] = field(default_factory=lambda: _levels(25.0))
    view_range: list[float] = field(default_factory=lambda: _levels(3.0))
    cost: list[float] = field(default_factory=lambda: _levels(10.0))
    upgrade_cost: list[float] = field(default_factory=lambda: _levels(10.0, 9))


@dataclass
class EnemyTemplate:
    hp: float = 20.0
    speed: float = 1.0
    damage: float = 1.0
    reward_ratio: float = 0.8
    recover_interval: float = 100.0
    recover_range: float = -1.0
    recover_intensity: float = 10.0


@dataclass
class SpawnEvent:
    interval: float = 0.0
    spawn_point: int = 1
    enemy_type: EnemyType = EnemyType.SLIM


@dataclass
class Wave:
    interval: float = 0.0
    rewards: float = 100.0
    spawn_events: list[SpawnEvent] = field(default_factory=list)


def _parse_spawn_event(data: dict) -> SpawnEvent:
    event = SpawnEvent()
    if _is_number(value := data.get("interval")):
        event.interval = float(value)
    if _is_number(value := data.get("point")):
        event.spawn_point = int(value)
    if isinstance(value := data.get("enemy"), str):
        try:
            event.enemy_type = EnemyType(value)
        except ValueError:
            pass
    return event


def parse_levels(data: Any) -> list[Wave]:
    """Build the wave list from decoded level JSON."""
    if not isinstance(data, list):
        raise ConfigError("level data must be a JSON array")
    waves = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        wave = Wave()
        if _is_number(value := entry.get("rewards")):
            wave.rewards = float(value)
        if _is_number(value := entry.get("interval")):
            wave.interval = float(value)
        spawn_list = entry.get("spawn_list")
        if isinstance(spawn_list, list):
            wave.spawn_events = [
                _parse_spawn_event(item) for item in spawn_list if isinstance(item, dict)
            ]
            if not wave.spawn_events:
                continue
        waves.append(wave)
    if not waves:
        raise ConfigError("level data holds no waves")
    return waves


def _read_json(path) -> Any:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc


def _assign_numbers(target: Any, data: Any, names: tuple[str, ...]) -> None:
    if not isinstance(data, dict):
        return
    for name in names:
        if _is_number(value := data.get(name)):
            setattr(target, name, float(value))


def _assign_array(target: list[float], data: Any) -> None:
    if not isinstance(data, list):
        return
    for idx, value in enumerate(data[: len(target)]):
        if _is_number(value):
            target[idx] = float(value)


_TOWER_KEYS = {
    TowerType.ARCHER: "archer",
    TowerType.AXEMAN: "axeman",
    TowerType.GUNNER: "gunner",
}

_ENEMY_KEYS = {
    EnemyType.SLIM: "slim",
    EnemyType.KING_SLIM: "king_slim",
    EnemyType.SKELETON: "skeleton",
    EnemyType.GOBLIN: "goblin",
    EnemyType.GOBLIN_PRIEST: "goblin_priest",
}

_PLAYER_FIELDS = (
    "speed",
    "normal_attack_interval",
    "normal_attack_damage",
    "skill_interval",
    "skill_damage",
)

_ENEMY_FIELDS = (
    "hp",
    "speed",
    "damage",
    "reward_ratio",
    "recover_interval",
    "recover_range",
    "recover_intensity",
)


@dataclass
class Config:
    """All shared game state read from configuration files."""

    INITIAL_HP: ClassVar[float] = 10.0
    INITIAL_COIN: ClassVar[float] = 100.0
    COIN_PROP_VALUE: ClassVar[float] = 10.0

    game_map: GameMap = field(default_factory=GameMap)
    waves: list[Wave] = field(default_factory=list)
    tower_levels: dict[TowerType, int] = field(
        default_factory=lambda: {tower_type: 0 for tower_type in TowerType}
    )
    is_game_win: bool = True
    is_game_over: bool = False
    rect_tile_map: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    basic: BasicTemplate = field(default_factory=BasicTemplate)
    player: PlayerTemplate = field(default_factory=PlayerTemplate)
    towers: dict[TowerType, TowerTemplate] = field(
        default_factory=lambda: {tower_type: TowerTemplate() for tower_type in TowerType}
    )
    enemies: dict[EnemyType, EnemyTemplate] = field(
        default_factory=lambda: {enemy_type: EnemyTemplate() for enemy_type in EnemyType}
    )

    def load_level_config(self, path) -> None:
        self.waves = parse_levels(_read_json(path))

    def load_game_config(self, path) -> None:
        self.apply_game_data(_read_json(path))

    def apply_game_data(self, data: Any) -> None:
        """Merge decoded game JSON into the templates."""
        if not isinstance(data, dict):
            raise ConfigError("game config must be a JSON object")
        sections = {}
        for name in ("basic", "player", "tower", "enemy"):
            section = data.get(name)
            if not isinstance(section, dict):
                raise ConfigError(f"game config lacks object {name!r}")
            sections[name] = section

        basic = sections["basic"]
        if isinstance(value := basic.get("window_title"), str):
            self.basic.window_title = value
        if _is_number(value := basic.get("window_width")):
            self.basic.window_width = int(value)
        if _is_number(value := basic.get("window_height")):
            self.basic.window_height = int(value)

        _assign_numbers(self.player, sections["player"], _PLAYER_FIELDS)

        for tower_type, key in _TOWER_KEYS.items():
            tower_data = sections["tower"].get(key)
            if not isinstance(tower_data, dict):
                continue
            template = self.towers[tower_type]
            _assign_array(template.interval, tower_data.get("interval"))
            _assign_array(template.damage, tower_data.get("damage"))
            _assign_array(template.view_range, tower_data.get("view_range"))
            _assign_array(template.cost, tower_data.get("cost"))
            _assign_array(template.upgrade_cost, tower_data.get("upgrade_cost"))

        for enemy_type, key in _ENEMY_KEYS.items():
            _assign_numbers(
                self.enemies[enemy_type], sections["enemy"].get(key), _ENEMY_FIELDS
            )

    def tower_template(self, tower_type: TowerType) -> TowerTemplate:
        return self.towers[tower_type]

    def tower_level(self, tower_type: TowerType) -> int:
        return self.tower_levels[tower_type]

    def enemy_template(self, enemy_type: EnemyType) -> EnemyTemplate:
        return self.enemies[enemy_type]