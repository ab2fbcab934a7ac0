"""Tile map loaded from CSV, with spawner routes and the home tile."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterator, Sequence

SIZE_TILE = 48

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class MapError(Exception):
    """Raised when a map cannot be read or holds no tiles."""


class Direction(IntEnum):
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


@dataclass
class Tile:
    terrain: int = 0
    decoration: int = -1
    special_flag: int = -1
    has_tower: bool = False
    direction: Direction = Direction.NONE


def _trim(text: str) -> str:
    return text.strip(" \t")


def _split_fields(text: str, separator: str) -> list[str]:
    """Split like a delimited line reader: a trailing separator adds no empty field."""
    parts = text.split(separator)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else -1


def parse_tile(text: str) -> Tile:
    """Parse one cell, ``terrain\\decoration\\direction\\special``."""
    values = [_leading_int(part) for part in _split_fields(_trim(text), "\\")]
    terrain = values[0] if values and values[0] >= 0 else 0
    decoration = values[1] if len(values) >= 2 else -1
    direction = values[2] if len(values) >= 3 and 0 <= values[2] <= 4 else 0
    special_flag = values[3] if len(values) > 3 else -1
    return Tile(
        terrain=terrain,
        decoration=decoration,
        special_flag=special_flag,
        direction=Direction(direction),
    )


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Route:
    """Tile indices followed from an origin along the tiles' directions."""

    def __init__(self, tiles: Sequence[Sequence[Tile]], origin: tuple[int, int]) -> None:
        self.points: list[tuple[int, int]] = []
        height = len(tiles)
        width = len(tiles[0]) if tiles else 0
        x, y = origin
        while 0 <= x < width and 0 <= y < height and x < len(tiles[y]):
            if (x, y) in self.points:
                break
            self.points.append((x, y))
            step = _STEPS.get(tiles[y][x].direction)
            if step is None:
                break
            x, y = x + step[0], y + step[1]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.points)

    def __getitem__(self, index: int) -> tuple[int, int]:
        return self.points[index]


class GameMap:
    """Grid of tiles with the home position and a route per spawn point."""

    def __init__(self) -> None:
        self.tiles: list[list[Tile]] = []
        self.idx_home: tuple[int, int] = (0, 0)
        self.spawner_routes: dict[int, Route] = {}

    def load(self, path) -> None:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise MapError(f"cannot read map {path}: {exc}") from exc
        self.parse(text)

    def parse(self, text: str) -> None:
        rows = []
        for line in text.split("\n"):
            line = _trim(line)
            if not line:
                continue
            rows.append([parse_tile(cell) for cell in _split_fields(line, ",")])
        if not rows or not rows[0]:
            raise MapError("map holds no tiles")
        self.tiles = rows
        self._generate_cache()

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    def place_tower(self, idx: tuple[int, int]) -> None:
        x, y = idx
        self.tiles[y][x].has_tower = True

    def _generate_cache(self) -> None:
        self.idx_home = (0, 0)
        self.spawner_routes = {}
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                if tile.special_flag < 0:
                    continue
                if tile.special_flag == 0:
                    self.idx_home = (x, y)
                else:
                    self.spawner_routes[tile.special_flag] = Route(self.tiles, (x, y))