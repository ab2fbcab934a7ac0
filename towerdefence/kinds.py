"""Enumerations shared across the game."""

from __future__ import annotations

from enum import Enum, auto


class EnemyType(Enum):
    """Enemy kinds; values are the names used in level files."""

    SLIM = "Slim"
    KING_SLIM = "KingSlim"
    GOBLIN = "Goblin"
    GOBLIN_PRIEST = "GoblinPriest"
    SKELETON = "Skeleton"


class BulletType(Enum):
    ARROW = auto()
    AXE = auto()
    SHELL = auto()


class TowerType(Enum):
    ARCHER = auto()
    AXEMAN = auto()
    GUNNER = auto()


class Facing(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()