"""Health of the home the enemies are marching on."""

from __future__ import annotations

from towerdefence.config import Config
from towerdefence.resources import ResID, Resources


class HomeManager:
    """Tracks home hit points, which never drop below zero."""

    def __init__(self, config: Config, resources: Resources) -> None:
        self.resources = resources
        self.num_hp = config.INITIAL_HP

    def decrease_hp(self, val: float) -> None:
        self.num_hp -= val
        if self.num_hp <= 0:
            self.num_hp = 0
        self.resources.play_sound(ResID.SOUND_HOME_HURT)