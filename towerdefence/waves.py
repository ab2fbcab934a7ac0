"""Wave scheduling: when each wave starts and when each enemy spawns."""

from __future__ import annotations

from towerdefence.coins import CoinManager
from towerdefence.config import Config
from towerdefence.enemy_manager import EnemyManager
from towerdefence.timer import Timer


class WaveManager:
    """Starts the configured waves in turn, spawns their enemies and pays rewards."""

    def __init__(self, config: Config, enemies: EnemyManager, coins: CoinManager) -> None:
        self.config = config
        self.enemies = enemies
        self.coins = coins
        self.waves = list(config.waves)
        if not self.waves:
            raise ValueError("no waves are configured")

        self.idx_wave = 0
        self.idx_spawn_event = 0
        self.wave_started = False
        self.spawned_last_enemy = False

        self._wave_start_timer = Timer(self.waves[0].interval, True, self._start_wave)
        self._spawn_event_timer = Timer(0.0, True, self._spawn_next)

    def _start_wave(self) -> None:
        self.wave_started = True
        events = self.waves[self.idx_wave].spawn_events
        self._spawn_event_timer.wait_time = events[0].interval
        self._spawn_event_timer.restart()

    def _spawn_next(self) -> None:
        events = self.waves[self.idx_wave].spawn_events
        event = events[self.idx_spawn_event]
        self.enemies.spawn(event.enemy_type, event.spawn_point)

        self.idx_spawn_event += 1
        if self.idx_spawn_event >= len(events):
            self.spawned_last_enemy = True
            return

        self._spawn_event_timer.wait_time = events[self.idx_spawn_event].interval
        self._spawn_event_timer.restart()

    def update(self, delta: float) -> None:
        if self.config.is_game_over:
            return

        if self.wave_started:
            self._spawn_event_timer.update(delta)
        else:
            self._wave_start_timer.update(delta)

        if self.spawned_last_enemy and self.enemies.cleared():
            self.coins.increase(self.waves[self.idx_wave].rewards)
            self.idx_wave += 1
            if self.idx_wave >= len(self.waves):
                self.config.is_game_win = True
                self.config.is_game_over = True
                return
            self.idx_spawn_event = 0
            self.wave_started = False
            self.spawned_last_enemy = False
            self._wave_start_timer.wait_time = self.waves[self.idx_wave].interval
            self._wave_start_timer.restart()