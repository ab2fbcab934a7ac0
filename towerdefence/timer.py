"""Countdown timer driven by frame deltas."""

from __future__ import annotations

from typing import Callable, Optional


class Timer:
    """Calls ``on_timeout`` whenever ``wait_time`` seconds have accumulated."""

    def __init__(
        self,
        wait_time: float = 0.0,
        one_shot: bool = False,
        on_timeout: Optional[Callable[[], None]] = None,
    ) -> None:
        self.wait_time = wait_time
        self.one_shot = one_shot
        self.on_timeout = on_timeout
        self._pass_time = 0.0
        self._paused = False
        self._shot = False

    @property
    def paused(self) -> bool:
        return self._paused

    def restart(self) -> None:
        self._pass_time = 0.0
        self._shot = False

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def update(self, delta: float) -> None:
        if self._paused:
            return
        self._pass_time += delta
        if self._pass_time >= self.wait_time:
            can_shot = not self.one_shot or not self._shot
            self._shot = True
            if can_shot and self.on_timeout is not None:
                self.on_timeout()
            self._pass_time -= self.wait_time