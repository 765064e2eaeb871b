
"""Periodic drop timer, owned by the main loop rather than the engine"""
from typing import Callable, Optional

from pygame.time import get_ticks

from tetris_engine import Status


class DropTimer:
    def __init__(self, interval_ms: int, func: Callable[[], None], clock: Callable[[], int] = get_ticks):
        self.interval_ms = interval_ms
        self.func = func
        self.clock = clock

        self.active = False
        self.start_time: Optional[int] = None

    def activate(self):
        if self.active:
            return
        self.active = True
        self.start_time = self.clock()

    def deactivate(self):
        self.active = False
        self.start_time = None

    def sync(self, status: Status):
        """Run exactly while the game is playing."""
        if status is Status.PLAYING:
            self.activate()
        else:
            self.deactivate()

    def update(self) -> bool:
        """Fire at most once per call; missed periods after a stall are skipped."""
        if not self.active or self.clock() - self.start_time < self.interval_ms:
            return False
        self.start_time = self.clock()
        self.func()
        return True
