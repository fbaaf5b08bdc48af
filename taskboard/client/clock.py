# taskboard/client/clock.py
"""
Wall clock shown on the employee dashboard, ticked by one scheduler job
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


class Clock:
    def __init__(
        self,
        scheduler: Optional[BackgroundScheduler] = None,
        now_func: Callable[[], datetime] = datetime.now,
        interval_seconds: int = 1,
    ):
        self.scheduler = scheduler or BackgroundScheduler()
        self.now_func = now_func
        self.interval_seconds = interval_seconds
        self.now = now_func()
        self.is_running = False
        self._listeners: List[Callable[[datetime], None]] = []

    def subscribe(self, listener: Callable[[datetime], None]):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[datetime], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def tick(self) -> datetime:
        self.now = self.now_func()
        for listener in list(self._listeners):
            listener(self.now)
        return self.now

    def start(self):
        """Start ticking"""
        if not self.is_running:
            self.scheduler.add_job(
                self.tick,
                trigger=IntervalTrigger(seconds=self.interval_seconds),
                id='clock_tick',
                name='Dashboard Clock',
                replace_existing=True
            )
            if not self.scheduler.running:
                self.scheduler.start()
            self.is_running = True
            logger.debug("Clock started")

    def stop(self):
        """Stop ticking"""
        if self.is_running:
            self.scheduler.remove_job('clock_tick')
            self.is_running = False
            logger.debug("Clock stopped")
