"""
Deterministic repeating-task scheduler.

Mirrors the `schedule` / `unschedule` pair the arcade clock offers, but
time only moves when `advance()` is called. Used for headless sessions
(the Gymnasium environment) and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

# Absorbs float drift when many small steps add up to one long interval
_EPS = 1e-9


@dataclass
class _Task:
    callback: Callable[[float], None]
    interval: float
    due: float
    order: int


class ManualScheduler:
    """Repeating tasks driven by an explicit clock"""

    def __init__(self):
        self.time = 0.0
        self._tasks: List[_Task] = []
        self._order = 0

    def schedule_interval(self, callback: Callable[[float], None], interval: float):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._order += 1
        self._tasks.append(_Task(callback, interval, self.time + interval, self._order))

    def unschedule(self, callback: Callable[[float], None]):
        self._tasks = [t for t in self._tasks if t.callback != callback]

    def is_scheduled(self, callback: Callable[[float], None]) -> bool:
        return any(t.callback == callback for t in self._tasks)

    def advance(self, seconds: float):
        """Move the clock forward, firing every task that comes due"""
        self.time += seconds
        while True:
            task = self._next_due()
            if task is None:
                break
            task.due += task.interval
            task.callback(task.interval)

    def _next_due(self) -> Optional[_Task]:
        due = [t for t in self._tasks if t.due <= self.time + _EPS]
        if not due:
            return None
        return min(due, key=lambda t: (t.due, t.order))
