"""Single-threaded event queue of scheduled continuations.

Every pause in a run goes through one queue, so there is never more than one
step executing and the order of steps is deterministic.

Usage:
    from hornet.runner.scheduler import EventQueue

    queue = EventQueue()
    queue.call_later(DelayClass.SETTLE, runner_step)
    queue.run_until_idle()

    # Tests drive the queue on a virtual clock
    clock = VirtualClock()
    queue = EventQueue(clock=clock.now, sleep=clock.sleep)
"""

import heapq
import itertools
import time
from collections.abc import Callable, Mapping
from typing import Any

from hornet.models.constants import (
    DEFAULT_COOLDOWN_SECONDS,
    DEFAULT_SETTLE_SECONDS,
    DelayClass,
)
from hornet.utils.logger import Logger

DEFAULT_DELAYS: dict[DelayClass, float] = {
    DelayClass.SETTLE: DEFAULT_SETTLE_SECONDS,
    DelayClass.COOLDOWN: DEFAULT_COOLDOWN_SECONDS,
}


class VirtualClock:
    """Clock whose ``sleep`` advances time instantly."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def sleep(self, seconds: float) -> None:
        self._now += max(seconds, 0.0)


class EventQueue:
    """Due-time ordered queue; equal due times run first in, first out."""

    def __init__(
        self,
        delays: Mapping[DelayClass, float] | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._delays = {**DEFAULT_DELAYS, **(delays or {})}
        self._clock = clock
        self._sleep = sleep
        self._counter = itertools.count()
        self._heap: list[tuple[float, int, Callable[..., Any], tuple[Any, ...]]] = []
        self._log = Logger.component("runner.scheduler")

    def delay_for(self, delay_class: DelayClass) -> float:
        return self._delays[delay_class]

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        """Run ``callback`` on a later turn, with no delay."""
        self.call_after(0.0, callback, *args)

    def call_later(
        self, delay_class: DelayClass, callback: Callable[..., Any], *args: Any
    ) -> None:
        """Run ``callback`` after the named delay."""
        self.call_after(self._delays[delay_class], callback, *args)

    def call_after(
        self, seconds: float, callback: Callable[..., Any], *args: Any
    ) -> None:
        due = self._clock() + seconds
        heapq.heappush(self._heap, (due, next(self._counter), callback, args))

    @property
    def pending(self) -> int:
        return len(self._heap)

    def step(self) -> bool:
        """Run the next continuation, sleeping until it is due.

        Returns:
            False if the queue was empty.
        """
        if not self._heap:
            return False
        due, _, callback, args = heapq.heappop(self._heap)
        wait = due - self._clock()
        if wait > 0:
            self._sleep(wait)
        callback(*args)
        return True

    def run_until_idle(self, max_steps: int | None = None) -> int:
        """Drain the queue.

        Args:
            max_steps: Stop after this many continuations (None for no limit).

        Returns:
            Number of continuations executed.
        """
        executed = 0
        while max_steps is None or executed < max_steps:
            if not self.step():
                break
            executed += 1
        self._log.debug(f"Event queue ran {executed} step(s)")
        return executed

    def clear(self) -> None:
        self._heap.clear()
