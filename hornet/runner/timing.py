"""Timing suites: execute a benchmark's runs and report per-run statistics.

A suite holds one entry per run. Each sample calls the entry's setup, then
its body with a fresh Deferred, and measures until the deferred resolves;
the teardown follows. Bodies may resolve in the same turn or on a later one,
so sampling is driven through the event queue rather than a loop.
"""

import logging
import math
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from hornet.models.constants import DEFAULT_SAMPLES_PER_RUN
from hornet.runner.deferred import Deferred
from hornet.runner.errors import DeferredAlreadyResolvedError, RunAbortedError
from hornet.runner.scheduler import EventQueue
from hornet.utils.logger import Logger

# Two-sided 95% critical values of Student's t by degrees of freedom
_T_TABLE = {
    1: 12.706, 2: 4.303, 3: 3.182, 4: 2.776, 5: 2.571, 6: 2.447, 7: 2.365,
    8: 2.306, 9: 2.262, 10: 2.228, 11: 2.201, 12: 2.179, 13: 2.16, 14: 2.145,
    15: 2.131, 16: 2.12, 17: 2.11, 18: 2.101, 19: 2.093, 20: 2.086, 21: 2.08,
    22: 2.074, 23: 2.069, 24: 2.064, 25: 2.06, 26: 2.056, 27: 2.052,
    28: 2.048, 29: 2.045, 30: 2.042,
}  # fmt: skip
_T_INFINITY = 1.96


@dataclass
class SuiteEntry:
    """One run registered with a suite."""

    name: str
    body: Callable[[Deferred], None]
    setup: Callable[[], None] | None = None
    teardown: Callable[[], None] | None = None


@dataclass
class RunStats:
    """Raw samples of one run, in seconds."""

    name: str
    samples: list[float] = field(default_factory=list)

    @property
    def mean(self) -> float:
        return float(np.mean(self.samples)) if self.samples else 0.0

    @property
    def rme(self) -> float:
        """Relative margin of error of the mean, in percent."""
        size = len(self.samples)
        if size < 2:
            return 0.0
        mean = self.mean
        if mean == 0:
            return 0.0
        sem = float(np.std(self.samples, ddof=1)) / math.sqrt(size)
        critical = _T_TABLE.get(size - 1, _T_INFINITY)
        return sem * critical / mean * 100


class TimingSuite(ABC):
    """Adapter between the runner and a micro-benchmark harness."""

    def __init__(self) -> None:
        self.entries: list[SuiteEntry] = []

    def add(
        self,
        name: str,
        body: Callable[[Deferred], None],
        setup: Callable[[], None] | None = None,
        teardown: Callable[[], None] | None = None,
    ) -> None:
        self.entries.append(SuiteEntry(name, body, setup, teardown))

    @abstractmethod
    def run(
        self,
        on_complete: Callable[["TimingSuite"], None],
        on_abort: Callable[["TimingSuite"], None],
    ) -> None:
        """Start executing every entry.

        Exactly one of ``on_complete``/``on_abort`` is called, possibly on a
        later turn of the event queue.
        """
        pass

    @abstractmethod
    def abort(self) -> None:
        """Stop the suite and report an abort."""
        pass

    @property
    @abstractmethod
    def stats(self) -> list[RunStats]:
        """Statistics per entry, in registration order."""
        pass


class SampledTimingSuite(TimingSuite):
    """Takes a fixed number of samples of every entry.

    Example:
        >>> suite = SampledTimingSuite(queue, samples=10)
        >>> suite.add("100 rows", body)
        >>> suite.run(on_complete=report, on_abort=fail)
        >>> queue.run_until_idle()
    """

    def __init__(
        self,
        queue: EventQueue,
        samples: int = DEFAULT_SAMPLES_PER_RUN,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__()
        if samples < 1:
            raise ValueError("samples must be >= 1")
        self._queue = queue
        self._samples = samples
        self._timer = timer
        self._stats: list[RunStats] = []
        self._entry_index = 0
        self._started_at = 0.0
        self._finished = False
        self._on_complete: Callable[[TimingSuite], None] | None = None
        self._on_abort: Callable[[TimingSuite], None] | None = None

    @property
    def stats(self) -> list[RunStats]:
        return list(self._stats)

    @property
    def logger(self) -> logging.Logger:
        return Logger.component("runner.timing")

    def run(
        self,
        on_complete: Callable[[TimingSuite], None],
        on_abort: Callable[[TimingSuite], None],
    ) -> None:
        self._on_complete = on_complete
        self._on_abort = on_abort
        self._stats = [RunStats(entry.name) for entry in self.entries]
        self._entry_index = 0
        self._finished = False
        self._queue.call_soon(self._start_sample)

    def abort(self) -> None:
        if self._finished:
            return
        self._finished = True
        if self._on_abort is not None:
            self._on_abort(self)

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def _start_sample(self) -> None:
        if self._finished:
            return
        if self._entry_index >= len(self.entries):
            self._finished = True
            if self._on_complete is not None:
                self._on_complete(self)
            return

        entry = self.entries[self._entry_index]
        deferred = Deferred()
        deferred.add_callback(lambda: self._finish_sample(entry))
        try:
            if entry.setup is not None:
                entry.setup()
            self._started_at = self._timer()
            entry.body(deferred)
        except (RunAbortedError, DeferredAlreadyResolvedError) as e:
            self._fail(str(e))
        except Exception as e:
            self._fail(f"Run '{entry.name}' raised {type(e).__name__}: {e}")

    def _finish_sample(self, entry: SuiteEntry) -> None:
        if self._finished:
            # Late resolution after an abort
            return
        elapsed = self._timer() - self._started_at
        try:
            if entry.teardown is not None:
                entry.teardown()
        except Exception as e:
            self._fail(f"Teardown of '{entry.name}' raised {type(e).__name__}: {e}")
            return

        stats = self._stats[self._entry_index]
        stats.samples.append(elapsed)
        if len(stats.samples) >= self._samples:
            self.logger.debug(
                f"{entry.name}: mean {stats.mean * 1000:.3f}ms "
                f"±{stats.rme:.2f}% over {len(stats.samples)} samples"
            )
            self._entry_index += 1
        self._queue.call_soon(self._start_sample)

    def _fail(self, reason: str) -> None:
        self.logger.warning(reason)
        self.abort()
