"""Suite runner: sequential execution state machine.

Benchmarks run strictly one at a time, in registry order, each in its own
execution context. Every transition between steps is a continuation on the
event queue:

    run() -> advance -> load -> (loaded) -> suite runs -> complete | abort
              ^                                                   |
              +------------------- settle / cooldown -------------+

Usage:
    from hornet.runner.orchestrator import SuiteRunner

    runner = SuiteRunner(registry, ModuleContextFactory("suites/default"))
    summary = runner.run_to_completion()
    print(summary.message)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from hornet.benchmarks.base import Benchmark
from hornet.benchmarks.registry import BenchmarkRegistry
from hornet.benchmarks.selection import SelectionCodec
from hornet.config import RunnerSettings
from hornet.models.constants import (
    FINAL_INDEX_NOTE,
    POPUP_BLOCKED_NOTE,
    BenchmarkStatus,
    DelayClass,
    RunnerStatus,
)
from hornet.models.suite_models import RunResult
from hornet.runner.context import ContextFactory, ExecutionContext, place_bottom_right
from hornet.runner.deferred import Deferred
from hornet.runner.errors import (
    ContextBlockedError,
    ContextLoadError,
    RunAbortedError,
    RunnerBusyError,
)
from hornet.runner.scheduler import EventQueue
from hornet.runner.scoring import ScoreBoard, format_raw_score
from hornet.runner.timing import SampledTimingSuite, TimingSuite
from hornet.utils.logger import Logger


@dataclass(frozen=True)
class RunSummary:
    """End-of-run outcome: status counts and the message to display."""

    total: int
    successful: int
    non_core: int
    blocked: int
    skipped: int
    failed: int
    final: bool
    index: str
    raw_score: str
    message: str


class RunObserver:
    """Receives runner notifications. Every method is a no-op by default."""

    def on_runner_status(self, status: RunnerStatus) -> None:
        pass

    def on_benchmark_status(self, benchmark: Benchmark) -> None:
        pass

    def on_benchmark_scored(self, benchmark: Benchmark, score: float) -> None:
        pass

    def on_score(self, index: str, raw_score: str, final: bool) -> None:
        pass

    def on_progress(self, fraction: float) -> None:
        pass

    def on_finished(self, summary: RunSummary) -> None:
        pass


class SuiteRunner:
    """Runs every enabled benchmark of a registry, one at a time.

    Only one execution context is ever live; the runner releases it before
    requesting the next. Failures of a single benchmark never stop the run:
    the runner always moves on and always returns to READY.

    Example:
        >>> runner = SuiteRunner(registry, factory, queue=EventQueue())
        >>> runner.run()
        >>> runner.queue.run_until_idle()
        >>> runner.summary.message
        '1 out of 12 benchmark(s) failed.'
    """

    def __init__(
        self,
        registry: BenchmarkRegistry,
        context_factory: ContextFactory,
        *,
        settings: RunnerSettings | None = None,
        queue: EventQueue | None = None,
        suite_factory: Callable[[], TimingSuite] | None = None,
        observer: RunObserver | None = None,
    ) -> None:
        self.registry = registry
        self.context_factory = context_factory
        self.settings = settings or RunnerSettings()
        self.queue = queue or EventQueue(delays=self.settings.delays)
        self.observer = observer or RunObserver()
        self._suite_factory = suite_factory or (
            lambda: SampledTimingSuite(
                self.queue, samples=self.settings.samples_per_run
            )
        )

        self.scores = ScoreBoard()
        self.summary: RunSummary | None = None
        self._status = RunnerStatus.LOADING
        self._position = -1
        self._active: Benchmark | None = None
        self._context: ExecutionContext | None = None
        self._suite: TimingSuite | None = None

        self._set_status(RunnerStatus.READY)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def logger(self) -> logging.Logger:
        return Logger.component("runner")

    @property
    def status(self) -> RunnerStatus:
        return self._status

    @property
    def active_benchmark(self) -> Benchmark | None:
        return self._active

    @property
    def context(self) -> ExecutionContext | None:
        return self._context

    @property
    def progress(self) -> float:
        """Fraction of the benchmark list scanned so far."""
        if self._position < 0 or not len(self.registry):
            return 0.0
        return min(self._position / len(self.registry), 1.0)

    @property
    def index(self) -> str:
        """Index as displayed: padded while running, unpadded once final."""
        final = self.summary is not None and self.summary.final
        return self.scores.index(final=final)

    def apply_selection(self, codec: SelectionCodec, fragment: str) -> None:
        """Decode a selection identifier into the registry.

        Raises:
            RunnerBusyError: While a run is in progress.
        """
        if self._status == RunnerStatus.RUNNING:
            raise RunnerBusyError("change the selection")
        codec.decode(fragment)

    # -------------------------------------------------------------------------
    # Run lifecycle
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Start a run. Steps execute as the event queue is drained.

        Raises:
            RunnerBusyError: If a run is already in progress.
        """
        if self._status == RunnerStatus.RUNNING:
            raise RunnerBusyError("start a run")

        self.summary = None
        self.scores.reset()
        self._position = -1
        self._set_status(RunnerStatus.RUNNING)
        for benchmark in self.registry:
            if benchmark.enabled:
                benchmark.results = []
                self._set_benchmark_status(benchmark, BenchmarkStatus.PENDING)

        enabled = len(self.registry.enabled_ids())
        self.logger.info(f"Starting run of {enabled}/{len(self.registry)} benchmarks")
        self.queue.call_later(DelayClass.SETTLE, self._advance)

    def run_to_completion(self) -> RunSummary:
        """Start a run and drain the event queue until it finishes."""
        self.run()
        self.queue.run_until_idle()
        if self.summary is None:
            raise RuntimeError("Event queue drained before the run finished")
        return self.summary

    def _advance(self) -> None:
        benchmark: Benchmark | None = None
        while benchmark is None:
            self._position += 1
            if self._position >= len(self.registry):
                break
            candidate = self.registry[self._position]
            if candidate.enabled:
                benchmark = candidate
            else:
                skipped_as = (
                    BenchmarkStatus.NON_CORE
                    if candidate.extended
                    else BenchmarkStatus.SKIPPED
                )
                self._set_benchmark_status(candidate, skipped_as)

        self.observer.on_progress(self.progress)
        self._active = benchmark
        if benchmark is None:
            self._finish()
        else:
            self._load(benchmark)

    def _load(self, benchmark: Benchmark) -> None:
        self._release_context()
        self._set_benchmark_status(benchmark, BenchmarkStatus.LOADING)
        self._active = benchmark

        placement = place_bottom_right(
            self.context_factory.available_screen(),
            self.settings.viewport_width,
            self.settings.viewport_height,
        )
        url = benchmark.runner_url(self.settings.query_marker)
        self.logger.info(f"Loading {benchmark.name} ({url})")

        try:
            context = self.context_factory.open(
                url, placement, lambda: self.queue.call_soon(self.benchmark_loaded)
            )
        except ContextBlockedError as e:
            self.logger.warning(str(e))
            context = None
        except ContextLoadError as e:
            self.logger.warning(str(e))
            self._retire(benchmark, BenchmarkStatus.LOAD_FAILED)
            return

        if context is None:
            self._retire(benchmark, BenchmarkStatus.POPUP_BLOCKED)
            return
        self._context = context

    def _retire(self, benchmark: Benchmark, status: BenchmarkStatus) -> None:
        """Mark a benchmark that never started and move on without retrying."""
        self._active = None
        self._set_benchmark_status(benchmark, status)
        self.queue.call_later(DelayClass.SETTLE, self._advance)

    def benchmark_loaded(self) -> None:
        """Signal from the context that the active benchmark is ready."""
        benchmark = self._active
        context = self._context
        if benchmark is None or context is None:
            return
        if benchmark.status != BenchmarkStatus.LOADING:
            self.logger.debug(f"Ignoring repeated load signal of {benchmark.id}")
            return

        suite = self._suite_factory()
        for run in benchmark.runs:
            suite.add(
                run.name,
                self._make_body(suite, context, run.name, run.argument),
                setup=self._make_setup(context, run.argument),
                teardown=self._make_teardown(context, run.argument),
            )

        self._suite = suite
        self._set_benchmark_status(benchmark, BenchmarkStatus.RUNNING)
        suite.run(
            on_complete=lambda s: self.on_suite_complete(benchmark, s),
            on_abort=lambda s: self.on_suite_abort(benchmark, s),
        )

    @staticmethod
    def _make_setup(context: ExecutionContext, argument: object) -> Callable[[], None]:
        def setup() -> None:
            if context.set_up is not None:
                context.set_up(argument)
            if context.reset_random is not None:
                context.reset_random()

        return setup

    @staticmethod
    def _make_teardown(
        context: ExecutionContext, argument: object
    ) -> Callable[[], None]:
        def teardown() -> None:
            if context.tear_down is not None:
                context.tear_down(argument)

        return teardown

    @staticmethod
    def _make_body(
        suite: TimingSuite, context: ExecutionContext, run_name: str, argument: object
    ) -> Callable[[Deferred], None]:
        def body(deferred: Deferred) -> None:
            if context.test_async is not None:
                context.test_async(deferred, argument)
            elif context.test is not None:
                context.test(argument)
                deferred.resolve()
            else:
                raise RunAbortedError(run_name, "defines neither test nor test_async")

        return body

    def on_suite_complete(self, benchmark: Benchmark, suite: TimingSuite) -> None:
        """Record results and score for a benchmark whose suite finished."""
        if benchmark is not self._active or benchmark.status != BenchmarkStatus.RUNNING:
            self.logger.debug(f"Ignoring completion of {benchmark.id}")
            return
        if self._context is None or self._context.closed:
            # Context went away mid-run; the timings are not trustworthy
            self.on_suite_abort(benchmark, suite)
            return

        self._release_context()
        self._suite = None
        benchmark.results = [
            RunResult(
                name=stats.name,
                mean=stats.mean * 1000,
                rme=stats.rme,
                runs=len(stats.samples),
            )
            for stats in suite.stats
        ]
        if benchmark.accumulated_mean <= 0:
            # Timer too coarse to measure anything; there is nothing to score
            self.logger.warning(f"{benchmark.name} measured no elapsed time")
            self._set_benchmark_status(benchmark, BenchmarkStatus.RUN_FAILED)
            self.queue.call_later(DelayClass.SETTLE, self._advance)
            return
        self._set_benchmark_status(benchmark, BenchmarkStatus.SUCCESS)

        benchmark_score, _ = self.scores.add(benchmark)
        self.logger.info(
            f"{benchmark.name}: {benchmark.accumulated_mean:.2f}ms, "
            f"score {benchmark_score:.2f}"
        )
        self.observer.on_benchmark_scored(benchmark, benchmark_score)
        self._publish_score(final=False)
        self.queue.call_later(DelayClass.SETTLE, self._advance)

    def on_suite_abort(
        self, benchmark: Benchmark, suite: TimingSuite | None = None
    ) -> None:
        """Retire an aborted benchmark. Repeated aborts are ignored."""
        if benchmark.status == BenchmarkStatus.ABORTED:
            return
        if benchmark is not self._active:
            self.logger.debug(f"Ignoring abort of inactive benchmark {benchmark.id}")
            return

        self._set_benchmark_status(benchmark, BenchmarkStatus.ABORTED)
        self._release_context()
        active_suite, self._suite = self._suite, None
        if active_suite is not None:
            active_suite.abort()
        self.logger.warning(f"{benchmark.name} aborted")
        self.queue.call_later(DelayClass.COOLDOWN, self._advance)

    def _finish(self) -> None:
        counts = dict.fromkeys(BenchmarkStatus, 0)
        for benchmark in self.registry:
            counts[benchmark.status] += 1

        total = len(self.registry)
        successful = counts[BenchmarkStatus.SUCCESS]
        non_core = counts[BenchmarkStatus.NON_CORE]
        blocked = counts[BenchmarkStatus.POPUP_BLOCKED]
        skipped = counts[BenchmarkStatus.SKIPPED]
        failed = total - successful - non_core - blocked - skipped

        final = successful + non_core == total
        if final:
            message = FINAL_INDEX_NOTE
        elif blocked:
            message = POPUP_BLOCKED_NOTE
        elif failed:
            message = f"{failed} out of {total} benchmark(s) failed."
        else:
            message = (
                f"Ran {successful} out of {total} benchmarks. "
                "Enable all benchmarks to compute the index."
            )

        self.summary = RunSummary(
            total=total,
            successful=successful,
            non_core=non_core,
            blocked=blocked,
            skipped=skipped,
            failed=failed,
            final=final,
            index=self.scores.index(final=final),
            raw_score=format_raw_score(self.scores.raw_score),
            message=message,
        )
        self._publish_score(final=final)
        self.logger.info(message)
        self._set_status(RunnerStatus.READY)
        self.observer.on_finished(self.summary)

    def close(self) -> None:
        """Release any live context, e.g. when the host shuts down."""
        self._release_context()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _release_context(self) -> None:
        if self._context is not None:
            self._context.close()
            self._context = None

    def _publish_score(self, final: bool) -> None:
        self.observer.on_score(
            self.scores.index(final=final),
            format_raw_score(self.scores.raw_score),
            final,
        )

    def _set_status(self, status: RunnerStatus) -> None:
        self._status = status
        self.observer.on_runner_status(status)

    def _set_benchmark_status(
        self, benchmark: Benchmark, status: BenchmarkStatus
    ) -> None:
        benchmark.status = status
        self.logger.debug(f"{benchmark.id}: {status.caption}")
        self.observer.on_benchmark_status(benchmark)
