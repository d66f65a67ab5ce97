"""Execution side of hornet: orchestration, timing and scoring."""

from hornet.runner.context import (
    ContextFactory,
    ExecutionContext,
    ModuleContextFactory,
    Placement,
    ScreenArea,
    place_bottom_right,
)
from hornet.runner.deferred import Deferred
from hornet.runner.errors import (
    ContextBlockedError,
    ContextLoadError,
    DeferredAlreadyResolvedError,
    RunAbortedError,
    RunnerBusyError,
    RunnerError,
)
from hornet.runner.orchestrator import RunObserver, RunSummary, SuiteRunner
from hornet.runner.scheduler import EventQueue, VirtualClock
from hornet.runner.scoring import ScoreBoard, format_index, raw_score, score
from hornet.runner.timing import RunStats, SampledTimingSuite, TimingSuite

__all__ = [
    "ContextBlockedError",
    "ContextFactory",
    "ContextLoadError",
    "Deferred",
    "DeferredAlreadyResolvedError",
    "EventQueue",
    "ExecutionContext",
    "ModuleContextFactory",
    "Placement",
    "RunAbortedError",
    "RunObserver",
    "RunStats",
    "RunSummary",
    "RunnerBusyError",
    "RunnerError",
    "SampledTimingSuite",
    "ScoreBoard",
    "ScreenArea",
    "SuiteRunner",
    "TimingSuite",
    "VirtualClock",
    "format_index",
    "place_bottom_right",
    "raw_score",
    "score",
]
