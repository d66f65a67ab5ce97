"""Constants for hornet models, runner and commands."""

from enum import StrEnum, auto


class RunnerStatus(StrEnum):
    """Process-level state of the suite runner."""

    LOADING = auto()
    READY = auto()
    RUNNING = auto()


class BenchmarkStatus(StrEnum):
    """Per-benchmark state during and after a run."""

    NO_STATUS = auto()
    PENDING = auto()
    LOADING = auto()
    RUNNING = auto()
    SUCCESS = auto()
    LOAD_FAILED = auto()
    RUN_FAILED = auto()
    SKIPPED = auto()
    POPUP_BLOCKED = auto()
    ABORTED = auto()
    NON_CORE = auto()

    @property
    def caption(self) -> str:
        """Short human-readable label for status displays."""
        return _STATUS_CAPTIONS.get(self, "Unknown failure")


_STATUS_CAPTIONS = {
    BenchmarkStatus.NO_STATUS: "-",
    BenchmarkStatus.PENDING: "Pending",
    BenchmarkStatus.LOADING: "Loading...",
    BenchmarkStatus.RUNNING: "Running...",
    BenchmarkStatus.SUCCESS: "Completed successfully",
    BenchmarkStatus.LOAD_FAILED: "Failed to load",
    BenchmarkStatus.RUN_FAILED: "Failed to run",
    BenchmarkStatus.SKIPPED: "Skipped",
    BenchmarkStatus.POPUP_BLOCKED: "Benchmark window blocked",
    BenchmarkStatus.ABORTED: "Aborted by user",
    BenchmarkStatus.NON_CORE: "Not a part of the core suite",
}


class TagKind(StrEnum):
    """Kinds of benchmark tags."""

    SPECIAL = auto()
    TECHNOLOGY = auto()
    APP = auto()


class TagSelectionState(StrEnum):
    """How much of a tag's membership is currently enabled."""

    FULL = auto()
    PARTIAL = auto()
    INACTIVE = auto()


class DelayClass(StrEnum):
    """Named pauses between orchestration steps."""

    SETTLE = auto()  # between successful steps
    COOLDOWN = auto()  # after an abort, before opening a new context


# Special tag names
CORE_TAG = "CORE"
EXTENDED_TAG = "EXTENDED"
NONE_TAG = "NONE"

# Runner timing defaults (in seconds)
DEFAULT_SETTLE_SECONDS = 0.025
DEFAULT_COOLDOWN_SECONDS = 0.25

# Execution context placement
DEFAULT_VIEWPORT_WIDTH = 800
DEFAULT_VIEWPORT_HEIGHT = 600
RUNNER_QUERY_MARKER = "use_test_runner"

# Timing suite defaults
DEFAULT_SAMPLES_PER_RUN = 5

# Selection identifier
SELECT_NOTHING_FRAGMENT = "et=none"

# Run outcome messages
RUNNING_NOTE = (
    "Please wait while the benchmark runs. For best results, close all other "
    "programs and pages while the test is running."
)
FINAL_INDEX_NOTE = (
    "The index is normalized to 100 and roughly shows your performance "
    "compared to other modern engines on reference hardware. Learn more: "
    "https://github.com/robohornet/robohornet/wiki/BenchmarkScoring"
)
POPUP_BLOCKED_NOTE = (
    "Your popup blocker prevented some of the benchmarks from running. "
    "Disable your popup blocker and run the test again to see the index."
)

ISSUE_URL_TEMPLATE = "https://github.com/robohornet/robohornet/issues/{number}"
