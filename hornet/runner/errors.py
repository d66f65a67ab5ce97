"""Exceptions raised by the suite runner and its collaborators."""


class RunnerError(Exception):
    """Base exception for runner errors."""

    pass


class RunnerBusyError(RunnerError):
    """Raised when an operation needs the runner to be READY."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} while a run is in progress")


class ContextBlockedError(RunnerError):
    """Raised by a context factory when it may not open a context."""

    def __init__(self, url: str, reason: str = "blocked") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Execution context for '{url}' could not be opened: {reason}")


class ContextLoadError(RunnerError):
    """Raised by a context factory when the benchmark itself fails to load."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Benchmark at '{url}' failed to load: {reason}")


class RunAbortedError(RunnerError):
    """Raised inside a timing suite when a run cannot continue."""

    def __init__(self, run_name: str, reason: str) -> None:
        self.run_name = run_name
        self.reason = reason
        super().__init__(f"Run '{run_name}' aborted: {reason}")


class DeferredAlreadyResolvedError(RunnerError):
    """Raised when a completion handle is resolved a second time."""

    def __init__(self) -> None:
        super().__init__("Deferred has already been resolved")
