"""Run results collection and emission.

Results are emitted to a stream only; nothing is written to disk.

Usage:
    from hornet.runner.results import SuiteResults, OutputFormat

    results = SuiteResults.from_runner(runner, suite_version="2013a")
    results.emit(sys.stdout, OutputFormat.TEXT)
    results.emit(sys.stdout, OutputFormat.JSON)
"""

import json
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from typing import Any, TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from hornet.benchmarks.base import Benchmark
from hornet.runner.orchestrator import RunSummary, SuiteRunner


class OutputFormat(Enum):
    """Supported output formats for run results."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Human-readable text for stdout


class SuiteResults:
    """Snapshot of one finished run.

    Example:
        >>> results = SuiteResults.from_runner(runner)
        >>> results.to_dict()["summary"]["index"]
        '104.13'
    """

    def __init__(
        self,
        summary: RunSummary,
        benchmarks: list[dict[str, Any]],
        suite_version: str = "hornet",
        selection: str | None = None,
    ) -> None:
        self.summary = summary
        self.benchmarks = benchmarks
        self.suite_version = suite_version
        self.selection = selection
        self.timestamp = datetime.now(UTC).isoformat()

    @classmethod
    def from_runner(
        cls,
        runner: SuiteRunner,
        suite_version: str = "hornet",
        selection: str | None = None,
    ) -> "SuiteResults":
        """Build results from a runner that has finished a run.

        Raises:
            ValueError: If the runner has not finished a run.
        """
        if runner.summary is None:
            raise ValueError("Runner has not finished a run")
        benchmarks = [cls._benchmark_entry(b) for b in runner.registry]
        return cls(runner.summary, benchmarks, suite_version, selection)

    @staticmethod
    def _benchmark_entry(benchmark: Benchmark) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "id": benchmark.id,
            "name": benchmark.name,
            "status": benchmark.status.value,
            "enabled": benchmark.enabled,
            "weight": round(benchmark.computed_weight, 4),
            "baseline_ms": benchmark.baseline_time,
            "runs": [result.model_dump() for result in benchmark.results],
        }
        if benchmark.results:
            entry["mean_ms"] = benchmark.accumulated_mean
        return entry

    def to_dict(self) -> dict[str, Any]:
        """Convert results to a dictionary for serialization."""
        return {
            "metadata": {
                "suite_version": self.suite_version,
                "timestamp": self.timestamp,
                "selection": self.selection,
            },
            "summary": {
                "index": self.summary.index,
                "final": self.summary.final,
                "raw_score": self.summary.raw_score,
                "message": self.summary.message,
                "total": self.summary.total,
                "successful": self.summary.successful,
                "failed": self.summary.failed,
                "blocked": self.summary.blocked,
                "skipped": self.summary.skipped,
                "non_core": self.summary.non_core,
            },
            "benchmarks": self.benchmarks,
        }

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: TextIO,
        format: OutputFormat = OutputFormat.TEXT,
        indent: int = 2,
    ) -> None:
        """Write results to a stream in the given format."""
        if format == OutputFormat.JSON:
            content = json.dumps(self.to_dict(), indent=indent, default=str)
        elif format == OutputFormat.YAML:
            content = yaml.safe_dump(
                self.to_dict(), indent=indent, default_flow_style=False, sort_keys=False
            )
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        output.write(content)
        if not content.endswith("\n"):
            output.write("\n")

    def _to_text(self) -> str:
        output = StringIO()
        summary = self.summary

        output.write("\n" + "=" * 60 + "\n")
        label = "Index" if summary.final else "Partial index"
        output.write(f"  {self.suite_version}: {label} {summary.index}\n")
        output.write("=" * 60 + "\n\n")

        output.write(f"{'Benchmark':<28}{'Status':<20}{'Mean':>12}\n")
        output.write("-" * 60 + "\n")
        for entry in self.benchmarks:
            mean = f"{entry['mean_ms']:.2f}ms" if "mean_ms" in entry else "-"
            output.write(f"{entry['name'][:27]:<28}{entry['status']:<20}{mean:>12}\n")
            for run in entry["runs"]:
                output.write(
                    f"    {run['name'][:30]:<30} {run['mean']:>10.2f}ms "
                    f"±{run['rme']:.2f}% ({run['runs']} runs)\n"
                )
        output.write("-" * 60 + "\n")
        output.write(f"Raw score: {summary.raw_score}\n\n")
        output.write(summary.message + "\n")
        return output.getvalue()
