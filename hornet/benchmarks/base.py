"""Benchmark entity and its parameterized runs."""

import re
from dataclasses import dataclass
from typing import Any

from hornet.models.constants import ISSUE_URL_TEMPLATE, BenchmarkStatus
from hornet.models.suite_models import BenchmarkDefinition, RunResult

# First run of letters between a "/" and a "." in the identifying path
_ID_PATTERN = re.compile(r"/([A-Za-z]+)\.")


class MalformedBenchmarkPathError(ValueError):
    """Raised when a benchmark id cannot be derived from its identifying path."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(
            f"Cannot derive a benchmark id from '{filename}': expected "
            "'<dir>/<letters>.<ext>'"
        )


def derive_benchmark_id(filename: str) -> str:
    """Derive the stable, lowercase benchmark id from an identifying path.

    Example:
        >>> derive_benchmark_id("tests/addrow.html")
        'addrow'

    Raises:
        MalformedBenchmarkPathError: If the path has no "/<letters>." segment.
    """
    match = _ID_PATTERN.search(filename)
    if match is None:
        raise MalformedBenchmarkPathError(filename)
    return match.group(1).lower()


@dataclass(frozen=True)
class Run:
    """One parameterized timing measurement within a benchmark."""

    name: str
    argument: Any = None


class Benchmark:
    """A named, weighted performance test case.

    Built once by the registry. After construction only ``enabled`` (user
    selection) and ``status``/``results`` (the runner) change.
    """

    def __init__(
        self,
        definition: BenchmarkDefinition,
        index: int,
        computed_weight: float,
    ) -> None:
        self.id = derive_benchmark_id(definition.filename)
        self.index = index
        self.name = definition.name
        self.description = definition.description
        self.filename = definition.filename
        self.runs = tuple(Run(name, arg) for name, arg in definition.runs)
        self.weight = definition.weight
        self.computed_weight = computed_weight
        self.baseline_time = definition.baseline_time
        self.declared_tags = tuple(definition.tags)
        self.issue_number = definition.issue_number
        self.extended = definition.extended

        self.enabled = True
        self.status = BenchmarkStatus.NO_STATUS
        self.results: list[RunResult] = []

    @property
    def issue_url(self) -> str | None:
        if self.issue_number is None:
            return None
        return ISSUE_URL_TEMPLATE.format(number=self.issue_number)

    @property
    def accumulated_mean(self) -> float:
        """Sum of run means in milliseconds (0.0 before completion)."""
        return sum(result.mean for result in self.results)

    def runner_url(self, marker: str) -> str:
        """Address of this benchmark's isolated context when runner-driven."""
        return f"{self.filename}?{marker}"

    def __repr__(self) -> str:
        flag = "on" if self.enabled else "off"
        return f"Benchmark({self.id!r}, {self.status.value}, {flag})"
