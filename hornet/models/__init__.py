"""Pydantic models and shared constants."""

from hornet.models.constants import (
    BenchmarkStatus,
    DelayClass,
    RunnerStatus,
    TagKind,
    TagSelectionState,
)
from hornet.models.suite_models import (
    BenchmarkDefinition,
    RunResult,
    SuiteDefinition,
    TagDefinition,
)

__all__ = [
    "BenchmarkDefinition",
    "BenchmarkStatus",
    "DelayClass",
    "RunResult",
    "RunnerStatus",
    "SuiteDefinition",
    "TagDefinition",
    "TagKind",
    "TagSelectionState",
]
