"""Pydantic models for benchmark suite definitions and run results."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hornet.models.constants import CORE_TAG, EXTENDED_TAG, NONE_TAG, TagKind

# ============================================================================
# Definition Input
# ============================================================================


class TagDefinition(BaseModel):
    """A user-declared technology or app tag."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., min_length=1, description="Canonical tag name (e.g. 'DOM')")
    pretty_name: str | None = Field(
        None, alias="prettyName", description="Display name, defaults to name"
    )
    kind: TagKind = Field(
        TagKind.TECHNOLOGY, alias="type", description="'technology' or 'app'"
    )

    @field_validator("name")
    @classmethod
    def reject_reserved_name(cls, value: str) -> str:
        if value.upper() in (CORE_TAG, EXTENDED_TAG, NONE_TAG):
            raise ValueError(f"tag name '{value}' is reserved")
        return value

    @field_validator("kind")
    @classmethod
    def reject_special_kind(cls, value: TagKind) -> TagKind:
        if value == TagKind.SPECIAL:
            raise ValueError("special tags are synthesized and cannot be declared")
        return value

    @property
    def display_name(self) -> str:
        return self.pretty_name or self.name


class BenchmarkDefinition(BaseModel):
    """One raw benchmark record as declared in a suite file."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Benchmark display name")
    description: str = Field("", description="One-line description")
    filename: str = Field(
        ...,
        description="Identifying path of the benchmark (e.g. 'tests/addrow.py')",
    )
    runs: list[tuple[str, Any]] = Field(
        ..., min_length=1, description="Ordered (run name, argument) pairs"
    )
    weight: float = Field(..., ge=0, description="Raw, unnormalized weight")
    baseline_time: float = Field(
        ..., gt=0, alias="baselineTime", description="Reference duration in ms"
    )
    tags: list[str] = Field(default_factory=list, description="Declared tag names")
    issue_number: int | None = Field(
        None, alias="issueNumber", description="Tracking issue for this benchmark"
    )
    extended: bool = Field(
        False, description="Excluded from the default core set when True"
    )


class SuiteDefinition(BaseModel):
    """Root of a suite file: version label, tag declarations and benchmarks."""

    version: str = Field("hornet", description="Suite version label for the index")
    tags: list[TagDefinition] = Field(default_factory=list)
    benchmarks: list[BenchmarkDefinition] = Field(..., min_length=1)


# ============================================================================
# Results
# ============================================================================


class RunResult(BaseModel):
    """Timing statistics for one completed run of a benchmark."""

    name: str = Field(..., description="Run name")
    mean: float = Field(..., ge=0, description="Mean duration in milliseconds")
    rme: float = Field(..., ge=0, description="Relative margin of error in percent")
    runs: int = Field(..., ge=0, description="Number of samples taken")
