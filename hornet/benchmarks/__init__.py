"""Benchmark data model: registry, tags and the selection codec."""

from hornet.benchmarks.base import (
    Benchmark,
    MalformedBenchmarkPathError,
    Run,
    derive_benchmark_id,
)
from hornet.benchmarks.registry import (
    BenchmarkIdCollisionError,
    BenchmarkNotFoundError,
    BenchmarkRegistry,
    BenchmarkRegistryError,
    ZeroWeightRegistryError,
)
from hornet.benchmarks.selection import SelectionCodec
from hornet.benchmarks.tags import Tag, TagIndex, UnknownTagError

__all__ = [
    "Benchmark",
    "BenchmarkIdCollisionError",
    "BenchmarkNotFoundError",
    "BenchmarkRegistry",
    "BenchmarkRegistryError",
    "MalformedBenchmarkPathError",
    "Run",
    "SelectionCodec",
    "Tag",
    "TagIndex",
    "UnknownTagError",
    "ZeroWeightRegistryError",
    "derive_benchmark_id",
]
