"""Registry owning the ordered, weight-normalized benchmark collection.

Usage:
    from hornet.benchmarks.registry import BenchmarkRegistry

    registry = BenchmarkRegistry(suite.benchmarks)

    # Registry order is execution order
    for benchmark in registry:
        print(benchmark.id, f"{benchmark.computed_weight:.2f}%")

    # Look up by id
    benchmark = registry.get_benchmark("addrow")
"""

from collections.abc import Iterable, Iterator

from hornet.benchmarks.base import Benchmark
from hornet.models.suite_models import BenchmarkDefinition
from hornet.utils.logger import Logger


class BenchmarkRegistryError(Exception):
    """Base exception for registry errors."""

    pass


class ZeroWeightRegistryError(BenchmarkRegistryError):
    """Raised when the benchmarks' weights sum to zero."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Total weight of {count} benchmark(s) is zero; weights cannot be "
            "normalized"
        )


class BenchmarkIdCollisionError(BenchmarkRegistryError):
    """Raised when two definitions derive the same benchmark id."""

    def __init__(self, benchmark_id: str, first: str, second: str) -> None:
        self.benchmark_id = benchmark_id
        super().__init__(
            f"Benchmark id collision: '{benchmark_id}' is derived from both "
            f"{first} and {second}"
        )


class BenchmarkNotFoundError(BenchmarkRegistryError):
    """Raised when a requested benchmark is not found."""

    def __init__(self, benchmark_id: str) -> None:
        self.benchmark_id = benchmark_id
        super().__init__(f"Benchmark not found: '{benchmark_id}'")


class BenchmarkRegistry:
    """Ordered, immutable collection of benchmarks indexed by id.

    Raises ZeroWeightRegistryError, BenchmarkIdCollisionError or
    MalformedBenchmarkPathError while constructing, so an invalid suite never
    reaches the runner.

    Example:
        >>> registry = BenchmarkRegistry(definitions)
        >>> round(sum(b.computed_weight for b in registry), 6)
        100.0
    """

    def __init__(self, definitions: Iterable[BenchmarkDefinition]) -> None:
        definitions = list(definitions)
        total_weight = sum(definition.weight for definition in definitions)
        if total_weight <= 0:
            raise ZeroWeightRegistryError(len(definitions))

        self._benchmarks: list[Benchmark] = []
        self._by_id: dict[str, Benchmark] = {}

        for index, definition in enumerate(definitions):
            benchmark = Benchmark(
                definition,
                index=index,
                computed_weight=definition.weight / total_weight * 100,
            )
            if benchmark.id in self._by_id:
                raise BenchmarkIdCollisionError(
                    benchmark.id, self._by_id[benchmark.id].filename, benchmark.filename
                )
            self._benchmarks.append(benchmark)
            self._by_id[benchmark.id] = benchmark

        Logger.component("benchmarks.registry").debug(
            f"Registered {len(self._benchmarks)} benchmarks "
            f"(total weight {total_weight:g})"
        )

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def benchmarks(self) -> tuple[Benchmark, ...]:
        """All benchmarks in registry (execution) order."""
        return tuple(self._benchmarks)

    @property
    def has_extended(self) -> bool:
        return any(benchmark.extended for benchmark in self._benchmarks)

    def get_benchmark(self, benchmark_id: str) -> Benchmark:
        """Get a benchmark by id (case-insensitive).

        Raises:
            BenchmarkNotFoundError: If no benchmark has this id.
        """
        benchmark = self.find(benchmark_id)
        if benchmark is None:
            raise BenchmarkNotFoundError(benchmark_id)
        return benchmark

    def find(self, benchmark_id: str) -> Benchmark | None:
        """Get a benchmark by id, or None when unknown."""
        return self._by_id.get(benchmark_id.lower())

    def enabled_ids(self) -> list[str]:
        return [b.id for b in self._benchmarks if b.enabled]

    def disabled_ids(self) -> list[str]:
        return [b.id for b in self._benchmarks if not b.enabled]

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def set_enabled(self, benchmark_id: str, enabled: bool) -> bool:
        """Toggle one benchmark. Returns False when the id is unknown."""
        benchmark = self.find(benchmark_id)
        if benchmark is None:
            return False
        benchmark.enabled = enabled
        return True

    def enable_all(self) -> None:
        for benchmark in self._benchmarks:
            benchmark.enabled = True

    def disable_all(self) -> None:
        for benchmark in self._benchmarks:
            benchmark.enabled = False

    def __len__(self) -> int:
        return len(self._benchmarks)

    def __iter__(self) -> Iterator[Benchmark]:
        return iter(self._benchmarks)

    def __getitem__(self, index: int) -> Benchmark:
        return self._benchmarks[index]

    def __contains__(self, benchmark_id: object) -> bool:
        return isinstance(benchmark_id, str) and benchmark_id.lower() in self._by_id
