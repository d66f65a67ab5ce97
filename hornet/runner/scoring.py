"""Scoring: weighted per-benchmark scores and the aggregate index.

A benchmark that takes exactly its baseline time contributes its computed
weight to the index, so a run matching the reference hardware scores 100.
"""

from hornet.benchmarks.base import Benchmark


def score(baseline: float, computed_weight: float, accumulated_mean: float) -> float:
    """Weighted score of one benchmark.

    Raises:
        ZeroDivisionError: If ``accumulated_mean`` is zero.
    """
    return baseline * computed_weight / accumulated_mean


def raw_score(accumulated_mean: float, computed_weight: float) -> float:
    """Weighted raw time of one benchmark (lower is faster)."""
    return accumulated_mean * computed_weight


def format_index(value: float, final: bool = False) -> str:
    """Format the index with two decimals.

    While running the integer part is zero-padded to three digits so the
    display does not jump around; the final index is unpadded.

    Example:
        >>> format_index(25)
        '025.00'
        >>> format_index(104.126, final=True)
        '104.13'
    """
    integer, fraction = f"{round(value * 100) / 100:.2f}".split(".")
    if not final:
        integer = integer.zfill(3)
    return f"{integer}.{fraction}"


def format_raw_score(value: float) -> str:
    return f"{value:.2f}"


class ScoreBoard:
    """Running totals of score and raw score across one run."""

    def __init__(self) -> None:
        self.score = 0.0
        self.raw_score = 0.0

    def reset(self) -> None:
        self.score = 0.0
        self.raw_score = 0.0

    def add(self, benchmark: Benchmark) -> tuple[float, float]:
        """Add a completed benchmark's contribution.

        Returns:
            The benchmark's (score, raw score).
        """
        mean = benchmark.accumulated_mean
        weight = benchmark.computed_weight
        benchmark_score = score(benchmark.baseline_time, weight, mean)
        benchmark_raw = raw_score(mean, weight)
        self.score += benchmark_score
        self.raw_score += benchmark_raw
        return benchmark_score, benchmark_raw

    def index(self, final: bool = False) -> str:
        return format_index(self.score, final=final)
