"""Tests for benchmark scoring and index formatting."""

import pytest

from hornet.models.suite_models import RunResult
from hornet.runner.scoring import (
    ScoreBoard,
    format_index,
    format_raw_score,
    raw_score,
    score,
)


def test_score_formulas():
    """Test weight 50 of 100 with baseline 100ms and mean 200ms."""
    assert score(100, 50, 200) == 25
    assert raw_score(200, 50) == 10000


def test_score_at_baseline_contributes_weight():
    """Test a benchmark running at its baseline contributes its weight."""
    assert score(40, 12.5, 40) == pytest.approx(12.5)


def test_score_zero_mean():
    """Test a zero mean cannot be scored."""
    with pytest.raises(ZeroDivisionError):
        score(100, 50, 0)


@pytest.mark.parametrize(
    ("value", "final", "expected"),
    [
        (25, False, "025.00"),
        (25, True, "25.00"),
        (0, False, "000.00"),
        (7.456, False, "007.46"),
        (104.126, True, "104.13"),
        (1234.5, False, "1234.50"),
    ],
)
def test_format_index(value, final, expected):
    """Test rounding to two decimals and padding while running."""
    assert format_index(value, final=final) == expected


def test_format_raw_score():
    assert format_raw_score(10000) == "10000.00"


def test_scoreboard_accumulates(registry):
    """Test adding completed benchmarks to the running totals."""
    board = ScoreBoard()
    addrow = registry.get_benchmark("addrow")
    addrow.results = [
        RunResult(name="250 rows", mean=80.0, rme=1.0, runs=5),
        RunResult(name="500 rows", mean=120.0, rme=1.0, runs=5),
    ]

    benchmark_score, benchmark_raw = board.add(addrow)

    # baseline 100ms, computed weight 25%, accumulated mean 200ms
    assert benchmark_score == pytest.approx(12.5)
    assert benchmark_raw == pytest.approx(5000)
    assert board.index() == "012.50"
    assert board.index(final=True) == "12.50"

    board.reset()
    assert board.score == 0.0
    assert board.raw_score == 0.0
