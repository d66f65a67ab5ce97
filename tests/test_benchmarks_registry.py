"""Tests for the benchmark registry and benchmark id derivation."""

import pytest

from hornet.benchmarks.base import MalformedBenchmarkPathError, derive_benchmark_id
from hornet.benchmarks.registry import (
    BenchmarkIdCollisionError,
    BenchmarkNotFoundError,
    BenchmarkRegistry,
    ZeroWeightRegistryError,
)
from hornet.models.constants import BenchmarkStatus
from hornet.models.suite_models import BenchmarkDefinition


def _definition(filename, weight=1.0, **kwargs):
    return BenchmarkDefinition(
        name=kwargs.pop("name", filename),
        filename=filename,
        runs=[("run", None)],
        weight=weight,
        baseline_time=kwargs.pop("baseline_time", 10.0),
        **kwargs,
    )


def test_derive_benchmark_id():
    """Test id derivation from identifying paths."""
    assert derive_benchmark_id("tests/addrow.html") == "addrow"
    assert derive_benchmark_id("tests/AddRow.py") == "addrow"
    assert derive_benchmark_id("a/b/canvas.draw.py") == "canvas"


def test_derive_benchmark_id_malformed():
    """Test that paths without a '/<letters>.' segment are rejected."""
    for filename in ("addrow.html", "tests/add_row", "tests/123.py"):
        with pytest.raises(MalformedBenchmarkPathError):
            derive_benchmark_id(filename)


def test_registry_weights_normalized(registry):
    """Test computed weights sum to 100 and follow raw weights."""
    weights = {b.id: b.computed_weight for b in registry}
    assert weights == {
        "addrow": 25.0,
        "sortrows": 12.5,
        "canvasdraw": 12.5,
        "mailview": 50.0,
    }
    assert sum(weights.values()) == pytest.approx(100.0)


def test_registry_order_and_index(registry):
    """Test registry order is input order and index matches position."""
    assert [b.id for b in registry] == ["addrow", "sortrows", "canvasdraw", "mailview"]
    for position, benchmark in enumerate(registry):
        assert benchmark.index == position
        assert registry[position] is benchmark


def test_registry_initial_state(registry):
    """Test new benchmarks are enabled, without status or results."""
    for benchmark in registry:
        assert benchmark.enabled
        assert benchmark.status == BenchmarkStatus.NO_STATUS
        assert benchmark.results == []
        assert benchmark.accumulated_mean == 0.0


def test_registry_zero_weight():
    """Test that an all-zero weight suite cannot be constructed."""
    with pytest.raises(ZeroWeightRegistryError) as exc_info:
        BenchmarkRegistry([_definition("t/a.py", 0), _definition("t/b.py", 0)])
    assert exc_info.value.count == 2


def test_registry_zero_weight_member_allowed():
    """Test a single zero-weight benchmark is fine when the total is positive."""
    registry = BenchmarkRegistry([_definition("t/a.py", 0), _definition("t/b.py", 3)])
    assert registry.get_benchmark("a").computed_weight == 0.0
    assert registry.get_benchmark("b").computed_weight == 100.0


def test_registry_id_collision():
    """Test two files deriving the same id are rejected."""
    with pytest.raises(BenchmarkIdCollisionError):
        BenchmarkRegistry([_definition("t/addrow.py"), _definition("u/AddRow.html")])


def test_registry_lookup(registry):
    """Test case-insensitive lookup and missing ids."""
    assert registry.get_benchmark("ADDROW").name == "Add Rows to Table"
    assert "SortRows" in registry
    assert "missing" not in registry
    assert registry.find("missing") is None

    with pytest.raises(BenchmarkNotFoundError):
        registry.get_benchmark("missing")


def test_registry_selection(registry):
    """Test toggling enabled flags."""
    assert registry.set_enabled("sortrows", False)
    assert not registry.set_enabled("missing", False)
    assert registry.disabled_ids() == ["sortrows"]

    registry.disable_all()
    assert registry.enabled_ids() == []

    registry.enable_all()
    assert len(registry.enabled_ids()) == len(registry)


def test_benchmark_attributes(registry):
    """Test fields carried over from the definition."""
    addrow = registry.get_benchmark("addrow")
    assert [run.name for run in addrow.runs] == ["250 rows", "500 rows"]
    assert [run.argument for run in addrow.runs] == [250, 500]
    assert addrow.issue_url.endswith("/issues/12")
    assert addrow.runner_url("use_test_runner") == "tests/addrow.py?use_test_runner"
    assert registry.get_benchmark("sortrows").issue_url is None
    assert registry.has_extended
