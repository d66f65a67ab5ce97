"""Tests for execution contexts and the module context factory."""

import sys
from unittest.mock import MagicMock

import pytest

from hornet.runner.context import (
    ExecutionContext,
    ModuleContextFactory,
    Placement,
    ScreenArea,
    place_bottom_right,
)
from hornet.runner.errors import ContextLoadError

PLACEMENT = Placement(left=1120, top=480, width=800, height=600)

BENCHMARK_SOURCE = """\
rows = []

def set_up(count):
    rows.clear()

def test(count):
    rows.extend(range(count))

def tear_down(count):
    rows.clear()
"""


def test_place_bottom_right():
    """Test the viewport is anchored to the screen's bottom-right corner."""
    screen = ScreenArea(width=1920, height=1080, left=0, top=20)
    assert place_bottom_right(screen, 800, 600) == Placement(
        left=1120, top=500, width=800, height=600
    )


def test_place_bottom_right_overshoot():
    """Test a viewport larger than the screen yields negative offsets."""
    placement = place_bottom_right(ScreenArea(width=640, height=480), 800, 600)
    assert (placement.left, placement.top) == (-160, -120)


def test_execution_context_close_is_idempotent():
    """Test closing twice runs the close hook once."""
    on_close = MagicMock()
    context = ExecutionContext("tests/a.py?x", on_close=on_close)
    assert not context.closed

    context.close()
    context.close()

    assert context.closed
    on_close.assert_called_once()
    assert context.test is None


def test_module_factory_loads_hooks(tmp_path):
    """Test hooks are read from the benchmark module."""
    (tmp_path / "tests").mkdir()
    (tmp_path / "tests" / "addrow.py").write_text(BENCHMARK_SOURCE)
    factory = ModuleContextFactory(tmp_path)
    on_loaded = MagicMock()
    before = set(sys.modules)

    context = factory.open("tests/addrow.py?use_test_runner", PLACEMENT, on_loaded)

    on_loaded.assert_called_once()
    assert context.url == "tests/addrow.py?use_test_runner"
    assert context.set_up is not None
    assert context.test is not None
    assert context.tear_down is not None
    assert context.test_async is None
    assert context.reset_random is None

    loaded = set(sys.modules) - before
    assert len(loaded) == 1

    context.close()
    assert not loaded & set(sys.modules)


def test_module_factory_isolates_contexts(tmp_path):
    """Test each context gets a fresh module."""
    (tmp_path / "t").mkdir()
    (tmp_path / "t" / "addrow.py").write_text(BENCHMARK_SOURCE)
    factory = ModuleContextFactory(tmp_path)

    first = factory.open("t/addrow.py", PLACEMENT, lambda: None)
    first.test(3)
    second = factory.open("t/addrow.py", PLACEMENT, lambda: None)

    assert first.test.__globals__["rows"] == [0, 1, 2]
    assert second.test.__globals__["rows"] == []
    first.close()
    second.close()


def test_module_factory_missing_file(tmp_path):
    """Test a missing benchmark file is a load failure."""
    factory = ModuleContextFactory(tmp_path)
    on_loaded = MagicMock()

    with pytest.raises(ContextLoadError) as exc_info:
        factory.open("tests/missing.py?use_test_runner", PLACEMENT, on_loaded)

    assert exc_info.value.url == "tests/missing.py?use_test_runner"
    on_loaded.assert_not_called()


def test_module_factory_import_error(tmp_path):
    """Test a module that fails to execute is a load failure."""
    (tmp_path / "broken.py").write_text("raise ImportError('no dom here')\n")
    factory = ModuleContextFactory(tmp_path)

    with pytest.raises(ContextLoadError, match="no dom here"):
        factory.open("broken.py", PLACEMENT, lambda: None)

    assert not [n for n in sys.modules if n.startswith("hornet_benchmark_broken")]
