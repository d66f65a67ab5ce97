"""Tests for the tag index."""

import pytest
from pydantic import ValidationError

from hornet.benchmarks.registry import BenchmarkRegistry
from hornet.benchmarks.tags import TagIndex, UnknownTagError
from hornet.models.constants import TagKind, TagSelectionState
from hornet.models.suite_models import BenchmarkDefinition, TagDefinition


def test_tag_display_order(tags):
    """Test special tags first, then technology tags, then app tags."""
    assert [tag.key for tag in tags.ordered()] == [
        "CORE",
        "EXTENDED",
        "NONE",
        "DOM",
        "CANVAS",
        "TABLE",
        "GMAIL",
    ]


def test_special_tag_membership(tags):
    """Test CORE, EXTENDED and NONE membership."""
    assert tags.core.members == ("addrow", "sortrows", "canvasdraw")
    assert tags.extended.members == ("addrow", "sortrows", "canvasdraw", "mailview")
    assert tags.none.members == ()
    assert all(tag.is_special for tag in (tags.core, tags.extended, tags.none))


def test_declared_tag_membership(tags):
    """Test membership follows declaration, matching names case-insensitively."""
    assert tags.members("dom") == ("addrow", "mailview")
    assert tags.members("Table") == ("addrow", "sortrows")
    assert tags.members("gmail") == ("mailview",)
    assert tags.members("missing") == ()


def test_tag_lookup(tags):
    """Test case-insensitive lookup and display names."""
    canvas = tags.get("CANVAS")
    assert canvas is not None
    assert canvas.display_name == "Canvas 2D"
    assert canvas.kind == TagKind.TECHNOLOGY
    assert tags.get("GMail").kind == TagKind.APP
    assert tags.get("missing") is None
    assert "dom" in tags
    assert "missing" not in tags


def test_tags_for_benchmark(tags):
    """Test the benchmark-to-tags mapping."""
    assert tags.tags_for("addrow") == ("DOM", "TABLE", "CORE", "EXTENDED")
    assert tags.tags_for("mailview") == ("DOM", "GMAIL", "EXTENDED")
    assert tags.tags_for("missing") == ()


def test_no_extended_tag_without_extended_benchmarks():
    """Test EXTENDED only exists when some benchmark is extended."""
    registry = BenchmarkRegistry(
        [
            BenchmarkDefinition(
                name="A",
                filename="t/a.py",
                runs=[("r", None)],
                weight=1,
                baselineTime=1,
            )
        ]
    )
    tags = TagIndex(registry)
    assert tags.extended is None
    assert [tag.key for tag in tags.ordered()] == ["CORE", "NONE"]
    assert tags.tags_for("a") == ("CORE",)


def test_unknown_tag_reference():
    """Test a benchmark referencing an undeclared tag is rejected."""
    registry = BenchmarkRegistry(
        [
            BenchmarkDefinition(
                name="A",
                filename="t/a.py",
                runs=[("r", None)],
                weight=1,
                baselineTime=1,
                tags=["WebGL"],
            )
        ]
    )
    with pytest.raises(UnknownTagError) as exc_info:
        TagIndex(registry, [TagDefinition(name="DOM")])
    assert exc_info.value.tag_name == "WebGL"
    assert exc_info.value.benchmark_id == "a"


def test_reserved_tag_names():
    """Test special tag names and kinds cannot be declared."""
    for name in ("core", "Extended", "NONE"):
        with pytest.raises(ValidationError):
            TagDefinition(name=name)
    with pytest.raises(ValidationError):
        TagDefinition(name="Custom", kind=TagKind.SPECIAL)


def test_selection_state(tags):
    """Test full, partial and inactive tag states."""
    dom = tags.get("dom")
    assert tags.selection_state(dom, ["addrow", "mailview"]) == TagSelectionState.FULL
    assert tags.selection_state(dom, ["addrow"]) == TagSelectionState.PARTIAL
    assert tags.selection_state(dom, ["canvasdraw"]) == TagSelectionState.INACTIVE


def test_selection_state_none_tag(tags):
    """Test NONE is full exactly when nothing is enabled."""
    assert tags.selection_state(tags.none, []) == TagSelectionState.FULL
    assert tags.selection_state(tags.none, ["addrow"]) == TagSelectionState.INACTIVE
