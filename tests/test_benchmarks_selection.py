"""Tests for the selection identifier codec."""

from itertools import combinations

import pytest

from hornet.benchmarks.registry import BenchmarkRegistry
from hornet.benchmarks.selection import SelectionCodec
from hornet.benchmarks.tags import TagIndex
from hornet.models.suite_models import BenchmarkDefinition, TagDefinition

ALL_IDS = ("addrow", "sortrows", "canvasdraw", "mailview")


@pytest.mark.parametrize(
    ("enabled", "expected"),
    [
        ((), "et=none"),
        (("addrow", "sortrows", "canvasdraw"), ""),
        (ALL_IDS, "et=extended"),
        (("addrow", "sortrows"), "et=table"),
        (("addrow", "mailview"), "et=dom"),
        (("mailview",), "et=gmail"),
        (("addrow",), "e=addrow"),
        (("addrow", "canvasdraw"), "e=addrow,canvasdraw"),
        (("addrow", "sortrows", "mailview"), "d=canvasdraw"),
    ],
)
def test_encode(codec, enabled, expected):
    """Test the shortest identifier is chosen for each partition."""
    assert codec.encode(enabled) == expected


def test_encode_ignores_unknown_ids(codec):
    """Test unknown ids in the enabled set do not change the encoding."""
    assert codec.encode(["ADDROW", "sortrows", "bogus"]) == "et=table"


def test_encode_tie_prefers_display_order():
    """Test equally sized exact tags resolve to the earlier one in display order."""
    registry = BenchmarkRegistry(
        [
            BenchmarkDefinition(
                name=name,
                filename=f"t/{name}.py",
                runs=[("r", None)],
                weight=1,
                baselineTime=1,
                tags=tag_names,
            )
            for name, tag_names in (("one", ["Zeta", "Alpha"]), ("two", []))
        ]
    )
    # App tags come after technology tags regardless of declaration order
    tags = TagIndex(
        registry,
        [TagDefinition(name="Alpha", type="app"), TagDefinition(name="Zeta")],
    )
    assert SelectionCodec(registry, tags).encode(["one"]) == "et=zeta"


def test_current(registry, codec):
    """Test encoding the registry's live selection."""
    assert codec.current() == "et=extended"
    registry.set_enabled("mailview", False)
    assert codec.current() == ""


@pytest.mark.parametrize(
    ("fragment", "expected"),
    [
        ("", ("addrow", "sortrows", "canvasdraw")),
        ("#", ("addrow", "sortrows", "canvasdraw")),
        ("et=dom", ("addrow", "mailview")),
        ("#ET=Table", ("addrow", "sortrows")),
        ("et=none", ()),
        ("et=extended", ALL_IDS),
        ("e=canvasdraw,mailview", ("canvasdraw", "mailview")),
        ("d=addrow", ("sortrows", "canvasdraw", "mailview")),
        ("et=bogus&et=canvas", ("canvasdraw",)),
        ("e=addrow&et=gmail", ("mailview",)),
        ("e=addrow,bogus,", ("addrow",)),
        ("e=addrow,sortrows&d=sortrows", ("addrow",)),
        ("junk&d=mailview", ("addrow", "sortrows", "canvasdraw")),
    ],
)
def test_decode(registry, codec, fragment, expected):
    """Test decoding onto a fully enabled registry."""
    codec.decode(fragment)
    assert tuple(registry.enabled_ids()) == expected


def test_decode_unknown_only_leaves_selection(registry, codec):
    """Test a fragment with nothing recognizable changes nothing."""
    registry.set_enabled("sortrows", False)
    codec.decode("et=bogus&x=1")
    assert registry.disabled_ids() == ["sortrows"]


def test_decode_disable_keeps_current_state(registry, codec):
    """Test 'd=' only disables, leaving other flags as they were."""
    codec.decode("et=table")
    codec.decode("d=sortrows")
    assert registry.enabled_ids() == ["addrow"]


def test_round_trip_every_partition(registry, codec):
    """Test decode(encode(S)) reproduces S for every partition."""
    for size in range(len(ALL_IDS) + 1):
        for enabled in combinations(ALL_IDS, size):
            fragment = codec.encode(enabled)
            registry.enable_all()
            codec.decode(fragment)
            assert set(registry.enabled_ids()) == set(enabled), fragment


def test_select_and_add_tag(registry, codec, tags):
    """Test tag-driven selection replaces or extends the enabled set."""
    codec.select_tag(tags.get("canvas"))
    assert registry.enabled_ids() == ["canvasdraw"]

    codec.add_tag(tags.get("gmail"))
    assert registry.enabled_ids() == ["canvasdraw", "mailview"]

    codec.select_tag(tags.none)
    assert registry.enabled_ids() == []
