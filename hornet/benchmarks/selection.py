"""Shareable selection identifier codec.

The enabled flags on the registry are the source of truth. The identifier is
a derived view, small enough for a URL fragment:

    ""            the core set (default)
    "et=<tag>"    exactly the members of one tag
    "e=<ids>"     only these benchmarks
    "d=<ids>"     everything except these benchmarks

Usage:
    from hornet.benchmarks.selection import SelectionCodec

    codec = SelectionCodec(registry, tags)
    fragment = codec.current()       # encode the registry's selection
    codec.decode("et=dom")           # apply a fragment to the registry
"""

from collections.abc import Collection

from hornet.benchmarks.registry import BenchmarkRegistry
from hornet.benchmarks.tags import Tag, TagIndex
from hornet.models.constants import SELECT_NOTHING_FRAGMENT
from hornet.utils.logger import Logger


class SelectionCodec:
    """Encode and decode the enabled/disabled partition of a registry."""

    def __init__(self, registry: BenchmarkRegistry, tags: TagIndex) -> None:
        self._registry = registry
        self._tags = tags
        self._log = Logger.component("benchmarks.selection")

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def encode(self, enabled_ids: Collection[str]) -> str:
        """Return the shortest identifier for ``enabled_ids``.

        Ids not present in the registry are ignored.
        """
        enabled_set = {benchmark_id.lower() for benchmark_id in enabled_ids}
        enabled = [b.id for b in self._registry if b.id in enabled_set]
        disabled = [b.id for b in self._registry if b.id not in enabled_set]

        if not enabled:
            return SELECT_NOTHING_FRAGMENT

        winner = self._best_covering_tag(set(enabled))
        if winner is not None and len(winner.members) == len(enabled):
            if winner is self._tags.core:
                return ""
            return f"et={winner.name.lower()}"

        if not disabled:
            return ""
        if len(disabled) < len(enabled):
            return "d=" + ",".join(disabled)
        return "e=" + ",".join(enabled)

    def current(self) -> str:
        """Encode the registry's current selection."""
        return self.encode(self._registry.enabled_ids())

    def _best_covering_tag(self, enabled: set[str]) -> Tag | None:
        """Largest tag whose entire membership is enabled; earliest wins ties."""
        best: Tag | None = None
        for tag in self._tags.ordered():
            if not tag.members or not enabled.issuperset(tag.members):
                continue
            if best is None or len(tag.members) > len(best.members):
                best = tag
        return best

    # -------------------------------------------------------------------------
    # Decoding
    # -------------------------------------------------------------------------

    def decode(self, fragment: str) -> None:
        """Apply ``fragment`` to the registry's enabled flags.

        Unknown tags and ids are skipped silently. ``e``/``d`` segments are
        applied left to right.
        """
        fragment = fragment.strip().lstrip("#").lower()
        if not fragment:
            self.select_tag(self._tags.core)
            return

        segments = [
            tuple(segment.split("=", 1))
            for segment in fragment.split("&")
            if "=" in segment
        ]

        for key, value in segments:
            if key != "et":
                continue
            tag = self._tags.get(value)
            if tag is None:
                self._log.debug(f"Ignoring unknown tag in selection: '{value}'")
                continue
            self.select_tag(tag)
            return

        for key, value in segments:
            if key == "e":
                self._registry.disable_all()
                self._apply_ids(value, enabled=True)
            elif key == "d":
                self._apply_ids(value, enabled=False)

    def _apply_ids(self, id_list: str, enabled: bool) -> None:
        for benchmark_id in filter(None, id_list.split(",")):
            if not self._registry.set_enabled(benchmark_id, enabled):
                self._log.debug(f"Ignoring unknown benchmark: '{benchmark_id}'")

    # -------------------------------------------------------------------------
    # Tag-driven selection
    # -------------------------------------------------------------------------

    def select_tag(self, tag: Tag) -> None:
        """Enable exactly the members of ``tag``."""
        self._registry.disable_all()
        self.add_tag(tag)

    def add_tag(self, tag: Tag) -> None:
        """Enable the members of ``tag`` on top of the current selection."""
        for benchmark_id in tag.members:
            self._registry.set_enabled(benchmark_id, True)
