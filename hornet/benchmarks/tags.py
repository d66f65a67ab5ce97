"""Tag index: special sentinel groups plus user-declared tags.

The index is built once from a registry and the suite's tag declarations and
is immutable afterwards. Membership is held as two mappings (tag name to
benchmark ids and benchmark id to tag names) rather than object links.

Usage:
    from hornet.benchmarks.tags import TagIndex

    tags = TagIndex(registry, suite.tags)
    core = tags.core
    dom = tags.get("dom")  # case-insensitive, None if unknown
    for tag in tags.ordered():
        print(tag.display_name, len(tag.members))
"""

from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass

from hornet.benchmarks.registry import BenchmarkRegistry, BenchmarkRegistryError
from hornet.models.constants import (
    CORE_TAG,
    EXTENDED_TAG,
    NONE_TAG,
    TagKind,
    TagSelectionState,
)
from hornet.models.suite_models import TagDefinition


class UnknownTagError(BenchmarkRegistryError):
    """Raised when a benchmark references a tag that was never declared."""

    def __init__(self, tag_name: str, benchmark_id: str) -> None:
        self.tag_name = tag_name
        self.benchmark_id = benchmark_id
        super().__init__(
            f"Benchmark '{benchmark_id}' references undeclared tag '{tag_name}'"
        )


@dataclass(frozen=True)
class Tag:
    """A named grouping of benchmarks used for bulk selection."""

    name: str
    display_name: str
    kind: TagKind
    members: tuple[str, ...]

    @property
    def key(self) -> str:
        """Case-folded lookup key."""
        return self.name.upper()

    @property
    def is_special(self) -> bool:
        return self.kind == TagKind.SPECIAL


class TagIndex:
    """Immutable tag lookup for one registry.

    CORE always exists and holds exactly the non-extended benchmarks. NONE
    always exists and never has members. EXTENDED exists only when at least
    one benchmark is extended and then holds every benchmark.
    """

    def __init__(
        self,
        registry: BenchmarkRegistry,
        declarations: Iterable[TagDefinition] = (),
    ) -> None:
        declarations = list(declarations)
        declared_keys = {d.name.upper() for d in declarations}

        tag_members: dict[str, list[str]] = {d.name.upper(): [] for d in declarations}
        benchmark_tags: dict[str, list[str]] = {}

        core_members: list[str] = []
        has_extended = registry.has_extended

        for benchmark in registry:
            names: list[str] = []
            for tag_name in benchmark.declared_tags:
                key = tag_name.upper()
                if key not in declared_keys:
                    raise UnknownTagError(tag_name, benchmark.id)
                if key not in names:
                    names.append(key)
                    tag_members[key].append(benchmark.id)
            if not benchmark.extended:
                names.append(CORE_TAG)
                core_members.append(benchmark.id)
            if has_extended:
                names.append(EXTENDED_TAG)
            benchmark_tags[benchmark.id] = names

        special = [Tag(CORE_TAG, "Core", TagKind.SPECIAL, tuple(core_members))]
        if has_extended:
            special.append(
                Tag(
                    EXTENDED_TAG,
                    "Extended",
                    TagKind.SPECIAL,
                    tuple(b.id for b in registry),
                )
            )
        special.append(Tag(NONE_TAG, "None", TagKind.SPECIAL, ()))

        declared = [
            Tag(d.name, d.display_name, d.kind, tuple(tag_members[d.name.upper()]))
            for d in declarations
        ]
        technology = [t for t in declared if t.kind == TagKind.TECHNOLOGY]
        app = [t for t in declared if t.kind != TagKind.TECHNOLOGY]

        self._ordered: tuple[Tag, ...] = tuple(special + technology + app)
        self._by_key: dict[str, Tag] = {tag.key: tag for tag in self._ordered}
        self._benchmark_tags: dict[str, tuple[str, ...]] = {
            benchmark_id: tuple(names) for benchmark_id, names in benchmark_tags.items()
        }

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def core(self) -> Tag:
        return self._by_key[CORE_TAG]

    @property
    def extended(self) -> Tag | None:
        return self._by_key.get(EXTENDED_TAG)

    @property
    def none(self) -> Tag:
        return self._by_key[NONE_TAG]

    def get(self, name: str) -> Tag | None:
        """Look up a tag by name, case-insensitively."""
        return self._by_key.get(name.upper())

    def ordered(self) -> tuple[Tag, ...]:
        """Tags in display order: CORE, EXTENDED, NONE, technology, app."""
        return self._ordered

    def members(self, name: str) -> tuple[str, ...]:
        tag = self.get(name)
        return tag.members if tag else ()

    def tags_for(self, benchmark_id: str) -> tuple[str, ...]:
        """Tag keys a benchmark belongs to, including CORE/EXTENDED."""
        return self._benchmark_tags.get(benchmark_id.lower(), ())

    def selection_state(self, tag: Tag, enabled: Collection[str]) -> TagSelectionState:
        """Classify how much of ``tag`` the enabled set covers."""
        enabled = set(enabled)
        if tag.is_special and not tag.members:
            # NONE is "fully selected" exactly when nothing is enabled
            return TagSelectionState.INACTIVE if enabled else TagSelectionState.FULL

        covered = sum(1 for member in tag.members if member in enabled)
        if covered == len(tag.members):
            return TagSelectionState.FULL
        if covered:
            return TagSelectionState.PARTIAL
        return TagSelectionState.INACTIVE

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._by_key
