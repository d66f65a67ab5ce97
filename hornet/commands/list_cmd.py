"""List command - shows a suite's benchmarks and tags.

CLI Examples:
    hornet list suite.yaml                    # Default (core) selection
    hornet list suite.yaml -s et=extended     # Show a shared selection
"""

import click

from hornet.commands.common import load_suite_or_exit
from hornet.models.constants import TagSelectionState

_STATE_MARKS = {
    TagSelectionState.FULL: "[x]",
    TagSelectionState.PARTIAL: "[~]",
    TagSelectionState.INACTIVE: "[ ]",
}


def run_list(suite_path: str, selection: str | None = None) -> None:
    """Print benchmarks with weights and enabled flags, then tag states."""
    suite = load_suite_or_exit(suite_path, selection if selection is not None else "")
    registry = suite.registry

    click.echo(f"Suite: {suite.version}")
    click.echo("-" * 60)
    click.echo(f"    {'Id':<16}{'Name':<24}{'Baseline':>10}{'Weight':>9}")
    for benchmark in registry:
        mark = "[x]" if benchmark.enabled else "[ ]"
        extended = " (extended)" if benchmark.extended else ""
        click.echo(
            f"{mark} {benchmark.id:<16}{benchmark.name[:23]:<24}"
            f"{benchmark.baseline_time:>8.2f}ms{benchmark.computed_weight:>8.2f}%"
            f"{extended}"
        )

    click.echo()
    click.echo("Tags:")
    enabled = registry.enabled_ids()
    for tag in suite.tags.ordered():
        state = suite.tags.selection_state(tag, enabled)
        click.echo(
            f"{_STATE_MARKS[state]} {tag.display_name:<20} {tag.kind.value:<11} "
            f"{len(tag.members)} benchmark(s)"
        )

    click.echo("-" * 60)
    fragment = suite.codec.current()
    click.echo(f"Selection: #{fragment}" if fragment else "Selection: (default)")
