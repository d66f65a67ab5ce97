"""Selection command - decode a shareable selection identifier."""

import click

from hornet.commands.common import load_suite_or_exit


def run_selection(suite_path: str, fragment: str) -> None:
    """Print the benchmarks a fragment enables and its canonical form."""
    suite = load_suite_or_exit(suite_path, fragment)

    enabled = suite.registry.enabled_ids()
    listing = ", ".join(enabled) or "-"
    click.echo(f"Enabled ({len(enabled)}/{len(suite.registry)}): {listing}")
    canonical = suite.codec.current()
    click.echo(f"Canonical: #{canonical}" if canonical else "Canonical: (default)")
