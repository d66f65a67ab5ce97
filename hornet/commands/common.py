"""Helpers shared by CLI commands."""

import sys

import click

from hornet.benchmarks.base import MalformedBenchmarkPathError
from hornet.benchmarks.registry import BenchmarkRegistryError
from hornet.suite import Suite, SuiteLoadError, load_suite


def load_suite_or_exit(path: str, selection: str | None = None) -> Suite:
    """Load a suite and apply an optional selection, exiting on errors."""
    try:
        suite = load_suite(path)
    except (SuiteLoadError, BenchmarkRegistryError, MalformedBenchmarkPathError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if selection is not None:
        suite.codec.decode(selection)
    return suite
