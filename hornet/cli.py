#!/usr/bin/env python3
"""Hornet CLI - Command-line interface for Hornet."""

import click

from hornet.utils.env import get_env
from hornet.utils.logger import Logger

SELECTION_HELP = "Selection identifier, e.g. 'et=dom' or 'd=addrow' (default: core set)"


@click.group()
def hornet():
    """Hornet command-line tool for running weighted benchmark suites."""
    if not Logger.is_configured():
        Logger.configure(
            level=get_env("HORNET_LOG_LEVEL", default="WARNING"), timestamps=True
        )


@hornet.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display hornet version information."""
    from hornet.commands.version_cmd import run_version

    run_version(verbose=verbose)


@hornet.command(name="list")
@click.argument("suite", type=click.Path(exists=True, dir_okay=False))
@click.option("--selection", "-s", default=None, help=SELECTION_HELP)
def list_benchmarks(suite, selection):
    """List a suite's benchmarks and tags."""
    from hornet.commands.list_cmd import run_list

    run_list(suite, selection=selection)


@hornet.command()
@click.argument("suite", type=click.Path(exists=True, dir_okay=False))
@click.argument("fragment")
def selection(suite, fragment):
    """Decode a selection identifier against a suite."""
    from hornet.commands.selection_cmd import run_selection

    run_selection(suite, fragment)


@hornet.command()
@click.argument("suite", type=click.Path(exists=True, dir_okay=False))
@click.option("--selection", "-s", default=None, help=SELECTION_HELP)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    help="Output format for results",
)
@click.option(
    "--samples",
    type=click.IntRange(min=1),
    default=None,
    help="Timing samples per run (default: HORNET_SAMPLES or 5)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def run(suite, selection, fmt, samples, verbose):
    r"""Run a benchmark suite, one benchmark at a time.

    \b
    Examples:
      hornet run suite.yaml                    # Core benchmarks
      hornet run suite.yaml -s et=extended     # All benchmarks
      hornet run suite.yaml -s d=addrow        # Core minus one
      hornet run suite.yaml -f json            # JSON results
    """
    from hornet.commands.run_cmd import run_suite

    if verbose:
        Logger.set_level("DEBUG")

    run_suite(suite, selection=selection, fmt=fmt, samples=samples)


if __name__ == "__main__":
    hornet()
