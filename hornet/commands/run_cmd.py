"""Run command - executes a suite sequentially and prints results.

CLI Examples:
    hornet run suite.yaml                       # Core set, text report
    hornet run suite.yaml -s et=extended        # Everything
    hornet run suite.yaml -f json --samples 20  # JSON, more samples
"""

import sys

import click
from pydantic import ValidationError

from hornet.commands.common import load_suite_or_exit
from hornet.config import RunnerSettings
from hornet.models.constants import RUNNING_NOTE
from hornet.runner.context import ModuleContextFactory
from hornet.runner.orchestrator import RunObserver, SuiteRunner
from hornet.runner.results import OutputFormat, SuiteResults
from hornet.utils.env import EnvVarError


class _EchoObserver(RunObserver):
    """Prints one progress line per finished benchmark to stderr."""

    def on_benchmark_scored(self, benchmark, score):
        click.echo(f"  {benchmark.name}: {benchmark.accumulated_mean:.2f}ms", err=True)

    def on_score(self, index, raw_score, final):
        if not final:
            click.echo(f"  index {index}", err=True)


def run_suite(
    suite_path: str,
    selection: str | None = None,
    fmt: str = "text",
    samples: int | None = None,
) -> None:
    """Run every enabled benchmark of a suite and emit the results."""
    suite = load_suite_or_exit(suite_path, selection if selection is not None else "")

    try:
        settings = RunnerSettings.from_env(samples_per_run=samples)
    except (EnvVarError, ValidationError) as e:
        click.echo(f"Error: Invalid runner settings: {e}", err=True)
        sys.exit(1)

    runner = SuiteRunner(
        suite.registry,
        ModuleContextFactory(suite.base_dir),
        settings=settings,
        observer=_EchoObserver(),
    )

    click.echo(f"Running {len(suite.registry.enabled_ids())} benchmark(s)...", err=True)
    click.echo(RUNNING_NOTE, err=True)
    try:
        runner.run_to_completion()
    finally:
        runner.close()

    results = SuiteResults.from_runner(
        runner, suite_version=suite.version, selection=suite.codec.current()
    )
    results.emit(sys.stdout, OutputFormat(fmt))

    if runner.summary is not None and runner.summary.failed:
        sys.exit(2)
