"""Tests for run results collection and emission."""

import json
from io import StringIO
from unittest.mock import MagicMock

import pytest
import yaml

from hornet.models.constants import BenchmarkStatus
from hornet.models.suite_models import RunResult
from hornet.runner.orchestrator import RunSummary
from hornet.runner.results import OutputFormat, SuiteResults


@pytest.fixture
def finished_runner(registry):
    """A runner stand-in whose registry looks like a finished partial run."""
    for benchmark in registry:
        benchmark.status = BenchmarkStatus.SUCCESS
        benchmark.results = [RunResult(name="run", mean=10.0, rme=1.5, runs=5)]
    sortrows = registry.get_benchmark("sortrows")
    sortrows.status = BenchmarkStatus.ABORTED
    sortrows.results = []

    runner = MagicMock()
    runner.registry = registry
    runner.summary = RunSummary(
        total=4,
        successful=3,
        non_core=0,
        blocked=0,
        skipped=0,
        failed=1,
        final=False,
        index="087.50",
        raw_score="1234.00",
        message="1 out of 4 benchmark(s) failed.",
    )
    return runner


def test_from_runner_requires_finished_run():
    runner = MagicMock()
    runner.summary = None
    with pytest.raises(ValueError):
        SuiteResults.from_runner(runner)


def test_to_dict(finished_runner):
    """Test the dictionary layout of results."""
    results = SuiteResults.from_runner(
        finished_runner, suite_version="hornet-test", selection="d=canvasdraw"
    )
    data = results.to_dict()

    assert data["metadata"]["suite_version"] == "hornet-test"
    assert data["metadata"]["selection"] == "d=canvasdraw"
    assert data["summary"]["index"] == "087.50"
    assert data["summary"]["failed"] == 1

    entries = {entry["id"]: entry for entry in data["benchmarks"]}
    assert entries["addrow"]["status"] == "success"
    assert entries["addrow"]["weight"] == 25.0
    assert entries["addrow"]["mean_ms"] == 10.0
    assert entries["addrow"]["runs"] == [
        {"name": "run", "mean": 10.0, "rme": 1.5, "runs": 5}
    ]
    assert entries["sortrows"]["status"] == "aborted"
    assert "mean_ms" not in entries["sortrows"]


def test_emit_json_and_yaml(finished_runner):
    """Test machine-readable output parses back to the same data."""
    results = SuiteResults.from_runner(finished_runner)

    json_output = StringIO()
    results.emit(json_output, OutputFormat.JSON)
    assert json.loads(json_output.getvalue()) == results.to_dict()

    yaml_output = StringIO()
    results.emit(yaml_output, OutputFormat.YAML)
    assert yaml.safe_load(yaml_output.getvalue()) == results.to_dict()


def test_emit_text(finished_runner):
    """Test the human-readable report."""
    output = StringIO()
    SuiteResults.from_runner(finished_runner, suite_version="hornet-test").emit(output)
    text = output.getvalue()

    assert "hornet-test: Partial index 087.50" in text
    assert "Add Rows to Table" in text
    assert "aborted" in text
    assert "Raw score: 1234.00" in text
    assert text.rstrip().endswith("1 out of 4 benchmark(s) failed.")
