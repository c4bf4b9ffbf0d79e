"""Tests for suite results collection and emission."""

import json
from io import StringIO

import pytest
import yaml

from loopbench.benchmarks.results import (
    OutputFormat,
    SuiteResults,
    describe_comparison,
)
from loopbench.benchmarks.runner import BenchmarkRunner
from loopbench.models.benchmark_models import (
    BenchmarkResult,
    ComparisonResult,
    ScenarioResult,
)


def make_scenario(name="LayoutBenchmark"):
    stable = BenchmarkResult(
        name="stable", mean=10.0, median=10.0, min=9.0, max=11.0,
        iterations=1000, samples=5,
    )
    rotating = BenchmarkResult(
        name="rotating", mean=25.0, median=24.0, min=23.0, max=27.0,
        iterations=1000, samples=5,
    )
    return ScenarioResult(
        name=name,
        pretty_name="Layout",
        claim="Rotating order is slower",
        parameters={"iterations": 1000},
        results=[stable, rotating],
        comparisons={
            "rotating": ComparisonResult(
                baseline="stable",
                candidate="rotating",
                ratio=2.5,
                percent_difference=150.0,
                label="slower",
                summary="2.50x slower",
            )
        },
        duration=1.25,
    )


def test_add_result_and_error_summary():
    """Test result bookkeeping and summary counts."""
    results = SuiteResults()
    results.add_result(make_scenario("A"))
    results.add_result(make_scenario("B"))
    results.add_error("C", "WorkUnitFailure: boom")

    summary = results.to_dict()["summary"]
    assert summary["total_benchmarks"] == 3
    assert summary["passed"] == 2
    assert summary["failed"] == 1
    assert summary["success_rate"] == pytest.approx(2 / 3)
    assert len(results) == 2
    assert "C" not in results


def test_metadata():
    """Test that run metadata records the interpreter and version."""
    from loopbench import __version__

    metadata = SuiteResults().metadata

    assert metadata["loopbench_version"] == __version__
    assert metadata["python_version"]
    assert metadata["python_implementation"]
    assert metadata["timestamp_end"] is None


def test_emit_json():
    """Test JSON emission to a stream."""
    results = SuiteResults()
    results.add_result(make_scenario())

    output = StringIO()
    results.emit(output, format=OutputFormat.JSON)

    data = json.loads(output.getvalue())
    scenario = data["results"]["LayoutBenchmark"]
    assert scenario["comparisons"]["rotating"]["summary"] == "2.50x slower"
    assert scenario["results"][0]["mean"] == 10.0
    assert data["errors"] is None
    assert data["metadata"]["timestamp_end"] is not None


def test_emit_yaml_file(tmp_path):
    """Test YAML emission to a file path."""
    results = SuiteResults()
    results.add_result(make_scenario())
    results.add_error("Broken", "InvalidConfiguration: samples must be >= 1")

    path = tmp_path / "results.yaml"
    results.emit(path, format=OutputFormat.YAML)

    data = yaml.safe_load(path.read_text())
    assert data["results"]["LayoutBenchmark"]["results"][1]["name"] == "rotating"
    assert data["errors"]["Broken"].startswith("InvalidConfiguration")


def test_emit_text():
    """Test human-readable text emission."""
    results = SuiteResults()
    results.add_result(make_scenario())
    results.add_error("Broken", "boom")

    output = StringIO()
    results.emit(output, format=OutputFormat.TEXT)
    text = output.getvalue()

    assert "LOOPBENCH RESULTS" in text
    assert "Claim: Rotating order is slower" in text
    assert "Mean: 25.00ms" in text
    assert "rotating is 2.50x slower than stable (+150.0%)" in text
    assert "Broken: boom" in text
    assert "Success Rate: 50.0%" in text


def test_get_measurement():
    """Test looking up one measurement."""
    results = SuiteResults()
    results.add_result(make_scenario())

    assert results.get_measurement("LayoutBenchmark", "stable").mean == 10.0
    with pytest.raises(KeyError):
        results.get_measurement("LayoutBenchmark", "missing")


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("out.json", OutputFormat.JSON),
        ("out.YAML", OutputFormat.YAML),
        ("out.yml", OutputFormat.YAML),
        ("out.txt", OutputFormat.TEXT),
        ("out", OutputFormat.JSON),
    ],
)
def test_output_format_from_path(path, expected):
    """Test format detection from file suffixes."""
    assert OutputFormat.from_path(path) == expected


def test_describe_comparison():
    """Test the comparison sentence, including a candidate with a zero mean."""
    baseline = BenchmarkResult(
        name="copy", mean=2.0, median=2.0, min=2.0, max=2.0,
        iterations=10, samples=1,
    )
    slower = baseline.model_copy(update={"name": "concat", "mean": 3.0})
    instant = baseline.model_copy(update={"name": "view", "mean": 0.0})

    assert describe_comparison(BenchmarkRunner.compare(baseline, slower)) == (
        "concat is 1.50x slower than copy (+50.0%)"
    )
    sentence = describe_comparison(BenchmarkRunner.compare(baseline, instant))
    assert sentence == "view finished too fast to time (baseline copy)"
    assert "inf" not in sentence
