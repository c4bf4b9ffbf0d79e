"""Tests for the Benchmark scenario base class."""

import pytest

from loopbench.benchmarks.base import Benchmark
from loopbench.benchmarks.runner import InvalidConfiguration, WorkUnitFailure
from loopbench.utils.logger import Logger


class MockBenchmark(Benchmark):
    """A small scenario for exercising the base lifecycle."""

    _PARAM_FIELDS = Benchmark._PARAM_FIELDS + ("label",)

    def __init__(self, fail: bool = False) -> None:
        super().__init__(iterations=3, warmup_iterations=0, samples=2)
        self.label = "mock"
        self.fail = fail
        self.events: list[str] = []

    def get_pretty_name(self):
        return "Mock Benchmark"

    def get_description(self):
        return "Mock"

    def get_claim(self):
        return "b is slower than a"

    def setup(self):
        self.events.append("setup")

    def teardown(self):
        self.events.append("teardown")

    def execute_benchmark(self):
        a = self.measure("a", lambda: None)
        if self.fail:
            self.measure("b", lambda: 1 / 0)
        b = self.measure("b", lambda: sum(range(100)))
        self.compare("b_vs_a", a, b)


def test_run_collects_results_and_comparisons():
    """Test that run() returns every measurement and comparison."""
    benchmark = MockBenchmark()
    result = benchmark.run()

    assert result.name == "MockBenchmark"
    assert result.pretty_name == "Mock Benchmark"
    assert result.claim == "b is slower than a"
    assert [r.name for r in result.results] == ["a", "b"]
    assert list(result.comparisons) == ["b_vs_a"]
    assert result.comparisons["b_vs_a"].baseline == "a"
    assert result.parameters == {
        "iterations": 3,
        "warmup_iterations": 0,
        "samples": 2,
        "label": "mock",
    }
    assert result.duration >= 0
    assert benchmark.events == ["setup", "teardown"]


def test_repeated_runs_do_not_accumulate():
    """Test that each run starts with an empty result list."""
    benchmark = MockBenchmark()
    benchmark.run()
    second = benchmark.run()

    assert len(second.results) == 2


def test_teardown_runs_on_failure():
    """Test that teardown still runs when a measurement fails."""
    benchmark = MockBenchmark(fail=True)

    with pytest.raises(WorkUnitFailure) as exc_info:
        benchmark.run()

    assert isinstance(exc_info.value.original, ZeroDivisionError)
    assert benchmark.events == ["setup", "teardown"]


def test_invalid_runner_settings_propagate():
    """Test that out-of-range settings surface from the first measurement."""
    benchmark = MockBenchmark()
    benchmark.samples = 0

    with pytest.raises(InvalidConfiguration):
        benchmark.run()


def test_set_parameters_coerces_types():
    """Test that string overrides are converted to the current value type."""
    benchmark = MockBenchmark()
    benchmark.set_parameters({"iterations": "500", "label": "renamed", "other": 1})

    assert benchmark.iterations == 500
    assert benchmark.label == "renamed"
    assert not hasattr(benchmark, "other")


def test_get_parameters_requires_fields():
    """Test that a missing parameter attribute is reported."""
    benchmark = MockBenchmark()
    del benchmark.label

    with pytest.raises(AttributeError, match="label"):
        benchmark.get_parameters()


def test_runner_uses_scenario_settings():
    """Test that runner() copies iterations, warm-up, and samples."""
    benchmark = MockBenchmark()
    runner = benchmark.runner("named")

    assert runner.name == "named"
    assert runner.config.iterations == 3
    assert runner.config.warmup_iterations == 0
    assert runner.config.samples == 2


def test_scenario_logs_comparisons(log_output):
    """Test that comparisons are logged under the scenario's logger."""
    MockBenchmark().run()

    content = log_output.getvalue()
    assert "[loopbench.benchmark.MockBenchmark]" in content
    assert "b is " in content


def test_scenario_runs_without_logging_configured(log_output):
    """Test that a scenario can be run directly without Logger.configure()."""
    Logger._configured = False

    result = MockBenchmark().run()

    assert "b_vs_a" in result.comparisons
    assert log_output.getvalue() == ""
