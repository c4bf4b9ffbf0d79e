"""Tests for BenchmarkRunner.run()."""

import random
import time
from unittest.mock import MagicMock

import pytest

from loopbench.benchmarks.runner import (
    BenchmarkRunner,
    InvalidConfiguration,
    WorkUnitFailure,
)
from loopbench.models.benchmark_models import BenchmarkConfiguration


def noop():
    pass


def test_trimmed_statistics_from_fixed_samples(fake_clock):
    """Test that the top and bottom 10% are dropped before summarizing."""
    durations = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    shuffled = durations[:]
    random.Random(7).shuffle(shuffled)

    runner = BenchmarkRunner(
        name="fixed",
        iterations=3,
        warmup_iterations=0,
        samples=10,
        clock=fake_clock(shuffled),
    )
    result = runner.run(noop)

    assert result.min == pytest.approx(20)
    assert result.max == pytest.approx(90)
    assert result.mean == pytest.approx(55)
    assert result.median == pytest.approx(55)
    assert result.trimmed == 1
    assert result.times == pytest.approx(durations)


def test_median_odd_count(fake_clock):
    """Test that an odd trimmed set uses the middle element."""
    runner = BenchmarkRunner(
        iterations=1,
        warmup_iterations=0,
        samples=5,
        clock=fake_clock([5, 1, 4, 2, 3]),
    )
    result = runner.run(noop)

    # floor(5 * 0.1) == 0, nothing trimmed
    assert result.trimmed == 0
    assert result.median == pytest.approx(3)
    assert result.mean == pytest.approx(3)
    assert (result.min, result.max) == (pytest.approx(1), pytest.approx(5))


@pytest.mark.parametrize(
    ("samples", "trim_fraction", "expected_trim"),
    [
        (1, 0.1, 0),
        (2, 0.1, 0),
        (9, 0.1, 0),
        (10, 0.1, 1),
        (25, 0.1, 2),
        (5, 0.4, 2),
        (10, 0.45, 4),
        (2, 0.45, 0),
        (10, 0.0, 0),
    ],
)
def test_trim_count_leaves_at_least_one_sample(
    samples, trim_fraction, expected_trim
):
    """Test trim count, including the cap that keeps one sample."""
    runner = BenchmarkRunner(samples=samples, trim_fraction=trim_fraction)
    assert runner.trim_count() == expected_trim
    assert samples - 2 * runner.trim_count() >= 1


def test_single_sample_run(fake_clock):
    """Test that one sample yields identical statistics."""
    runner = BenchmarkRunner(
        iterations=2, warmup_iterations=0, samples=1, clock=fake_clock([7.5])
    )
    result = runner.run(noop)

    assert result.mean == result.median == result.min == result.max
    assert result.mean == pytest.approx(7.5)


@pytest.mark.parametrize(
    ("iterations", "warmup", "samples"),
    [(1, 0, 1), (3, 2, 4), (50, 5, 10), (7, 0, 21)],
)
def test_result_invariants_and_echo(iterations, warmup, samples):
    """Test ordering invariants and that iterations/samples are echoed."""
    runner = BenchmarkRunner(
        name="sum",
        iterations=iterations,
        warmup_iterations=warmup,
        samples=samples,
    )
    result = runner.run(lambda: sum(range(50)))

    assert result.min <= result.median <= result.max
    assert result.min <= result.mean <= result.max
    assert result.iterations == iterations
    assert result.samples == samples
    assert result.name == "sum"
    assert len(result.times) == samples
    assert result.times == sorted(result.times)
    assert result.min >= 0


def test_identical_samples_keep_mean_in_range(fake_clock):
    """Test that equal samples do not push the mean outside [min, max]."""
    runner = BenchmarkRunner(
        iterations=1,
        warmup_iterations=0,
        samples=7,
        clock=fake_clock([0.1] * 7),
    )
    result = runner.run(noop)

    assert result.min <= result.mean <= result.max


def test_work_unit_call_counts():
    """Test warm-up and sampling call the work unit the configured number of times."""
    work_unit = MagicMock()
    runner = BenchmarkRunner(iterations=4, warmup_iterations=6, samples=3)
    runner.run(work_unit)

    assert work_unit.call_count == 6 + 4 * 3


def test_setup_runs_before_warmup_and_each_sample():
    """Test setup ordering relative to warm-up and samples."""
    events = []

    runner = BenchmarkRunner(iterations=2, warmup_iterations=1, samples=3)
    runner.run(lambda: events.append("work"), setup=lambda: events.append("setup"))

    assert events == [
        "setup",
        "work",
        "setup",
        "work",
        "work",
        "setup",
        "work",
        "work",
        "setup",
        "work",
        "work",
    ]


def test_setup_is_not_timed(fake_clock):
    """Test that the clock brackets only the work unit loop."""
    calls = []
    clock = fake_clock([1, 2])

    def tracking_clock():
        calls.append("clock")
        return clock()

    runner = BenchmarkRunner(
        iterations=1, warmup_iterations=0, samples=2, clock=tracking_clock
    )
    runner.run(lambda: calls.append("work"), setup=lambda: calls.append("setup"))

    assert calls == [
        "setup",
        "setup",
        "clock",
        "work",
        "clock",
        "setup",
        "clock",
        "work",
        "clock",
    ]


@pytest.mark.parametrize(
    "overrides",
    [
        {"iterations": 0},
        {"samples": 0},
        {"warmup_iterations": -1},
        {"trim_fraction": 0.5},
        {"precision": -1},
    ],
)
def test_invalid_configuration_never_starts_timing(overrides):
    """Test that invalid settings fail before the clock or work unit is touched."""
    clock = MagicMock(return_value=0)
    work_unit = MagicMock()
    setup = MagicMock()

    runner = BenchmarkRunner(clock=clock, **overrides)
    with pytest.raises(InvalidConfiguration) as exc_info:
        runner.run(work_unit, setup)

    clock.assert_not_called()
    work_unit.assert_not_called()
    setup.assert_not_called()
    field = next(iter(overrides))
    assert field in str(exc_info.value)


def test_invalid_configuration_lists_every_problem():
    """Test that all out-of-range settings are reported together."""
    runner = BenchmarkRunner(iterations=0, samples=0, warmup_iterations=-1)
    with pytest.raises(InvalidConfiguration) as exc_info:
        runner.validate_configuration()

    assert len(exc_info.value.problems) == 3


def test_work_unit_failure_aborts_run():
    """Test that a work unit raising on its 5th call fails the run."""
    calls = 0

    def flaky():
        nonlocal calls
        calls += 1
        if calls == 5:
            raise RuntimeError("boom")

    runner = BenchmarkRunner(
        name="flaky", iterations=10, warmup_iterations=0, samples=3
    )
    with pytest.raises(WorkUnitFailure) as exc_info:
        runner.run(flaky)

    failure = exc_info.value
    assert isinstance(failure.original, RuntimeError)
    assert failure.__cause__ is failure.original
    assert str(failure.original) == "boom"
    assert failure.phase == "sample"
    assert failure.sample == 0
    assert "flaky" in str(failure)
    assert calls == 5


def test_warmup_failure_is_reported_as_warmup():
    """Test that failures during warm-up name the warm-up phase."""

    def broken():
        raise KeyError("missing")

    runner = BenchmarkRunner(iterations=1, warmup_iterations=3, samples=1)
    with pytest.raises(WorkUnitFailure) as exc_info:
        runner.run(broken)

    assert exc_info.value.phase == "warmup"
    assert exc_info.value.sample is None
    assert isinstance(exc_info.value.original, KeyError)


def test_setup_failure_is_reported():
    """Test that a raising setup callable aborts the run."""
    setup = MagicMock(side_effect=[None, ValueError("reset failed")])
    work_unit = MagicMock()

    runner = BenchmarkRunner(iterations=1, warmup_iterations=0, samples=2)
    with pytest.raises(WorkUnitFailure) as exc_info:
        runner.run(work_unit, setup)

    assert exc_info.value.phase == "setup"
    assert exc_info.value.sample == 0
    work_unit.assert_not_called()


def test_runs_are_independent(fake_clock):
    """Test that the runner keeps no state between runs."""
    config = BenchmarkConfiguration(iterations=1, warmup_iterations=0, samples=3)
    first = BenchmarkRunner(config, clock=fake_clock([1, 2, 3])).run(noop)
    second = BenchmarkRunner(config, clock=fake_clock([1, 2, 3])).run(noop)

    assert first == second


def test_overrides_replace_config_fields():
    """Test that keyword overrides win over the passed configuration."""
    config = BenchmarkConfiguration(name="base", samples=4)
    runner = BenchmarkRunner(config, samples=8)

    assert runner.config.samples == 8
    assert runner.name == "base"
    assert config.samples == 4


def test_defaults():
    """Test default configuration values."""
    runner = BenchmarkRunner()

    assert runner.config.iterations == 1_000_000
    assert runner.config.warmup_iterations == 10_000
    assert runner.config.samples == 10


def test_measures_real_elapsed_time():
    """Test that ~10us per call over 100 calls lands near 1ms per sample."""

    def busy_wait():
        deadline = time.perf_counter() + 10e-6
        while time.perf_counter() < deadline:
            pass

    runner = BenchmarkRunner(
        name="busy", iterations=100, warmup_iterations=0, samples=5
    )
    result = runner.run(busy_wait)

    assert 0.5 <= result.mean <= 5.0


def test_debug_logging_when_configured(log_output):
    """Test that the runner logs its phases once the logger is configured."""
    BenchmarkRunner(name="logged", iterations=1, warmup_iterations=0, samples=1).run(
        noop
    )

    content = log_output.getvalue()
    assert "[loopbench.benchmark.runner]" in content
    assert "[logged] Sampling" in content


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"sample": 3}, "sample"),
        ({"iterations": "many"}, "iterations"),
    ],
)
def test_bad_overrides_raise_invalid_configuration(overrides, field):
    """Test that unknown or unconvertible overrides are rejected up front."""
    with pytest.raises(InvalidConfiguration) as exc_info:
        BenchmarkRunner(BenchmarkConfiguration(), **overrides)

    assert field in str(exc_info.value)


def test_string_overrides_are_validated_before_running():
    """Test that a numeric string override is converted, then range-checked."""
    runner = BenchmarkRunner(BenchmarkConfiguration(), iterations="0")

    assert runner.config.iterations == 0
    with pytest.raises(InvalidConfiguration, match="iterations must be >= 1"):
        runner.run(noop)
