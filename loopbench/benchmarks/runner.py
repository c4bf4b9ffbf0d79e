"""Measurement and comparison harness for zero-argument work units.

Usage:
    from loopbench.benchmarks.runner import BenchmarkRunner

    runner = BenchmarkRunner(name="dict lookup", iterations=100_000, samples=10)
    result = runner.run(lambda: table["key"])
    print(BenchmarkRunner.format_results(result))

    comparison = BenchmarkRunner.compare(baseline_result, result)
    print(comparison.summary)  # e.g. "1.42x slower"
"""

import math
import statistics
import time
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from loopbench.models.benchmark_models import (
    BenchmarkConfiguration,
    BenchmarkResult,
    ComparisonResult,
)
from loopbench.utils.logger import Logger

WorkUnit = Callable[[], Any]
Clock = Callable[[], int]

NS_PER_MS = 1_000_000


class BenchmarkError(Exception):
    """Base exception for benchmark harness errors."""

    pass


class InvalidConfiguration(BenchmarkError):
    """Raised when a run is attempted with out-of-range settings."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__(f"Invalid benchmark configuration: {'; '.join(problems)}")


class InvalidComparison(BenchmarkError):
    """Raised when comparing against a baseline with a non-positive mean."""

    def __init__(self, baseline: BenchmarkResult) -> None:
        self.baseline = baseline
        super().__init__(
            f"Cannot compare against baseline '{baseline.name}' "
            f"with mean {baseline.mean!r}ms (must be > 0)"
        )


class WorkUnitFailure(BenchmarkError):
    """Raised when the work unit or setup callable raises during a run.

    The exception raised by the caller's code is available unmodified as
    ``original`` and as ``__cause__``.
    """

    def __init__(
        self,
        name: str,
        phase: str,
        original: BaseException,
        sample: int | None = None,
    ) -> None:
        self.name = name
        self.phase = phase
        self.original = original
        self.sample = sample
        where = phase if sample is None else f"{phase} {sample}"
        super().__init__(
            f"Benchmark '{name}' failed during {where}: "
            f"{type(original).__name__}: {original}"
        )


class BenchmarkRunner:
    """Run a work unit repeatedly and summarize trimmed timing samples.

    The runner holds no state between ``run`` calls; any variation the work
    unit needs across calls belongs in a closure owned by the caller.

    Example:
        >>> runner = BenchmarkRunner(name="sum", iterations=1000, samples=5)
        >>> result = runner.run(lambda: sum(range(100)))
        >>> result.min <= result.median <= result.max
        True
    """

    def __init__(
        self,
        config: BenchmarkConfiguration | None = None,
        *,
        clock: Clock = time.perf_counter_ns,
        **overrides: Any,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Run configuration. Defaults to ``BenchmarkConfiguration()``.
            clock: Monotonic clock returning integer nanoseconds.
            **overrides: Configuration fields that replace those in ``config``
                (e.g. ``name="lookup", samples=20``).

        Raises:
            InvalidConfiguration: If an override is not a configuration field
                or cannot be converted to the field's type.
        """
        fields = config.model_dump() if config is not None else {}
        try:
            self.config = BenchmarkConfiguration.model_validate(
                {**fields, **overrides}
            )
        except ValidationError as e:
            raise InvalidConfiguration(
                [
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in e.errors()
                ]
            ) from e
        self._clock = clock

    @property
    def name(self) -> str:
        """Display label of the configured run."""
        return self.config.name

    def validate_configuration(self) -> None:
        """Check configuration ranges.

        Raises:
            InvalidConfiguration: If any setting is out of range.
        """
        cfg = self.config
        problems = []
        if cfg.iterations < 1:
            problems.append(f"iterations must be >= 1 (got {cfg.iterations})")
        if cfg.samples < 1:
            problems.append(f"samples must be >= 1 (got {cfg.samples})")
        if cfg.warmup_iterations < 0:
            problems.append(
                f"warmup_iterations must be >= 0 (got {cfg.warmup_iterations})"
            )
        if not 0.0 <= cfg.trim_fraction < 0.5:
            problems.append(
                f"trim_fraction must be in [0, 0.5) (got {cfg.trim_fraction})"
            )
        if cfg.precision < 0:
            problems.append(f"precision must be >= 0 (got {cfg.precision})")
        if problems:
            raise InvalidConfiguration(problems)

    def trim_count(self) -> int:
        """Number of samples dropped from each end of the sorted sample list.

        Always leaves at least one sample.
        """
        samples = self.config.samples
        return min(
            math.floor(samples * self.config.trim_fraction), (samples - 1) // 2
        )

    def run(
        self, work_unit: WorkUnit, setup: WorkUnit | None = None
    ) -> BenchmarkResult:
        """Warm up, sample, trim, and summarize.

        Args:
            work_unit: Zero-argument callable; its return value is ignored.
            setup: Optional zero-argument callable invoked once before warm-up
                and once before every sample, outside the timed region.

        Returns:
            BenchmarkResult with statistics in milliseconds per sample.

        Raises:
            InvalidConfiguration: Before any timing, if settings are invalid.
            WorkUnitFailure: If ``work_unit`` or ``setup`` raises.
        """
        self.validate_configuration()
        cfg = self.config

        if setup is not None:
            self._call_setup(setup, phase="setup")

        self._debug(f"Warming up ({cfg.warmup_iterations:,} iterations)")
        try:
            for _ in range(cfg.warmup_iterations):
                work_unit()
        except Exception as exc:
            raise WorkUnitFailure(cfg.name, "warmup", exc) from exc

        self._debug(f"Sampling ({cfg.samples} x {cfg.iterations:,} iterations)")
        times: list[float] = []
        for sample in range(cfg.samples):
            if setup is not None:
                self._call_setup(setup, phase="setup", sample=sample)

            start = self._clock()
            try:
                for _ in range(cfg.iterations):
                    work_unit()
            except Exception as exc:
                raise WorkUnitFailure(cfg.name, "sample", exc, sample) from exc
            end = self._clock()

            times.append((end - start) / NS_PER_MS)

        times.sort()
        trim = self.trim_count()
        trimmed = times[trim : len(times) - trim]
        result = self._summarize(trimmed, times, trim)
        self._debug(f"Done: mean {result.mean:.{cfg.precision}f}ms")
        return result

    def _call_setup(
        self, setup: WorkUnit, phase: str, sample: int | None = None
    ) -> None:
        try:
            setup()
        except Exception as exc:
            raise WorkUnitFailure(self.config.name, phase, exc, sample) from exc

    def _summarize(
        self, trimmed: list[float], times: list[float], trim: int
    ) -> BenchmarkResult:
        lo, hi = trimmed[0], trimmed[-1]
        # fmean can land one ulp outside [lo, hi] for near-identical samples
        mean = min(max(statistics.fmean(trimmed), lo), hi)
        return BenchmarkResult(
            name=self.config.name,
            mean=mean,
            median=statistics.median(trimmed),
            min=lo,
            max=hi,
            iterations=self.config.iterations,
            samples=self.config.samples,
            times=times,
            trimmed=trim,
            precision=self.config.precision,
        )

    def _debug(self, message: str) -> None:
        Logger.debug("benchmark.runner", f"[{self.config.name}] {message}")

    # -------------------------------------------------------------------------
    # Comparison & Formatting
    # -------------------------------------------------------------------------

    @staticmethod
    def compare(
        baseline: BenchmarkResult,
        candidate: BenchmarkResult,
        precision: int | None = None,
    ) -> ComparisonResult:
        """Compare a candidate result against a baseline.

        The printed multiplier is always >= 1 and points in the direction of
        the change. Equal means count as "faster".

        Args:
            baseline: Reference result; its mean must be > 0.
            candidate: Result being judged.
            precision: Decimal places in the summary multiplier. Defaults to
                the precision the baseline was configured with.

        Returns:
            ComparisonResult.

        Raises:
            InvalidComparison: If ``baseline.mean <= 0``.
        """
        if baseline.mean <= 0:
            raise InvalidComparison(baseline)
        if precision is None:
            precision = baseline.precision

        ratio = candidate.mean / baseline.mean
        percent = (candidate.mean - baseline.mean) / baseline.mean * 100

        if ratio > 1:
            label = "slower"
            multiplier = ratio
        else:
            label = "faster"
            multiplier = 1 / ratio if ratio > 0 else math.inf

        return ComparisonResult(
            baseline=baseline.name,
            candidate=candidate.name,
            ratio=ratio,
            percent_difference=percent,
            label=label,
            summary=f"{multiplier:.{precision}f}x {label}",
        )

    @staticmethod
    def format_results(result: BenchmarkResult, precision: int | None = None) -> str:
        """Render a result as an indented, fixed-layout report.

        ``precision`` defaults to the one the result was measured with.
        """
        if precision is None:
            precision = result.precision
        return (
            f"\n  Mean: {result.mean:.{precision}f}ms"
            f"\n  Median: {result.median:.{precision}f}ms"
            f"\n  Min: {result.min:.{precision}f}ms"
            f"\n  Max: {result.max:.{precision}f}ms"
            f"\n  Iterations: {result.iterations:,}"
            f"\n  Samples: {result.samples}"
        )
