"""Suite runner for executing benchmark scenarios one after another.

Usage:
    from loopbench.benchmarks.registry import BenchmarkRegistry
    from loopbench.benchmarks.suite import SuiteRunner

    registry = BenchmarkRegistry()
    suite = SuiteRunner()
    suite.add_all(registry.get_all_benchmarks())
    results = suite.run(quick=True)
    results.emit("results.json")
"""

from collections.abc import Callable
from typing import Any

from loopbench.benchmarks.base import Benchmark
from loopbench.benchmarks.results import SuiteResults
from loopbench.benchmarks.runner import BenchmarkError
from loopbench.models.benchmark_models import ScenarioResult
from loopbench.utils.logger import Logger

# --quick divides iteration counts by this factor
QUICK_FACTOR = 10

ScenarioCallback = Callable[[ScenarioResult], None]


class SuiteRunner:
    """Runs queued scenarios and collects their results.

    A scenario that raises is recorded as an error and the suite moves on,
    unless ``stop_on_error`` is set.

    Example:
        >>> suite = SuiteRunner()
        >>> suite.add(DeleteVsNoneBenchmark, {"samples": 5})
        >>> results = suite.run()
    """

    def __init__(self) -> None:
        """Initialize an empty suite."""
        self._benchmarks: list[type[Benchmark]] = []
        self._configs: dict[str, dict[str, Any]] = {}

    def add(
        self,
        benchmark_cls: type[Benchmark],
        parameters: dict[str, Any] | None = None,
    ) -> None:
        """Queue a scenario class.

        Args:
            benchmark_cls: The Benchmark subclass to run.
            parameters: Optional parameter overrides for this scenario.
        """
        if benchmark_cls not in self._benchmarks:
            self._benchmarks.append(benchmark_cls)
        if parameters:
            self._configs.setdefault(benchmark_cls.__name__, {}).update(parameters)

    def add_all(self, benchmark_classes: list[type[Benchmark]]) -> None:
        """Queue several scenario classes."""
        for benchmark_cls in benchmark_classes:
            self.add(benchmark_cls)

    def clear(self) -> None:
        """Clear all queued scenarios."""
        self._benchmarks.clear()
        self._configs.clear()

    @property
    def benchmark_count(self) -> int:
        """Return number of queued scenarios."""
        return len(self._benchmarks)

    def instantiate(
        self, benchmark_cls: type[Benchmark], quick: bool = False
    ) -> Benchmark:
        """Create a scenario with its overrides applied.

        Quick mode scales the configured iteration counts down after
        overrides are applied, so it also shortens config-file runs.
        """
        benchmark = benchmark_cls()
        config = self._configs.get(benchmark_cls.__name__)
        if config:
            benchmark.set_parameters(config)
        if quick:
            benchmark.iterations = max(1, benchmark.iterations // QUICK_FACTOR)
            benchmark.warmup_iterations = max(
                0, benchmark.warmup_iterations // QUICK_FACTOR
            )
        return benchmark

    def run(
        self,
        quick: bool = False,
        stop_on_error: bool = False,
        on_result: ScenarioCallback | None = None,
    ) -> SuiteResults:
        """Run all queued scenarios in order.

        Args:
            quick: Divide iterations and warm-up by QUICK_FACTOR.
            stop_on_error: Stop at the first failing scenario.
            on_result: Called with each successful ScenarioResult as soon as
                it is available.

        Returns:
            SuiteResults for every scenario that ran.
        """
        results = SuiteResults()

        for benchmark_cls in self._benchmarks:
            name = benchmark_cls.__name__
            try:
                benchmark = self.instantiate(benchmark_cls, quick=quick)
                scenario_result = benchmark.run()
            except (BenchmarkError, ValueError, TypeError) as e:
                Logger.error("suite", f"{name} failed: {e}")
                Logger.debug("suite", f"{name} traceback", exc_info=True)
                results.add_error(name, f"{type(e).__name__}: {e}")
                if stop_on_error:
                    break
                continue

            results.add_result(scenario_result)
            if on_result is not None:
                on_result(scenario_result)

        results.finalize()
        return results
