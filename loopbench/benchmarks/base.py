"""Base class for benchmark scenarios.

A scenario groups a few related measurements (a baseline and one or more
candidates) and compares them, e.g. attribute access on ``__slots__``
instances against ordinary instances.
"""

import time
from abc import ABC, abstractmethod
from typing import Any

from loopbench.benchmarks.runner import BenchmarkRunner, WorkUnit
from loopbench.models.benchmark_models import (
    DEFAULT_ITERATIONS,
    DEFAULT_SAMPLES,
    DEFAULT_WARMUP_ITERATIONS,
    BenchmarkResult,
    ComparisonResult,
    ScenarioResult,
)
from loopbench.utils.logger import Logger


class Benchmark(ABC):
    """Abstract base class for benchmark scenarios.

    Configuration Management:
        Child classes extend _PARAM_FIELDS with their own parameter names for
        automatic serialization and configuration management. The base
        fields control every BenchmarkRunner the scenario creates.

    Lifecycle:
        1. validate_configuration() - Check parameters
        2. setup() - Build fixtures shared by all measurements
        3. execute_benchmark() - Measure and compare via measure()/compare()
        4. teardown() - Release fixtures (always called)

    Example:
        >>> class SortBenchmark(Benchmark):
        ...     def get_pretty_name(self) -> str:
        ...         return "Sorting"
        ...
        ...     def get_description(self) -> str:
        ...         return "sorted() on sorted vs shuffled input"
        ...
        ...     def execute_benchmark(self) -> None:
        ...         ordered = self.measure("ordered", lambda: sorted(self.data))
        ...         shuffled = self.measure("shuffled", lambda: sorted(self.mixed))
        ...         self.compare("shuffled", ordered, shuffled)
    """

    # Short name accepted by the registry and CLI (e.g. "slots")
    ALIAS: str = ""

    _PARAM_FIELDS: tuple[str, ...] = ("iterations", "warmup_iterations", "samples")

    def __init__(
        self,
        iterations: int = DEFAULT_ITERATIONS,
        warmup_iterations: int = DEFAULT_WARMUP_ITERATIONS,
        samples: int = DEFAULT_SAMPLES,
    ) -> None:
        """Initialize runner settings shared by every measurement."""
        self.iterations = iterations
        self.warmup_iterations = warmup_iterations
        self.samples = samples
        self._results: list[BenchmarkResult] = []
        self._comparisons: dict[str, ComparisonResult] = {}

    # -------------------------------------------------------------------------
    # Identity & Metadata
    # -------------------------------------------------------------------------

    def get_name(self) -> str:
        """Get the internal scenario name, defaults to class name."""
        return self.__class__.__name__

    @abstractmethod
    def get_pretty_name(self) -> str:
        """Get the human-readable scenario name for display."""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get a one-line description of what the scenario measures."""
        pass

    def get_claim(self) -> str:
        """Get the performance claim this scenario puts to the test.

        Returns:
            Claim text, or an empty string if the scenario only reports.
        """
        return ""

    # -------------------------------------------------------------------------
    # Configuration & Parameters
    # -------------------------------------------------------------------------

    def get_parameters(self) -> dict[str, Any]:
        """Get current parameter values keyed by _PARAM_FIELDS.

        Raises:
            AttributeError: If any field in _PARAM_FIELDS is not set as an
                instance attribute.
        """
        missing = [f for f in self._PARAM_FIELDS if not hasattr(self, f)]
        if missing:
            raise AttributeError(
                f"{self.__class__.__name__} missing required parameter fields: "
                f"{', '.join(missing)}. Ensure all fields in _PARAM_FIELDS are "
                "initialized in __init__()."
            )

        return {field: getattr(self, field) for field in self._PARAM_FIELDS}

    def set_parameters(self, params: dict[str, Any]) -> None:
        """Set parameters from a dictionary (e.g., from a config file).

        Values are coerced to the type of the current value, so strings from
        ``--set iterations=500`` become ints. Unknown keys are ignored.
        """
        for field in self._PARAM_FIELDS:
            if field in params:
                current_val = getattr(self, field, None)
                if current_val is not None and not isinstance(current_val, str):
                    param_type = type(current_val)
                    setattr(self, field, param_type(params[field]))
                else:
                    setattr(self, field, params[field])

    def validate_configuration(self) -> None:
        """Validate parameters before running.

        Runner settings are validated by each BenchmarkRunner; override to
        check scenario-specific parameters.

        Raises:
            ValueError: If configuration is invalid.
        """
        pass

    # -------------------------------------------------------------------------
    # Lifecycle Hooks
    # -------------------------------------------------------------------------

    def setup(self) -> None:
        """Build fixtures shared by all measurements. Default is a no-op."""
        pass

    def teardown(self) -> None:
        """Release fixtures. Called in a finally block; default is a no-op."""
        pass

    @abstractmethod
    def execute_benchmark(self) -> None:
        """Run the scenario's measurements.

        Use measure() for each timed variant and compare() to relate them.
        """
        pass

    def run(self) -> ScenarioResult:
        """Run the complete scenario lifecycle and return its results.

        Returns:
            ScenarioResult with every measurement and comparison.

        Raises:
            InvalidConfiguration: If runner settings are out of range.
            WorkUnitFailure: If a measured callable raises.
        """
        self._results = []
        self._comparisons = {}

        self.validate_configuration()
        started = time.perf_counter()
        self.setup()
        try:
            Logger.info(self.log_name, f"Running {self.get_pretty_name()}...")
            self.execute_benchmark()
            Logger.info(
                self.log_name,
                f"{self.get_pretty_name()} complete "
                f"({len(self._results)} measurements)"
            )
        finally:
            self.teardown()

        return ScenarioResult(
            name=self.get_name(),
            pretty_name=self.get_pretty_name(),
            claim=self.get_claim(),
            parameters=self.get_parameters(),
            results=list(self._results),
            comparisons=dict(self._comparisons),
            duration=time.perf_counter() - started,
        )

    # -------------------------------------------------------------------------
    # Measurement Helpers
    # -------------------------------------------------------------------------

    def runner(self, name: str) -> BenchmarkRunner:
        """Create a BenchmarkRunner using this scenario's settings."""
        return BenchmarkRunner(
            name=name,
            iterations=self.iterations,
            warmup_iterations=self.warmup_iterations,
            samples=self.samples,
        )

    def measure(
        self, name: str, work_unit: WorkUnit, setup: WorkUnit | None = None
    ) -> BenchmarkResult:
        """Time a work unit and record the result."""
        result = self.runner(name).run(work_unit, setup)
        self._results.append(result)
        report = BenchmarkRunner.format_results(result)
        Logger.debug(self.log_name, f"{name}:{report}")
        return result

    def compare(
        self, key: str, baseline: BenchmarkResult, candidate: BenchmarkResult
    ) -> ComparisonResult:
        """Compare two recorded results and store the comparison under key."""
        comparison = BenchmarkRunner.compare(baseline, candidate)
        self._comparisons[key] = comparison
        Logger.info(self.log_name, f"{candidate.name} is {comparison.summary}")
        return comparison

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    @property
    def log_name(self) -> str:
        """Logger name for this scenario, under ``loopbench.benchmark``."""
        return f"benchmark.{self.__class__.__name__}"
