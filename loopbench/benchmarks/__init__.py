"""Benchmark subsystem for loopbench.

Provides the measurement harness (BenchmarkRunner), scenario base class with
automatic discovery, and suite execution with standardized result formats.
"""

from loopbench.benchmarks.base import Benchmark
from loopbench.benchmarks.memory import measure_memory
from loopbench.benchmarks.registry import (
    BenchmarkNameCollisionError,
    BenchmarkNotFoundError,
    BenchmarkRegistry,
    BenchmarkRegistryError,
)
from loopbench.benchmarks.results import (
    OutputFormat,
    SuiteResults,
    describe_comparison,
)
from loopbench.benchmarks.runner import (
    BenchmarkError,
    BenchmarkRunner,
    InvalidComparison,
    InvalidConfiguration,
    WorkUnitFailure,
)
from loopbench.benchmarks.suite import SuiteRunner

__all__ = [
    "Benchmark",
    "BenchmarkError",
    "BenchmarkNameCollisionError",
    "BenchmarkNotFoundError",
    "BenchmarkRegistry",
    "BenchmarkRegistryError",
    "BenchmarkRunner",
    "InvalidComparison",
    "InvalidConfiguration",
    "OutputFormat",
    "SuiteResults",
    "SuiteRunner",
    "WorkUnitFailure",
    "describe_comparison",
    "measure_memory",
]
