"""Pydantic models for structured output."""

from loopbench.models.benchmark_models import (
    BenchmarkConfiguration,
    BenchmarkResult,
    ComparisonResult,
    MemoryUsage,
    ScenarioConfig,
    ScenarioResult,
    SuiteConfig,
)

__all__ = [
    "BenchmarkConfiguration",
    "BenchmarkResult",
    "ComparisonResult",
    "MemoryUsage",
    "ScenarioConfig",
    "ScenarioResult",
    "SuiteConfig",
]
