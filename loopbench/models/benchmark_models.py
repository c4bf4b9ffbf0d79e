"""Models for benchmark configuration, results, and comparisons."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ITERATIONS = 1_000_000
DEFAULT_WARMUP_ITERATIONS = 10_000
DEFAULT_SAMPLES = 10
DEFAULT_TRIM_FRACTION = 0.10
DEFAULT_PRECISION = 2


class BenchmarkConfiguration(BaseModel):
    """Immutable inputs to a single benchmark run.

    Ranges are checked by ``BenchmarkRunner.validate_configuration()`` rather
    than at construction, so an out-of-range value surfaces as
    ``InvalidConfiguration`` when the run is attempted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field("benchmark", description="Display label for the run")
    iterations: int = Field(
        DEFAULT_ITERATIONS, description="Work unit executions per sample"
    )
    warmup_iterations: int = Field(
        DEFAULT_WARMUP_ITERATIONS,
        description="Untimed work unit executions before sampling",
    )
    samples: int = Field(DEFAULT_SAMPLES, description="Timed samples to collect")
    trim_fraction: float = Field(
        DEFAULT_TRIM_FRACTION,
        description="Fraction of samples dropped from each end before summarizing",
    )
    precision: int = Field(
        DEFAULT_PRECISION, description="Decimal places used in reports"
    )


class BenchmarkResult(BaseModel):
    """Summary statistics of a completed run, in milliseconds per sample."""

    model_config = ConfigDict(frozen=True)

    name: str
    mean: float
    median: float
    min: float
    max: float
    iterations: int
    samples: int
    times: list[float] = Field(
        default_factory=list, description="All sample durations, sorted ascending"
    )
    trimmed: int = Field(0, description="Samples dropped from each end")
    precision: int = Field(
        DEFAULT_PRECISION, description="Decimal places used when reporting"
    )


class ComparisonResult(BaseModel):
    """Relative performance of a candidate result against a baseline."""

    model_config = ConfigDict(frozen=True)

    baseline: str
    candidate: str
    ratio: float = Field(..., description="candidate.mean / baseline.mean")
    percent_difference: float
    label: str = Field(..., description="'faster' or 'slower'")
    summary: str


class MemoryUsage(BaseModel):
    """Per-iteration memory growth observed while running a work unit."""

    heap_used: float = Field(..., description="Traced Python heap bytes")
    peak_heap: float = Field(..., description="Traced peak heap bytes")
    rss: float = Field(..., description="Resident set size bytes")
    iterations: int


class ScenarioResult(BaseModel):
    """Everything a scenario measured in one run."""

    name: str
    pretty_name: str
    claim: str = ""
    parameters: dict[str, Any] = Field(default_factory=dict)
    results: list[BenchmarkResult] = Field(default_factory=list)
    comparisons: dict[str, ComparisonResult] = Field(default_factory=dict)
    duration: float = Field(0.0, description="Wall-clock seconds for the scenario")


class ScenarioConfig(BaseModel):
    """Configuration for a single scenario in a suite config file."""

    name: str = Field(..., description="Scenario class name or alias")
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="Scenario-specific parameters"
    )
    description: str | None = Field(
        None, description="Optional description of this run"
    )


class SuiteConfig(BaseModel):
    """Root configuration for a suite config file."""

    defaults: dict[str, Any] = Field(
        default_factory=dict, description="Parameters applied to every scenario"
    )
    benchmarks: list[ScenarioConfig] = Field(
        default_factory=list, description="Scenarios to run, in order"
    )
