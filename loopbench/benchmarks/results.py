"""Suite results collection and emission.

Supports multiple output formats: JSON, YAML, and text.

Usage:
    from loopbench.benchmarks.results import SuiteResults, OutputFormat

    results = SuiteResults()
    results.add_result(scenario_result)
    results.add_error("ListElementKindsBenchmark", "WorkUnitFailure: ...")

    results.emit("results.json", OutputFormat.JSON)
    results.emit(sys.stdout, OutputFormat.TEXT)
"""

import json
import platform
import sys
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from loopbench.benchmarks.runner import BenchmarkRunner
from loopbench.models.benchmark_models import (
    BenchmarkResult,
    ComparisonResult,
    ScenarioResult,
)


def describe_comparison(comparison: ComparisonResult) -> str:
    """Render a comparison as "b is 1.50x slower than a (+50.0%)".

    A candidate with a zero mean has no meaningful multiplier.
    """
    if comparison.ratio == 0:
        return (
            f"{comparison.candidate} finished too fast to time "
            f"(baseline {comparison.baseline})"
        )
    return (
        f"{comparison.candidate} is {comparison.summary} than "
        f"{comparison.baseline} ({comparison.percent_difference:+.1f}%)"
    )


class OutputFormat(Enum):
    """Supported output formats for suite results."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Human-readable text for stdout

    @classmethod
    def from_path(cls, path: str | Path) -> "OutputFormat":
        """Pick a format from a file extension, falling back to JSON."""
        suffix = Path(path).suffix.lower()
        if suffix in (".yaml", ".yml"):
            return cls.YAML
        if suffix == ".txt":
            return cls.TEXT
        return cls.JSON


class SuiteResults:
    """Collection of scenario results with run metadata.

    Example:
        >>> results = SuiteResults()
        >>> results.add_result(AttributeLayoutBenchmark().run())
        >>> results.emit("results.json", OutputFormat.JSON)
    """

    def __init__(self) -> None:
        """Initialize an empty collection and capture run metadata."""
        self._results: dict[str, ScenarioResult] = {}
        self._errors: dict[str, str] = {}
        self._metadata: dict[str, Any] = {
            "timestamp_start": datetime.now(UTC).isoformat(),
            "timestamp_end": None,
            "loopbench_version": self._get_version(),
            "python_version": platform.python_version(),
            "python_implementation": platform.python_implementation(),
            "platform": sys.platform,
            "machine": platform.machine(),
        }

    def _get_version(self) -> str:
        """Get loopbench version string."""
        from loopbench import __version__

        return str(__version__)

    def add_result(self, result: ScenarioResult) -> None:
        """Add a scenario result, keyed by scenario name."""
        self._results[result.name] = result

    def add_error(self, name: str, error: str) -> None:
        """Record a failed scenario."""
        self._errors[name] = error

    def finalize(self) -> None:
        """Mark results as complete, setting end timestamp."""
        self._metadata["timestamp_end"] = datetime.now(UTC).isoformat()

    @property
    def results(self) -> dict[str, ScenarioResult]:
        """Get scenario results keyed by name."""
        return self._results.copy()

    @property
    def errors(self) -> dict[str, str]:
        """Get error messages keyed by scenario name."""
        return self._errors.copy()

    @property
    def metadata(self) -> dict[str, Any]:
        """Get run metadata."""
        return self._metadata.copy()

    def to_dict(self) -> dict[str, Any]:
        """Convert results to a dictionary for serialization."""
        return {
            "metadata": self._metadata,
            "results": {
                name: result.model_dump() for name, result in self._results.items()
            },
            "errors": self._errors if self._errors else None,
            "summary": self._generate_summary(),
        }

    def _generate_summary(self) -> dict[str, Any]:
        total = len(self._results) + len(self._errors)
        passed = len(self._results)
        failed = len(self._errors)

        return {
            "total_benchmarks": total,
            "passed": passed,
            "failed": failed,
            "success_rate": passed / total if total > 0 else 0.0,
        }

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Emit results to a file path or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        self.finalize()

        if format == OutputFormat.JSON:
            content = json.dumps(self.to_dict(), indent=indent, default=str)
        elif format == OutputFormat.YAML:
            content = yaml.safe_dump(
                self.to_dict(), indent=indent, default_flow_style=False
            )
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        self._write_output(output, content)

    def _to_text(self) -> str:
        """Convert results to human-readable text."""
        output = StringIO()
        data = self.to_dict()

        output.write("\n" + "=" * 60 + "\n")
        output.write("  LOOPBENCH RESULTS\n")
        output.write("=" * 60 + "\n\n")

        meta = data["metadata"]
        output.write(f"Started:  {meta['timestamp_start']}\n")
        output.write(f"Finished: {meta['timestamp_end']}\n")
        output.write(
            f"Python:   {meta['python_implementation']} {meta['python_version']} "
            f"({meta['platform']}/{meta['machine']})\n"
        )
        output.write(f"Version:  {meta['loopbench_version']}\n\n")

        summary = data["summary"]
        output.write("-" * 40 + "\n")
        output.write(f"Benchmarks:   {summary['total_benchmarks']}\n")
        output.write(f"Passed:       {summary['passed']}\n")
        output.write(f"Failed:       {summary['failed']}\n")
        output.write(f"Success Rate: {summary['success_rate']:.1%}\n")
        output.write("-" * 40 + "\n\n")

        for result in self._results.values():
            self._format_scenario_text(output, result)

        if self._errors:
            output.write("ERRORS\n")
            output.write("-" * 40 + "\n")
            for name, error in self._errors.items():
                output.write(f"  {name}: {error}\n")
            output.write("\n")

        output.write("=" * 60 + "\n")
        return output.getvalue()

    def _format_scenario_text(self, output: StringIO, result: ScenarioResult) -> None:
        output.write(f"{result.pretty_name}\n")
        output.write("-" * 40 + "\n")
        if result.claim:
            output.write(f"Claim: {result.claim}\n")
        for measurement in result.results:
            output.write(f"{measurement.name}:")
            output.write(BenchmarkRunner.format_results(measurement))
            output.write("\n")
        if result.comparisons:
            output.write("Comparisons:\n")
            for key, comparison in result.comparisons.items():
                output.write(f"  {key}: {describe_comparison(comparison)}\n")
        output.write(f"Duration: {result.duration:.2f}s\n\n")

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        if isinstance(output, str | Path):
            Path(output).write_text(content)
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()

    def get_measurement(self, scenario: str, name: str) -> BenchmarkResult:
        """Look up one measurement by scenario and measurement name.

        Raises:
            KeyError: If either is missing.
        """
        for measurement in self._results[scenario].results:
            if measurement.name == name:
                return measurement
        raise KeyError(f"{scenario} has no measurement named '{name}'")

    def __len__(self) -> int:
        """Return number of successful scenarios."""
        return len(self._results)

    def __contains__(self, name: str) -> bool:
        """Check if a scenario has results."""
        return name in self._results
