"""Run command - execute benchmark scenarios and report results.

CLI Examples:
    loopbench run                              # Run every registered scenario
    loopbench run -b layout -b lists           # Run selected scenarios
    loopbench run --quick                      # 10x fewer iterations
    loopbench run --set samples=20             # Override a parameter everywhere
    loopbench run --config suite.yaml          # Use config file
    loopbench run -o results.json -o r.yaml    # Save results (format by suffix)
    loopbench run -f json                      # JSON to stdout instead of text
"""

import json
import sys
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from loopbench.benchmarks import (
    BenchmarkNotFoundError,
    BenchmarkRegistry,
    BenchmarkRunner,
    OutputFormat,
    SuiteRunner,
    describe_comparison,
)
from loopbench.models.benchmark_models import ScenarioResult, SuiteConfig


def load_config(config_path: str) -> SuiteConfig:
    """Load a suite configuration from YAML or JSON.

    Config format:
        defaults:
          samples: 20

        benchmarks:
          - name: layout
            parameters:
              iterations: 50000

          - name: ListElementKindsBenchmark
            parameters:
              size: 1000

    Raises:
        click.ClickException: If the file is missing, unparsable, or invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    try:
        content = path.read_text()
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise click.ClickException(f"Error parsing config {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise click.ClickException(f"Config file {config_path} must be a dictionary")

    try:
        return SuiteConfig.model_validate(data)
    except ValidationError as e:
        raise click.ClickException(f"Invalid benchmark configuration: {e}") from e


def parse_overrides(overrides: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated KEY=VALUE options.

    Raises:
        click.BadParameter: If an override has no '='.
    """
    params: dict[str, str] = {}
    for override in overrides:
        if "=" not in override:
            raise click.BadParameter(
                f"'{override}' is not KEY=VALUE", param_hint="--set"
            )
        key, value = override.split("=", 1)
        params[key.strip()] = value.strip()
    return params


def build_suite(
    registry: BenchmarkRegistry,
    benchmarks: tuple[str, ...],
    config: SuiteConfig | None,
    overrides: dict[str, Any],
) -> SuiteRunner:
    """Queue scenarios from the config file, -b names, or the whole registry.

    Parameter precedence: config defaults < per-scenario parameters < --set.
    """
    suite = SuiteRunner()
    try:
        if config is not None and config.benchmarks:
            for entry in config.benchmarks:
                params = {**config.defaults, **entry.parameters, **overrides}
                suite.add(registry.get_benchmark(entry.name), params)
        else:
            defaults = config.defaults if config is not None else {}
            if benchmarks:
                classes = [registry.get_benchmark(name) for name in benchmarks]
            else:
                classes = registry.get_all_benchmarks()
            for benchmark_cls in classes:
                suite.add(benchmark_cls, {**defaults, **overrides})
    except BenchmarkNotFoundError as e:
        raise click.ClickException(str(e)) from e
    return suite


def echo_scenario(result: ScenarioResult) -> None:
    """Print one scenario's reports and comparisons."""
    click.echo("\n" + "-" * 60)
    click.echo(result.pretty_name)
    click.echo("-" * 60)
    if result.claim:
        click.echo(f"Claim: {result.claim}")

    for measurement in result.results:
        report = BenchmarkRunner.format_results(measurement)
        click.echo(f"\n{measurement.name}:{report}")

    if result.comparisons:
        click.echo("\nRelative performance:")
        for comparison in result.comparisons.values():
            click.echo(f"  {describe_comparison(comparison)}")


def run_benchmarks(
    benchmarks: tuple[str, ...],
    quick: bool,
    config: str | None,
    overrides: tuple[str, ...],
    outputs: tuple[str, ...],
    fmt: str | None,
    stop_on_error: bool,
) -> None:
    """Run scenarios based on CLI arguments."""
    registry = BenchmarkRegistry()
    suite_config = load_config(config) if config else None
    params = parse_overrides(overrides)
    suite = build_suite(registry, benchmarks, suite_config, params)

    if suite.benchmark_count == 0:
        click.echo("No benchmarks to run.")
        return

    stdout_format = OutputFormat(fmt.lower()) if fmt else OutputFormat.TEXT
    stream_text = stdout_format == OutputFormat.TEXT

    if stream_text:
        mode = " (quick)" if quick else ""
        click.echo(f"Running {suite.benchmark_count} benchmark(s){mode}...")

    results = suite.run(
        quick=quick,
        stop_on_error=stop_on_error,
        on_result=echo_scenario if stream_text else None,
    )

    if not stream_text:
        results.emit(sys.stdout, stdout_format)

    for output in outputs:
        results.emit(output, OutputFormat.from_path(output))
        click.echo(f"Results saved to: {output}", err=not stream_text)

    if results.errors:
        click.echo("\nFailed benchmarks:", err=True)
        for name, error in results.errors.items():
            click.echo(f"  {name}: {error}", err=True)
        sys.exit(1)
