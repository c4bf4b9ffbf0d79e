#!/usr/bin/env python3
"""loopbench CLI - Command-line interface for loopbench."""

import click

from loopbench.utils.env import LOG_LEVEL_VAR, QUICK_VAR, get_env
from loopbench.utils.logger import Logger


@click.group()
def loopbench():
    """Micro-benchmark runner: measure, trim, and compare timings."""
    if not Logger.is_configured():
        # Subcommands raise the level with --verbose
        Logger.configure(
            level=get_env(LOG_LEVEL_VAR, default="WARNING"), timestamps=True
        )


@loopbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show descriptions and claims")
def list(verbose):
    """List registered benchmark scenarios."""
    from loopbench.benchmarks.registry import BenchmarkRegistry
    from loopbench.commands.list_cmd import list_benchmarks

    list_benchmarks(BenchmarkRegistry(), verbose=verbose)


@loopbench.command()
@click.option(
    "--benchmark",
    "-b",
    "benchmarks",
    multiple=True,
    help="Scenario class name or alias (repeatable; default: all)",
)
@click.option(
    "--quick",
    is_flag=True,
    envvar=QUICK_VAR,
    help=f"Run with 10x fewer iterations (or set {QUICK_VAR}=1)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    default=None,
    help="YAML or JSON suite config file",
)
@click.option(
    "--set",
    "overrides",
    multiple=True,
    help="Override a parameter for every scenario (KEY=VALUE, repeatable)",
)
@click.option(
    "--output",
    "-o",
    "outputs",
    multiple=True,
    help="Output file(s) - format from suffix (.json/.yaml/.txt). Repeatable.",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["json", "yaml", "text"], case_sensitive=False),
    default=None,
    help="Stdout format (default: text)",
)
@click.option(
    "--stop-on-error",
    is_flag=True,
    help="Stop at the first failing scenario",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
def run(benchmarks, quick, config, overrides, outputs, fmt, stop_on_error, verbose):
    r"""Run benchmark scenarios and print their comparisons.

    \b
    Examples:
      loopbench run                          # Run all scenarios
      loopbench run -b layout -b delete      # Run selected scenarios
      loopbench run --quick                  # Reduced iterations
      loopbench run --set samples=20         # Override parameters
      loopbench run --config suite.yaml      # Use config file
      loopbench run -o results.json          # Save to JSON
    """
    from loopbench.commands.run_cmd import run_benchmarks

    if verbose:
        Logger.set_level("DEBUG")

    run_benchmarks(
        benchmarks=benchmarks,
        quick=quick,
        config=config,
        overrides=overrides,
        outputs=outputs,
        fmt=fmt,
        stop_on_error=stop_on_error,
    )


@loopbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display loopbench version information."""
    from loopbench.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    loopbench()
