"""List command - show registered benchmark scenarios."""

import textwrap

import click

from loopbench.benchmarks.registry import BenchmarkRegistry


def list_benchmarks(registry: BenchmarkRegistry, verbose: bool = False) -> None:
    """List all registered scenarios with their aliases and claims."""
    click.echo("Available Benchmarks:")
    click.echo("-" * 60)

    benchmarks = registry.list_benchmarks()
    if not benchmarks:
        click.echo("  No benchmarks registered.")
        return

    for bench in benchmarks:
        alias = bench["alias"] or "-"
        click.echo(f"  {bench['name']:<32} {alias}")
        click.echo(f"      {bench['pretty_name']}")
        if verbose:
            click.echo(
                textwrap.fill(
                    str(bench["description"]),
                    width=70,
                    initial_indent="      ",
                    subsequent_indent="      ",
                )
            )
            if bench["claim"]:
                click.echo(f"      Claim: {bench['claim']}")
            click.echo()

    click.echo("-" * 60)
    click.echo(f"Total: {len(benchmarks)} benchmarks registered")
    if not verbose:
        click.echo("Use --verbose for descriptions and claims")
