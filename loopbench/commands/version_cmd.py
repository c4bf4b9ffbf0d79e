"""
Version command - displays loopbench version information
"""

import platform

import click

from loopbench.version import LOOPBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display loopbench version information.

    Args:
        verbose: If True, show the full hash, build date, and interpreter
    """
    if verbose:
        click.echo(f"loopbench version {LOOPBENCH_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {LOOPBENCH_VERSION}")
        click.echo(f"  Build Date:       {LOOPBENCH_VERSION.date_string()}")
        click.echo(f"  Package Hash:     {LOOPBENCH_VERSION.hash}")
        click.echo(
            f"  Python:           {platform.python_implementation()} "
            f"{platform.python_version()}"
        )
    else:
        click.echo(f"loopbench {LOOPBENCH_VERSION}")
