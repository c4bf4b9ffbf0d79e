#!/usr/bin/env python3
"""Demo script comparing list and set membership tests with BenchmarkRunner."""

import json

from loopbench.benchmarks import BenchmarkRunner
from loopbench.models import BenchmarkConfiguration

SIZE = 1_000


def main():
    """Measure two lookups, print their reports and the comparison."""
    print("=" * 60)
    print("Membership Lookup Demo")
    print("=" * 60)

    items = list(range(SIZE))
    as_set = set(items)
    target = SIZE - 1

    config = BenchmarkConfiguration(iterations=10_000, warmup_iterations=1_000)
    list_result = BenchmarkRunner(config, name="list lookup").run(
        lambda: target in items
    )
    set_result = BenchmarkRunner(config, name="set lookup").run(
        lambda: target in as_set
    )

    for result in (list_result, set_result):
        print(f"\n{result.name}:{BenchmarkRunner.format_results(result)}")

    comparison = BenchmarkRunner.compare(list_result, set_result)
    print(f"\nset lookup is {comparison.summary} than list lookup")
    print(f"Difference: {comparison.percent_difference:+.1f}%")

    # Structured output
    print("\n" + "=" * 60)
    print("JSON Output:")
    print("=" * 60)
    print(json.dumps(comparison.model_dump(), indent=2))


if __name__ == "__main__":
    main()
