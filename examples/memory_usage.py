#!/usr/bin/env python3
"""Demo script showing per-call memory retention with measure_memory."""

from loopbench.benchmarks import measure_memory


def main():
    """Compare a work unit that retains memory with one that does not."""
    print("=" * 60)
    print("Memory Probe Demo")
    print("=" * 60)

    retained = []

    def leaky():
        retained.append(bytearray(1024))

    def tidy():
        return bytearray(1024)

    for label, work_unit in (("leaky", leaky), ("tidy", tidy)):
        usage = measure_memory(work_unit, iterations=1_000, name=label)
        print(f"\n{label}:")
        print(f"  Heap retained: {usage.heap_used:,.1f} B/call")
        print(f"  Peak heap:     {usage.peak_heap:,.1f} B/call")
        print(f"  RSS delta:     {usage.rss:,.1f} B/call")


if __name__ == "__main__":
    main()
