"""Per-iteration memory growth of a work unit."""

import gc
import tracemalloc

import psutil

from loopbench.benchmarks.runner import InvalidConfiguration, WorkUnit, WorkUnitFailure
from loopbench.models.benchmark_models import MemoryUsage


def measure_memory(
    work_unit: WorkUnit, iterations: int = 1000, name: str = "memory"
) -> MemoryUsage:
    """Run a work unit and report how much memory each call retains.

    Garbage is collected before and after so only surviving allocations
    count. Heap figures come from tracemalloc; RSS comes from psutil and
    includes allocator slack, so it is noisier.

    Args:
        work_unit: Zero-argument callable to measure.
        iterations: Number of calls.
        name: Label used in error messages.

    Returns:
        MemoryUsage with bytes per iteration.

    Raises:
        InvalidConfiguration: If iterations < 1.
        WorkUnitFailure: If the work unit raises.
    """
    if iterations < 1:
        raise InvalidConfiguration([f"iterations must be >= 1 (got {iterations})"])

    process = psutil.Process()
    started_tracing = not tracemalloc.is_tracing()
    if started_tracing:
        tracemalloc.start()

    try:
        gc.collect()
        tracemalloc.reset_peak()
        heap_before, _ = tracemalloc.get_traced_memory()
        rss_before = process.memory_info().rss

        try:
            for _ in range(iterations):
                work_unit()
        except Exception as exc:
            raise WorkUnitFailure(name, "memory", exc) from exc

        gc.collect()
        heap_after, heap_peak = tracemalloc.get_traced_memory()
        rss_after = process.memory_info().rss
    finally:
        if started_tracing:
            tracemalloc.stop()

    return MemoryUsage(
        heap_used=(heap_after - heap_before) / iterations,
        peak_heap=(heap_peak - heap_before) / iterations,
        rss=(rss_after - rss_before) / iterations,
        iterations=iterations,
    )
