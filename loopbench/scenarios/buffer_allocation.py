"""Buffer allocation: zero-filled bytes vs bytearray vs copies."""

from loopbench.benchmarks.base import Benchmark

SMALL_SIZE = 100
LARGE_SIZE = 1024 * 1024


class BufferAllocationBenchmark(Benchmark):
    """Allocate small and large buffers a few different ways.

    Compares ``bytes(n)`` with ``bytearray(n)`` at both sizes, and copying an
    existing buffer with ``bytes(buf)`` against slicing a ``memoryview``
    (which does not copy).
    """

    ALIAS = "buffers"

    def __init__(
        self,
        iterations: int = 1_000,
        warmup_iterations: int = 10,
        samples: int = 10,
    ) -> None:
        super().__init__(iterations, warmup_iterations, samples)

    def get_pretty_name(self) -> str:
        return "Buffer Allocation"

    def get_description(self) -> str:
        return (
            f"bytes vs bytearray at {SMALL_SIZE} B and {LARGE_SIZE // 1024} KiB, "
            "copy vs memoryview slice"
        )

    def setup(self) -> None:
        self.source = bytearray(LARGE_SIZE)

    def teardown(self) -> None:
        if hasattr(self, "source"):
            del self.source

    def execute_benchmark(self) -> None:
        source = self.source
        view = memoryview(source)

        small_bytes = self.measure("bytes(100)", lambda: bytes(SMALL_SIZE))
        small_array = self.measure("bytearray(100)", lambda: bytearray(SMALL_SIZE))
        large_bytes = self.measure("bytes(1 MiB)", lambda: bytes(LARGE_SIZE))
        large_array = self.measure(
            "bytearray(1 MiB)", lambda: bytearray(LARGE_SIZE)
        )
        copy = self.measure("bytes(buffer) copy", lambda: bytes(source))
        sliced = self.measure("memoryview slice", lambda: view[:])

        self.compare("small", small_bytes, small_array)
        self.compare("large", large_bytes, large_array)
        self.compare("copy_vs_view", copy, sliced)
