"""Arithmetic on small ints vs multi-digit ints."""

from loopbench.benchmarks.base import Benchmark

# Well past the single-digit range, so every value is a multi-digit int
BIG = 1 << 100


def _double_and_sum(values: list[int]):
    def work() -> int:
        total = 0
        for value in values:
            total += value * 2
        return total

    return work


class IntSizeBenchmark(Benchmark):
    """Double and sum a list of ints of different magnitudes.

    Small ints take the interpreter's compact-int fast paths. Values beyond
    machine-word size use the arbitrary-precision routines, and a list that
    alternates between the two keeps crossing that boundary. ``size`` is the
    list length.
    """

    ALIAS = "ints"

    _PARAM_FIELDS = Benchmark._PARAM_FIELDS + ("size",)

    def __init__(
        self,
        iterations: int = 10_000,
        warmup_iterations: int = 100,
        samples: int = 10,
        size: int = 100,
    ) -> None:
        super().__init__(iterations, warmup_iterations, samples)
        self.size = size

    def get_pretty_name(self) -> str:
        return "Int Size"

    def get_description(self) -> str:
        return "total += value * 2 over small, 2**100-sized, and alternating ints"

    def get_claim(self) -> str:
        return "Multi-digit int arithmetic is slower than small-int arithmetic"

    def validate_configuration(self) -> None:
        if self.size < 1:
            raise ValueError(f"size must be >= 1 (got {self.size})")

    def setup(self) -> None:
        self.small = list(range(self.size))
        self.big = [BIG + i for i in range(self.size)]
        self.mixed = [BIG + i if i % 2 else i for i in range(self.size)]

    def teardown(self) -> None:
        for attr in ("small", "big", "mixed"):
            if hasattr(self, attr):
                delattr(self, attr)

    def execute_benchmark(self) -> None:
        small = self.measure("small ints", _double_and_sum(self.small))
        big = self.measure("2**100 ints", _double_and_sum(self.big))
        mixed = self.measure("alternating", _double_and_sum(self.mixed))

        self.compare("big", small, big)
        self.compare("mixed", small, mixed)
