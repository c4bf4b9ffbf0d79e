"""Summing lists of ints, floats, and mixed numbers."""

from loopbench.benchmarks.base import Benchmark


class ListElementKindsBenchmark(Benchmark):
    """Sum a list whose elements are all int, all float, or a mix.

    ``sum()`` has fast paths for exact ints and floats that a mixed list
    falls out of. ``size`` is the list length.
    """

    ALIAS = "lists"

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
        return "List Element Kinds"

    def get_description(self) -> str:
        return "sum() over homogeneous int, homogeneous float, and mixed lists"

    def get_claim(self) -> str:
        return "Mixed int/float lists sum slower than homogeneous ones"

    def validate_configuration(self) -> None:
        if self.size < 1:
            raise ValueError(f"size must be >= 1 (got {self.size})")

    def setup(self) -> None:
        self.ints = list(range(self.size))
        self.floats = [float(i) for i in range(self.size)]
        self.mixed = [i if i % 2 else float(i) for i in range(self.size)]

    def teardown(self) -> None:
        for attr in ("ints", "floats", "mixed"):
            if hasattr(self, attr):
                delattr(self, attr)

    def execute_benchmark(self) -> None:
        ints, floats, mixed = self.ints, self.floats, self.mixed

        int_result = self.measure("int list", lambda: sum(ints))
        float_result = self.measure("float list", lambda: sum(floats))
        mixed_result = self.measure("mixed list", lambda: sum(mixed))

        self.compare("float", int_result, float_result)
        self.compare("mixed", int_result, mixed_result)
