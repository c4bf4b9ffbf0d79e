"""One attribute-reading call site fed 1, 2, 4, or many classes."""

from typing import Any

from loopbench.benchmarks.base import Benchmark

# Divisible by every class count below, so each class is equally common
POOL_SIZE = 96


def _make_pool(kinds: int) -> list[Any]:
    classes = [type(f"_Shape{i}", (), {}) for i in range(kinds)]
    pool = []
    for i in range(POOL_SIZE):
        obj = classes[i % kinds]()
        obj.x, obj.y, obj.z = i, i + 1, i + 2
        pool.append(obj)
    return pool


def _cycle_sum(pool: list[Any]):
    index = 0

    def work() -> int:
        nonlocal index
        index = (index + 1) % POOL_SIZE
        obj = pool[index]
        return obj.x + obj.y + obj.z

    return work


class CallSiteShapesBenchmark(Benchmark):
    """Read the same three attributes from objects of one or more classes.

    The interpreter specializes an attribute load for the type it last saw;
    a call site that keeps seeing different classes keeps falling back to
    the generic lookup. Every class has identical attributes, so only the
    number of distinct types reaching the call site changes.
    """

    ALIAS = "callsite"

    _PARAM_FIELDS = Benchmark._PARAM_FIELDS + ("many",)

    def __init__(
        self,
        iterations: int = 100_000,
        warmup_iterations: int = 1_000,
        samples: int = 10,
        many: int = 16,
    ) -> None:
        super().__init__(iterations, warmup_iterations, samples)
        self.many = many

    def get_pretty_name(self) -> str:
        return "Call Site Shapes"

    def get_description(self) -> str:
        return (
            "Sum x + y + z at a single call site receiving 1, 2, 4, or "
            "many different classes"
        )

    def get_claim(self) -> str:
        return "Call sites that see one class are fastest; many classes are slowest"

    def validate_configuration(self) -> None:
        if self.many < 1 or POOL_SIZE % self.many:
            raise ValueError(
                f"many must be a divisor of {POOL_SIZE} (got {self.many})"
            )

    def execute_benchmark(self) -> None:
        single = self.measure("1 class", _cycle_sum(_make_pool(1)))
        two = self.measure("2 classes", _cycle_sum(_make_pool(2)))
        four = self.measure("4 classes", _cycle_sum(_make_pool(4)))
        many = self.measure(
            f"{self.many} classes", _cycle_sum(_make_pool(self.many))
        )

        self.compare("two", single, two)
        self.compare("four", single, four)
        self.compare("many", single, many)
