"""Attribute layout: stable insertion order vs varying order vs __slots__."""

from loopbench.benchmarks.base import Benchmark


class _Point:
    pass


class _SlottedPoint:
    __slots__ = ("x", "y", "z")


class AttributeLayoutBenchmark(Benchmark):
    """Build a three-attribute object and read every attribute back.

    Instances whose attributes are always assigned in the same order share
    their key layout; rotating the order defeats that sharing. ``__slots__``
    removes the per-instance dict entirely.
    """

    ALIAS = "layout"

    def __init__(
        self,
        iterations: int = 100_000,
        warmup_iterations: int = 1_000,
        samples: int = 10,
    ) -> None:
        super().__init__(iterations, warmup_iterations, samples)

    def get_pretty_name(self) -> str:
        return "Attribute Layout"

    def get_description(self) -> str:
        return (
            "Create objects with consistent, rotating, or slotted attribute "
            "layouts and sum their attributes"
        )

    def get_claim(self) -> str:
        return "Varying attribute order is slower; __slots__ is fastest"

    def execute_benchmark(self) -> None:
        counter = 0

        # Every variant branches on the counter; only layout and order differ
        def stable() -> int:
            nonlocal counter
            counter += 1
            p = _Point()
            if counter % 3 == 0:
                p.x, p.y, p.z = 1, 2, 3
            elif counter % 3 == 1:
                p.x, p.y, p.z = 1, 2, 3
            else:
                p.x, p.y, p.z = 1, 2, 3
            return p.x + p.y + p.z

        def unstable() -> int:
            nonlocal counter
            counter += 1
            p = _Point()
            if counter % 3 == 0:
                p.x, p.y, p.z = 1, 2, 3
            elif counter % 3 == 1:
                p.y, p.x, p.z = 2, 1, 3
            else:
                p.z, p.y, p.x = 3, 2, 1
            return p.x + p.y + p.z

        def slotted() -> int:
            nonlocal counter
            counter += 1
            p = _SlottedPoint()
            if counter % 3 == 0:
                p.x, p.y, p.z = 1, 2, 3
            elif counter % 3 == 1:
                p.x, p.y, p.z = 1, 2, 3
            else:
                p.x, p.y, p.z = 1, 2, 3
            return p.x + p.y + p.z

        stable_result = self.measure("Stable attribute order", stable)
        unstable_result = self.measure("Rotating attribute order", unstable)
        slotted_result = self.measure("__slots__", slotted)

        self.compare("rotating_order", stable_result, unstable_result)
        self.compare("slots", stable_result, slotted_result)
