"""Reading settings from config objects built with one or many layouts."""

from itertools import islice, permutations
from typing import Any

from loopbench.benchmarks.base import Benchmark

KEYS = ("a", "b", "c", "d", "e")
POOL_SIZE = 100


class _Config:
    pass


def _build(items: list[tuple[str, int]]) -> _Config:
    config = _Config()
    for key, value in items:
        setattr(config, key, value)
    return config


def _ad_hoc_key(position: int) -> str:
    # a, b, c, d, e, a1, b1, ...
    rounds, slot = divmod(position, len(KEYS))
    return KEYS[slot] + (str(rounds) if rounds else "")


def _cycle(pool: list[Any]):
    index = 0

    def next_config() -> Any:
        nonlocal index
        index = (index + 1) % len(pool)
        return pool[index]

    return next_config


class ConfigShapesBenchmark(Benchmark):
    """Pass config objects to one reader function.

    "1 layout" builds every config with the same keys in the same order.
    "10 orders" keeps the keys but inserts them in ten different orders.
    "Ad-hoc keys" gives configs between three and seven keys with varying
    names, so the reader has to walk ``vars()`` instead of naming fields.
    """

    ALIAS = "configs"

    def __init__(
        self,
        iterations: int = 100_000,
        warmup_iterations: int = 1_000,
        samples: int = 10,
    ) -> None:
        super().__init__(iterations, warmup_iterations, samples)

    def get_pretty_name(self) -> str:
        return "Config Object Shapes"

    def get_description(self) -> str:
        return (
            "Read five settings from config objects with one layout, ten "
            "insertion orders, or ad-hoc key sets"
        )

    def get_claim(self) -> str:
        return "Configs that always have the same keys in the same order read fastest"

    def setup(self) -> None:
        self.uniform = [
            _build([(key, n + 1) for n, key in enumerate(KEYS)])
            for _ in range(POOL_SIZE)
        ]

        orders = list(islice(permutations(KEYS), 0, None, 12))
        self.reordered = [
            _build([(key, KEYS.index(key) + 1) for key in orders[i % len(orders)]])
            for i in range(POOL_SIZE)
        ]

        self.ad_hoc = []
        for i in range(POOL_SIZE):
            size = 3 + i % 5
            self.ad_hoc.append(_build([(_ad_hoc_key(j), j + 1) for j in range(size)]))

    def teardown(self) -> None:
        for attr in ("uniform", "reordered", "ad_hoc"):
            if hasattr(self, attr):
                delattr(self, attr)

    def execute_benchmark(self) -> None:
        def reader(pool: list[Any]):
            next_config = _cycle(pool)

            def read() -> int:
                config = next_config()
                return config.a + config.b + config.c + config.d + config.e

            return read

        next_ad_hoc = _cycle(self.ad_hoc)

        def read_ad_hoc() -> int:
            return sum(vars(next_ad_hoc()).values())

        uniform = self.measure("1 layout", reader(self.uniform))
        reordered = self.measure("10 orders", reader(self.reordered))
        ad_hoc = self.measure("Ad-hoc keys", read_ad_hoc)

        self.compare("ten_orders", uniform, reordered)
        self.compare("ad_hoc", uniform, ad_hoc)
