"""Removing a value: ``del`` vs assigning ``None``."""

from loopbench.benchmarks.base import Benchmark


class _Record:
    def __init__(self) -> None:
        self.id = 1
        self.name = "test"
        self.value = 100
        self.status = "active"


class DeleteVsNoneBenchmark(Benchmark):
    """Clear one field of a fresh record, then read two others.

    Measured on instance attributes and on dict keys.
    """

    ALIAS = "delete"

    def __init__(
        self,
        iterations: int = 100_000,
        warmup_iterations: int = 1_000,
        samples: int = 10,
    ) -> None:
        super().__init__(iterations, warmup_iterations, samples)

    def get_pretty_name(self) -> str:
        return "Delete vs None"

    def get_description(self) -> str:
        return "Remove a field with del or overwrite it with None"

    def get_claim(self) -> str:
        return "Assigning None is faster than del"

    def execute_benchmark(self) -> None:
        def set_none() -> int:
            r = _Record()
            r.status = None
            return r.id + r.value

        def delete_attr() -> int:
            r = _Record()
            del r.status
            return r.id + r.value

        def dict_none() -> int:
            d = {"id": 1, "name": "test", "value": 100, "status": "active"}
            d["status"] = None
            return d["id"] + d["value"]

        def dict_delete() -> int:
            d = {"id": 1, "name": "test", "value": 100, "status": "active"}
            del d["status"]
            return d["id"] + d["value"]

        none_result = self.measure("Attribute = None", set_none)
        del_result = self.measure("del attribute", delete_attr)
        dict_none_result = self.measure("dict[key] = None", dict_none)
        dict_del_result = self.measure("del dict[key]", dict_delete)

        self.compare("attribute", none_result, del_result)
        self.compare("dict", dict_none_result, dict_del_result)
