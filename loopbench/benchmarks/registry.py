"""Registry for automatic discovery and registration of benchmark scenarios.

Usage:
    from loopbench.benchmarks.registry import BenchmarkRegistry

    # Discover built-in scenarios from loopbench/scenarios/
    registry = BenchmarkRegistry()

    # Get all registered scenarios
    all_benchmarks = registry.get_all_benchmarks()

    # Get a specific scenario by class name or alias
    benchmark_cls = registry.get_benchmark("slots")
"""

import importlib.util
import inspect
import sys
from pathlib import Path
from typing import Any, ClassVar

from loopbench.benchmarks.base import Benchmark
from loopbench.utils.logger import Logger


class BenchmarkRegistryError(Exception):
    """Base exception for registry errors."""

    pass


class BenchmarkNameCollisionError(BenchmarkRegistryError):
    """Raised when two scenarios have the same name or alias."""

    def __init__(self, name: str, benchmark1: type, benchmark2: type) -> None:
        self.name = name
        self.benchmark1 = benchmark1
        self.benchmark2 = benchmark2
        super().__init__(
            f"Benchmark name collision: '{name}' is defined in both "
            f"{benchmark1.__module__} and {benchmark2.__module__}"
        )


class BenchmarkNotFoundError(BenchmarkRegistryError):
    """Raised when a requested scenario is not found."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        self.name = name
        message = f"Benchmark not found: '{name}'"
        if known:
            message += f". Valid: {', '.join(known)}"
        super().__init__(message)


class BenchmarkRegistry:
    """Registry for discovery and lookup of Benchmark scenarios.

    Discovers concrete Benchmark subclasses from the given directories or
    files. Lookups accept the class name (case-insensitive) or the class
    ALIAS.

    Example:
        >>> registry = BenchmarkRegistry()
        >>> for benchmark_cls in registry.get_all_benchmarks():
        ...     result = benchmark_cls(iterations=10_000).run()
    """

    DEFAULT_PATHS: ClassVar[list[Path]] = [
        Path(__file__).parent.parent / "scenarios",  # loopbench/scenarios/
    ]

    MODULE_PREFIX: ClassVar[str] = "loopbench.scenarios"

    def __init__(
        self,
        search_paths: list[str | Path] | None = None,
        include_defaults: bool = True,
        lazy: bool = True,
    ) -> None:
        """Initialize the registry.

        Args:
            search_paths: Additional directories or .py files to search.
            include_defaults: If True, include loopbench/scenarios/.
            lazy: If True, defer discovery until first access.

        Raises:
            BenchmarkNameCollisionError: If two scenarios share a name.
        """
        self._benchmarks: dict[str, type[Benchmark]] = {}
        self._aliases: dict[str, str] = {}
        self._paths: list[Path] = []
        self._discovered: bool = False

        if include_defaults:
            self._paths.extend(self.DEFAULT_PATHS)

        if search_paths:
            self._paths.extend(Path(p) for p in search_paths)

        if not lazy:
            self._ensure_discovered()

    def _ensure_discovered(self) -> None:
        """Ensure scenarios have been discovered."""
        if not self._discovered:
            self._discover_benchmarks()
            self._discovered = True

    def _discover_benchmarks(self) -> None:
        """Discover all Benchmark subclasses in registered paths."""
        for path in self._paths:
            if not path.exists():
                continue

            if path.is_file() and path.suffix == ".py":
                self._load_benchmarks_from_file(path)
            elif path.is_dir():
                for py_file in sorted(path.glob("*.py")):
                    if py_file.name.startswith("_"):
                        continue
                    self._load_benchmarks_from_file(py_file)

    def _load_benchmarks_from_file(self, filepath: Path) -> None:
        """Load all Benchmark subclasses from a Python file."""
        module_name = f"{self.MODULE_PREFIX}.{filepath.stem}"

        if module_name in sys.modules:
            module = sys.modules[module_name]
        else:
            try:
                spec = importlib.util.spec_from_file_location(module_name, filepath)
                if spec is None or spec.loader is None:
                    return
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception as e:
                sys.modules.pop(module_name, None)
                Logger.warning(
                    "registry", f"Skipping {filepath}: failed to import ({e})"
                )
                return

        for _name, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, Benchmark)
                and obj is not Benchmark
                and not inspect.isabstract(obj)
                and obj.__module__ == module_name
            ):
                self._register_benchmark(obj)

    def register(self, benchmark_cls: type[Benchmark]) -> None:
        """Register a scenario class defined outside the search paths.

        Raises:
            BenchmarkNameCollisionError: If the name or alias is taken by a
                different class.
        """
        self._ensure_discovered()
        self._register_benchmark(benchmark_cls)

    def _register_benchmark(self, benchmark_cls: type[Benchmark]) -> None:
        """Register a scenario class, checking for name and alias collisions."""
        name = benchmark_cls.__name__

        existing = self._benchmarks.get(name)
        if existing is not None and existing is not benchmark_cls:
            raise BenchmarkNameCollisionError(name, existing, benchmark_cls)

        alias = benchmark_cls.ALIAS.lower()
        owner = self._aliases.get(alias) if alias else None
        if owner is not None and owner != name:
            raise BenchmarkNameCollisionError(
                alias, self._benchmarks[owner], benchmark_cls
            )

        self._benchmarks[name] = benchmark_cls
        if alias:
            self._aliases[alias] = name

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def get_all_benchmarks(self) -> list[type[Benchmark]]:
        """Get all registered scenario classes, sorted by name."""
        self._ensure_discovered()
        return [self._benchmarks[name] for name in sorted(self._benchmarks)]

    def resolve_name(self, name: str) -> str:
        """Resolve a class name, case-insensitive name, or alias.

        Raises:
            BenchmarkNotFoundError: If nothing matches.
        """
        self._ensure_discovered()
        if name in self._benchmarks:
            return name

        lowered = name.lower()
        for registered_name in self._benchmarks:
            if registered_name.lower() == lowered:
                return registered_name

        if lowered in self._aliases:
            return self._aliases[lowered]

        raise BenchmarkNotFoundError(name, sorted(self._benchmarks))

    def get_benchmark(self, name: str) -> type[Benchmark]:
        """Get a scenario class by class name or alias.

        Raises:
            BenchmarkNotFoundError: If the scenario is not registered.
        """
        return self._benchmarks[self.resolve_name(name)]

    def list_benchmarks(self) -> list[dict[str, Any]]:
        """Get a summary of all registered scenarios.

        Returns:
            List of dicts with name, alias, pretty_name, description, claim.
        """
        self._ensure_discovered()
        summaries = []
        for name, benchmark_cls in sorted(self._benchmarks.items()):
            instance = benchmark_cls()
            summaries.append(
                {
                    "name": name,
                    "alias": benchmark_cls.ALIAS,
                    "pretty_name": instance.get_pretty_name(),
                    "description": instance.get_description(),
                    "claim": instance.get_claim(),
                }
            )
        return summaries

    def __len__(self) -> int:
        """Return number of registered scenarios."""
        self._ensure_discovered()
        return len(self._benchmarks)

    def __contains__(self, name: str) -> bool:
        """Check if a scenario name or alias is registered."""
        try:
            self.resolve_name(name)
        except BenchmarkNotFoundError:
            return False
        return True
