"""loopbench - micro-benchmark measurement and comparison harness."""

from loopbench.version.loopbench_version import LOOPBENCH_VERSION, Version

__version__ = str(LOOPBENCH_VERSION)
__version_info__ = LOOPBENCH_VERSION

__all__ = [
    "LOOPBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
