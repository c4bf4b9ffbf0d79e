"""Version information for loopbench."""

from loopbench.version.loopbench_version import LOOPBENCH_VERSION, Version

__all__ = ["LOOPBENCH_VERSION", "Version"]
