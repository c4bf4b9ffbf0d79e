"""Tests for the loopbench version information."""

from datetime import datetime

from loopbench.version.loopbench_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(
        major=1,
        minor=2,
        patch=3,
        hash="abcdef123456",
        date=datetime(2023, 1, 1),
    )

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.hash_short(4) == "abcd"
    assert v.date_string("%Y") == "2023"
    assert "1.2.3" in v.full_version()
    assert "abcdef12" in v.full_version()


def test_loopbench_version_instance():
    """Test the global LOOPBENCH_VERSION instance."""
    from loopbench import __version__
    from loopbench.version.loopbench_version import LOOPBENCH_VERSION

    assert isinstance(LOOPBENCH_VERSION, Version)
    assert LOOPBENCH_VERSION.major >= 0
    assert len(LOOPBENCH_VERSION.hash) == 64
    assert __version__ == str(LOOPBENCH_VERSION)
