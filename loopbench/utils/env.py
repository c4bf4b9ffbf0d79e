"""Environment variable helpers with type coercion.

Usage:
    from loopbench.utils.env import get_env

    level = get_env("LOOPBENCH_LOG_LEVEL", default="WARNING")
    quick = get_env("LOOPBENCH_QUICK", default=False, as_type=bool)
    samples = get_env("LOOPBENCH_SAMPLES", as_type=int)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

LOG_LEVEL_VAR = "LOOPBENCH_LOG_LEVEL"
QUICK_VAR = "LOOPBENCH_QUICK"


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        # "false", "0", "" and friends are False
        if as_type is bool:
            return value.strip().lower() not in ("false", "0", "", "no", "off")
        if as_type is int:
            return int(value.replace("_", ""))
        if as_type is float:
            return float(value)
        if as_type is str:
            return value
        if as_type is list:
            return [item.strip() for item in value.split(",") if item.strip()]
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


@overload
def get_env(name: str, *, default: T, as_type: type[T]) -> T:
    ...


@overload
def get_env(name: str, *, default: T) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T]) -> T | None:
    ...


@overload
def get_env(name: str) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        as_type: bool, int, float, str, list (comma-separated), or any
            callable type taking a string.

    Raises:
        EnvVarTypeError: If as_type is given and conversion fails.

    Examples:
        >>> get_env("LOOPBENCH_QUICK", default=False, as_type=bool)
        False
        >>> get_env("LOOPBENCH_BENCHMARKS", default=["layout"], as_type=list)
        ['layout']
    """
    value = os.environ.get(name)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value

