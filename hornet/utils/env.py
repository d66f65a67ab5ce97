"""Environment variable helpers with type coercion.

Usage:
    from hornet.utils.env import get_env, require_env

    samples = get_env("HORNET_SAMPLES", default=5, as_type=int)
    suite = require_env("HORNET_SUITE")
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast

T = TypeVar("T")

_FALSE_VALUES = ("false", "0", "", "no", "off")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarNotSetError(EnvVarError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Required environment variable not set: {name}")


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a raw string to ``as_type``.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.strip().lower() not in _FALSE_VALUES
        if as_type is list:
            return [item.strip() for item in value.split(",") if item.strip()]
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None) -> None:
    from hornet.utils.logger import Logger

    if Logger.is_configured():
        Logger.get("env").debug(f"ENV GET {name}={value}")


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        as_type: bool, int, float, str, list (comma separated) or any
            callable type taking a string.
        log: Log the access at DEBUG level when the logger is configured.

    Returns:
        The converted value, or ``default`` when unset.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def require_env(
    name: str,
    *,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str:
    """Get a required environment variable.

    Raises:
        EnvVarNotSetError: If the variable is not set.
        EnvVarTypeError: If conversion fails.
    """
    value = os.environ.get(name)

    if value is None:
        raise EnvVarNotSetError(name)

    if log:
        _log_access(name, value)

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def env_is_set(name: str) -> bool:
    """Check if an environment variable is set and non-empty."""
    value = os.environ.get(name)
    return value is not None and value != ""
