"""Hornet utilities - shared helper functions and utilities."""

from hornet.utils.env import (
    EnvVarError,
    EnvVarNotSetError,
    EnvVarTypeError,
    env_is_set,
    get_env,
    require_env,
)
from hornet.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarNotSetError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "env_is_set",
    "get_env",
    "require_env",
]
