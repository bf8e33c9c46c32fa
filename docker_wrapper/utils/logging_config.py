"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "DOCKER_WRAPPER_LOG_LEVEL"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level_from_env(default: int = logging.WARNING, env_var: str = LOG_LEVEL_ENV) -> int:
    """Read a level name (``DEBUG`` ... ``CRITICAL``) from ``env_var``.

    Unset or unknown values give ``default``.
    """
    return _LEVELS.get(os.getenv(env_var, "").strip().upper(), default)


def configure_logging(
    verbose: bool = False,
    debug: bool = False,
    level: int | None = None,
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    respect_env: bool = True,
) -> int:
    """Configure the root logger and return the chosen level.

    Priority: explicit ``level``, then ``debug``, then ``verbose``, then the
    ``DOCKER_WRAPPER_LOG_LEVEL`` environment variable (when ``respect_env``),
    then WARNING.
    """
    if level is not None:
        final_level = level
    elif debug:
        final_level = logging.DEBUG
    elif verbose:
        final_level = logging.INFO
    elif respect_env:
        final_level = get_log_level_from_env()
    else:
        final_level = logging.WARNING

    logging.basicConfig(level=final_level, format=format, datefmt=datefmt, force=True)
    return final_level


__all__ = ["LOG_LEVEL_ENV", "configure_logging", "get_log_level_from_env"]
