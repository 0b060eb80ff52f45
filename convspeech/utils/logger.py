"""Logging setup shared by every convspeech module."""

from __future__ import annotations

import logging
import os

from convspeech.config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_CONFIGURED = False


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: str | int | None = None) -> int:
    """Applies the root log level and returns it.

    An explicit ``level`` wins over the ``LOG_LEVEL`` environment variable,
    which wins over ``Config.DEFAULT_LOG_LEVEL``. Only an explicit unknown
    level raises; an unknown ``LOG_LEVEL`` falls back to the default.
    """
    global _LOGGING_CONFIGURED
    ignored_env_level: str | None = None
    if level is not None:
        resolved = _resolve_level(level)
    else:
        env_level = os.getenv("LOG_LEVEL", Config.DEFAULT_LOG_LEVEL)
        try:
            resolved = _resolve_level(env_level)
        except ValueError:
            ignored_env_level = env_level
            resolved = _resolve_level(Config.DEFAULT_LOG_LEVEL)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT, level=resolved)
        for handler in root_logger.handlers:
            handler.setLevel(resolved)
    root_logger.setLevel(resolved)
    _LOGGING_CONFIGURED = True

    if ignored_env_level is not None:
        logging.getLogger(__name__).warning(
            "Ignoring unknown LOG_LEVEL %r; using %s.",
            ignored_env_level,
            logging.getLevelName(resolved),
        )
    return resolved


def get_logger(name: str) -> logging.Logger:
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return logging.getLogger(name)
