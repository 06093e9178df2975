"""Logging utilities for intent-kit."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from intent_kit.utils import err_console

_LOGGER_NAME = "intent_kit"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the intent_kit hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the intent_kit logger with Rich console output and an optional file sink."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated CLI invocations in one process don't duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    rich_handler = RichHandler(console=err_console, show_path=False, markup=False)
    rich_handler.setLevel(level)
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(rich_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["configure_logging", "get_logger"]
