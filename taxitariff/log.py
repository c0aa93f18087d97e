"""Logging setup."""

import logging
import sys


class DevFormatter(logging.Formatter):
    """Human-readable format for the console."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: str = "INFO") -> None:
    """Attach a single stdout handler to the package logger."""
    package_logger = logging.getLogger("taxitariff")
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(DevFormatter())

    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False
