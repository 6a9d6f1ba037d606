"""Package logger for active-container."""

import logging
import os
from typing import Union

import colorlog

log = logging.getLogger("active_container")

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Attaches a colored stream handler to the package logger (once)."""
    if log.hasHandlers():
        return  # pragma: no cover

    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            log_colors=LOG_COLORS,
        )
    )
    log.setLevel(level)
    log.addHandler(handler)
    log.propagate = False

    log.debug("active_container logger is configured.")


def set_level(level: Union[int, str]) -> None:
    """Changes the verbosity of the package logger and its handlers."""
    log.setLevel(level)
    for handler in log.handlers:
        handler.setLevel(level)


if os.getenv("ACTIVE_CONTAINER_DEBUG"):
    setup_logging(level=logging.DEBUG)  # pragma: no cover
else:
    setup_logging(level=logging.WARNING)
