# MIT License (see LICENSE)
"""
Logging setup for applications embedding the simulator.

Library modules only create loggers (logging.getLogger(__name__)) and never
attach handlers themselves. Scripts, benchmarks and examples call
setup_logging() once to see the output.
"""
from __future__ import annotations
import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the 'particle_sim' package logger.

    Args:
        level: Logging level (e.g. logging.DEBUG to see every step).
        log_file: Optional path; when given, logs are also written there.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("particle_sim")
    logger.setLevel(level)

    # Re-running setup must not stack duplicate handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
