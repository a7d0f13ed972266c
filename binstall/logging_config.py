"""Logging configuration for binstall."""

import logging
import sys


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure logging for the installer.

    Nothing is written to disk; all records go to stderr so they do not
    interleave with the Rich progress output on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    # Create logger
    logger = logging.getLogger("binstall")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "binstall") -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
