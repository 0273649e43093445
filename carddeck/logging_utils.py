"""Logging setup shared by the CLI and library modules."""

import logging

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def setup_logging(
    level: str = "INFO",
    fmt: str = LOG_FORMAT,
    datefmt: str = LOG_DATEFMT,
) -> None:
    """Call once at program start; library modules never configure logging."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(level=numeric, format=fmt, datefmt=datefmt)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
