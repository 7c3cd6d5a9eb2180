"""
Package logger for bdaddress.

All modules log under the "bdaddress" namespace. The level comes from
BDADDRESS_LOG_LEVEL, falling back to LOG_LEVEL, then INFO. Reconciliation
and cascade decisions are logged at DEBUG.
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL = (os.getenv("BDADDRESS_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO").upper()

logger = logging.getLogger("bdaddress")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(_handler)

# Host applications (web servers, form backends) configure the root logger
# themselves; keep package output from being emitted twice
logger.propagate = False


def set_log_level(level: str) -> None:
    """Change the level of the package logger at runtime ("DEBUG", "INFO", ...)."""
    logger.setLevel(level.upper())


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional dotted suffix, e.g. "core.reconciler" -> "bdaddress.core.reconciler"

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"bdaddress.{name}")
    return logger
