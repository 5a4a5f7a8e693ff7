"""Logging module for uilocator."""

from .logger import QueryLogger, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "QueryLogger",
]
