"""Logging setup for the service."""

from .logger import JsonFormatter, setup_logging  # noqa: F401

__all__ = [
    "JsonFormatter",
    "setup_logging",
]
