"""
Logging infrastructure for the configuration store.

This module provides centralized logging configuration built on loguru.
"""

from .setup import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
