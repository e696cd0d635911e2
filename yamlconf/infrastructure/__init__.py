"""
Infrastructure layer containing filesystem and cryptography concerns.

This layer handles reading and writing the backing file, obfuscation,
serialization, change detection and logging.
"""

from .config.manager import Manager
from .logging.setup import setup_logging

__all__ = [
    "Manager",
    "setup_logging",
]
