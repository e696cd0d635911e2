"""
yamlconf - Single-writer, file-backed configuration store.

Keeps an in-memory configuration synchronized with a YAML file, detects
external modifications, resolves version conflicts with optimistic
versioning and optionally obfuscates the file with an AES stream cipher.
"""

__version__ = "0.1.0"

# Public API exports
from .core.exceptions import (
    ErrorLevel,
    ConfigStoreError,
    ConfigIOError,
    ConfigStatError,
    ConfigDecodeError,
    ConfigEncodeError,
    ObfuscationKeyError,
    ConfigCopyError,
    VersionConflictError,
)
from .core.interfaces.config import IConfig, VersionedConfig, ISerializer, IByteTransform
from .infrastructure.config.manager import Manager
from .infrastructure.config.models import ManagerSettings, LoggingConfig
from .infrastructure.logging.setup import setup_logging, get_logger

__all__ = [
    "ErrorLevel",
    "ConfigStoreError",
    "ConfigIOError",
    "ConfigStatError",
    "ConfigDecodeError",
    "ConfigEncodeError",
    "ObfuscationKeyError",
    "ConfigCopyError",
    "VersionConflictError",
    "IConfig",
    "VersionedConfig",
    "ISerializer",
    "IByteTransform",
    "Manager",
    "ManagerSettings",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
