"""
File-backed configuration storage.

This module provides the manager that synchronizes an in-memory config with
its backing file, together with the disk, snapshot, serializer and
obfuscation pieces it is built from, and optional reload drivers.
"""

from .manager import Manager
from .models import ManagerSettings, LoggingConfig
from .crypto import StreamCipherProvider, StreamCipherTransform, IdentityTransform, create_transform
from .serializer import YamlSerializer
from .snapshot import FileSnapshot, ChangeDetector
from .disk import DiskReader, DiskWriter
from .watcher import ConfigWatcher, PollingConfigWatcher, create_config_watcher, IConfigWatcher

__all__ = [
    "Manager",
    "ManagerSettings",
    "LoggingConfig",
    "StreamCipherProvider",
    "StreamCipherTransform",
    "IdentityTransform",
    "create_transform",
    "YamlSerializer",
    "FileSnapshot",
    "ChangeDetector",
    "DiskReader",
    "DiskWriter",
    "ConfigWatcher",
    "PollingConfigWatcher",
    "create_config_watcher",
    "IConfigWatcher",
]
