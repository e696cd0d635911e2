"""
Core interfaces for the configuration store.

These abstract base classes define the contracts between the manager and its
collaborators: the config value, the serializer and the byte transform.
"""

from .config import IConfig, VersionedConfig, ISerializer, IByteTransform

__all__ = [
    "IConfig",
    "VersionedConfig",
    "ISerializer",
    "IByteTransform",
]
