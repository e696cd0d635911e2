"""Shared fixtures for the configuration store tests."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from unittest.mock import Mock

import pytest

from yamlconf.core.interfaces.config import VersionedConfig
from yamlconf.infrastructure.config.manager import Manager

KEY = bytes(range(16))
OTHER_KEY = bytes(range(16, 32))


@dataclass
class SampleConfig(VersionedConfig):
    """Config used throughout the tests."""
    name: str = ""
    port: int = 0
    tags: List[str] = field(default_factory=list)

    def apply_defaults(self) -> None:
        if not self.name:
            self.name = "default"
        if not self.port:
            self.port = 8080


def external_write(path: Path, data: bytes) -> None:
    """
    Overwrite a file as an outside editor would.

    The modification time is pushed one second past the previous one so the
    change is visible even on filesystems with coarse timestamps.
    """
    previous = path.stat().st_mtime_ns if path.exists() else 0
    path.write_bytes(data)
    mtime_ns = max(path.stat().st_mtime_ns, previous + 1_000_000_000)
    os.utime(path, ns=(mtime_ns, mtime_ns))


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.yaml"


@pytest.fixture
def mock_logger() -> Mock:
    return Mock()


@pytest.fixture
def manager(config_path: Path, mock_logger: Mock) -> Manager:
    return Manager(config_path, SampleConfig, logger=mock_logger)


@pytest.fixture
def obfuscated_manager(config_path: Path, mock_logger: Mock) -> Manager:
    return Manager(config_path, SampleConfig, obfuscation_key=KEY, logger=mock_logger)
