"""
Settings models for the configuration store.

This module defines the settings used to build a manager and to configure
logging, with validation applied when the dataclasses are created.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...core.exceptions import ObfuscationKeyError

AES_KEY_SIZES = (16, 24, 32)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_directory: str = "logs"
    max_file_size: str = "10MB"
    backup_count: int = 5
    console_enabled: bool = True
    file_enabled: bool = False


@dataclass
class ManagerSettings:
    """Settings for a file-backed configuration manager."""

    file_path: str = ""
    obfuscation_key: Optional[bytes] = None
    file_mode: int = 0o644
    create_if_missing: bool = True

    # Used only by the reload drivers in watcher.py
    poll_interval: float = 1.0
    use_polling: bool = True
    debounce_delay: float = 0.5

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.file_path:
            raise ValueError("file_path must not be empty")

        if self.obfuscation_key is not None and len(self.obfuscation_key) not in AES_KEY_SIZES:
            raise ObfuscationKeyError(
                f"Obfuscation key must be 16, 24 or 32 bytes, got {len(self.obfuscation_key)}")

        intervals = [
            ("poll_interval", self.poll_interval),
            ("debounce_delay", self.debounce_delay),
        ]
        for name, value in intervals:
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    @property
    def obfuscated(self) -> bool:
        return self.obfuscation_key is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a dictionary, with the key as hex."""
        result = dict(self.__dict__)
        if self.obfuscation_key is not None:
            result["obfuscation_key"] = self.obfuscation_key.hex()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ManagerSettings':
        """Create settings from a dictionary; the key may be given as hex."""
        key = data.get('obfuscation_key')
        if isinstance(key, str):
            try:
                key = bytes.fromhex(key)
            except ValueError as e:
                raise ObfuscationKeyError(f"Obfuscation key is not valid hex: {e}") from e

        return cls(
            file_path=data.get('file_path', ''),
            obfuscation_key=key,
            file_mode=data.get('file_mode', 0o644),
            create_if_missing=data.get('create_if_missing', True),
            poll_interval=data.get('poll_interval', 1.0),
            use_polling=data.get('use_polling', True),
            debounce_delay=data.get('debounce_delay', 0.5),
        )
