"""
Error taxonomy for the configuration store.

Every failure surfaced by the manager is a ConfigStoreError subclass carrying
an error code and a severity level, so callers can branch on the type while
log sinks can filter on the level.
"""

from enum import Enum
from typing import Optional


class ErrorLevel(Enum):
    """Error level definitions"""
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class ConfigStoreError(Exception):
    """Base class for configuration store errors"""

    def __init__(self, message: str, error_code: Optional[str] = "CONFIG_STORE_ERROR",
                 level: ErrorLevel = ErrorLevel.ERROR):
        self.message = message
        self.error_code = error_code
        self.level = level
        super().__init__(self.message)


class ConfigIOError(ConfigStoreError):
    """The backing file could not be opened, read or written."""

    def __init__(self, message: str, error_code: Optional[str] = "CONFIG_IO_ERROR"):
        super().__init__(message, error_code, ErrorLevel.ERROR)


class ConfigStatError(ConfigIOError):
    """The backing file could not be stat-ed."""

    def __init__(self, message: str):
        super().__init__(message, "CONFIG_STAT_ERROR")


class ConfigDecodeError(ConfigStoreError):
    """Bytes on disk are malformed or could not be decoded into a config."""

    def __init__(self, message: str):
        super().__init__(message, "CONFIG_DECODE_ERROR", ErrorLevel.ERROR)


class ConfigEncodeError(ConfigStoreError):
    """A config value could not be serialized."""

    def __init__(self, message: str):
        super().__init__(message, "CONFIG_ENCODE_ERROR", ErrorLevel.ERROR)


class ObfuscationKeyError(ConfigStoreError):
    """The obfuscation key cannot initialize the cipher."""

    def __init__(self, message: str):
        super().__init__(message, "OBFUSCATION_KEY_ERROR", ErrorLevel.CRITICAL)


class ConfigCopyError(ConfigStoreError):
    """Copying a config through the serializer failed."""

    def __init__(self, message: str):
        super().__init__(message, "CONFIG_COPY_ERROR", ErrorLevel.ERROR)


class VersionConflictError(ConfigStoreError):
    """The version found on disk does not match the in-memory version."""

    def __init__(self, expected: int, found: int):
        super().__init__(
            f"Version of config on disk did not match expected. Expected {expected}, found {found}",
            "VERSION_CONFLICT",
            ErrorLevel.WARNING,
        )
        self.expected = expected
        self.found = found
