"""
Collaborator interfaces consumed by the configuration manager.

The manager treats the configuration schema, its text encoding and the
optional byte obfuscation as opaque collaborators. These interfaces are the
only surface it relies on.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Type, TypeVar

C = TypeVar("C", bound="IConfig")


class IConfig(ABC):
    """Interface for a versioned configuration value."""

    @abstractmethod
    def get_version(self) -> int:
        """Get the optimistic-concurrency version."""
        pass

    @abstractmethod
    def set_version(self, version: int) -> None:
        """Set the optimistic-concurrency version."""
        pass

    @abstractmethod
    def apply_defaults(self) -> None:
        """Fill in default values for unset fields, in place."""
        pass

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """
        Value equality, field for field, including the version.

        Args:
            other: Config (or None) to compare against

        Returns:
            True if both values carry identical content
        """
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert the config to plain data for serialization."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls: Type[C], data: Dict[str, Any]) -> C:
        """Build a config from plain data produced by to_dict."""
        pass


@dataclass
class VersionedConfig(IConfig):
    """
    Dataclass base for configs that keep their version in a ``version`` field.

    Subclasses declare their own fields with defaults and override
    apply_defaults. Nested dataclass fields need a from_dict override, since
    the default one passes the mapping straight to the constructor.
    """

    version: int = 0

    def get_version(self) -> int:
        return self.version

    def set_version(self, version: int) -> None:
        self.version = version

    def apply_defaults(self) -> None:
        pass

    def equals(self, other: Any) -> bool:
        return type(self) is type(other) and self == other

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls: Type[C], data: Dict[str, Any]) -> C:
        # Unknown keys are ignored
        known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        return cls(**{key: value for key, value in data.items() if key in known})


class ISerializer(ABC):
    """Interface for encoding configs to bytes and back."""

    @abstractmethod
    def encode(self, config: IConfig) -> bytes:
        """
        Encode a config.

        Raises:
            ConfigEncodeError: If the value cannot be serialized
        """
        pass

    @abstractmethod
    def decode(self, data: bytes, empty: IConfig) -> IConfig:
        """
        Decode bytes into a config of the same type as ``empty``.

        Raises:
            ConfigDecodeError: If the bytes are malformed
        """
        pass


class IByteTransform(ABC):
    """Interface for a symmetric transform applied to file bytes."""

    @property
    @abstractmethod
    def is_identity(self) -> bool:
        """True when the transform leaves bytes untouched."""
        pass

    @abstractmethod
    def apply(self, data: bytes) -> bytes:
        """
        Transform bytes. Applying it twice restores the input.

        Raises:
            ObfuscationKeyError: If the cipher cannot be initialized
        """
        pass
