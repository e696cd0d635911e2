"""
File-backed configuration manager.

This module keeps an in-memory config synchronized with a file on disk:
reload picks up external edits and resolves version conflicts, save
persists programmatic changes with optimistic versioning.
"""

from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from ...core.exceptions import (
    ConfigCopyError,
    ConfigStoreError,
    VersionConflictError,
)
from ...core.interfaces.config import IByteTransform, IConfig, ISerializer
from ...core.services.arbiter import ReloadVerdict, VersionArbiter
from ..logging.setup import get_logger
from .crypto import create_transform
from .disk import DiskReader, DiskWriter
from .models import ManagerSettings
from .serializer import YamlSerializer
from .snapshot import ChangeDetector, FileSnapshot


class Manager:
    """
    Single-writer manager for a config persisted in one file.

    The manager exclusively owns the in-memory config. Callers receive
    copies from current() and hand values in through save() or update().
    No locking is done; one thread of control must drive an instance.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        empty_config: Callable[[], IConfig],
        obfuscation_key: Optional[bytes] = None,
        serializer: Optional[ISerializer] = None,
        transform: Optional[IByteTransform] = None,
        logger: Optional[Any] = None,
        file_mode: int = 0o644,
        create_if_missing: bool = True
    ):
        """
        Initialize the manager.

        Args:
            file_path: Path of the backing file
            empty_config: Factory for zero-valued configs to decode into
            obfuscation_key: AES key; when set the file is stored obfuscated
            serializer: Serializer collaborator, YAML by default
            transform: Byte transform, derived from obfuscation_key by default
            logger: Logger with loguru-style level methods
            file_mode: Permission bits for a newly created file
            create_if_missing: Let load() create the file with defaults

        Raises:
            ObfuscationKeyError: If the key cannot initialize the cipher
        """
        self._file_path = Path(file_path)
        self._empty_config = empty_config
        self._serializer = serializer or YamlSerializer()
        self._transform = transform or create_transform(obfuscation_key)
        self._logger = logger or get_logger(__name__)
        self._create_if_missing = create_if_missing

        self._reader = DiskReader(self._file_path, self._serializer, empty_config, self._transform)
        self._writer = DiskWriter(self._file_path, self._serializer, self._transform, file_mode)
        self._detector = ChangeDetector(self._file_path)
        self._arbiter = VersionArbiter()

        self._cfg: Optional[IConfig] = None
        self._last_snapshot: Optional[FileSnapshot] = None
        self._observers: List[Callable[[IConfig], None]] = []

    @classmethod
    def from_settings(
        cls,
        settings: ManagerSettings,
        empty_config: Callable[[], IConfig],
        serializer: Optional[ISerializer] = None,
        logger: Optional[Any] = None
    ) -> 'Manager':
        """Create a manager from validated settings."""
        return cls(
            file_path=settings.file_path,
            empty_config=empty_config,
            obfuscation_key=settings.obfuscation_key,
            serializer=serializer,
            logger=logger,
            file_mode=settings.file_mode,
            create_if_missing=settings.create_if_missing,
        )

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def obfuscated(self) -> bool:
        return not self._transform.is_identity

    @property
    def last_snapshot(self) -> Optional[FileSnapshot]:
        return self._last_snapshot

    def current(self) -> Optional[IConfig]:
        """
        Get a copy of the in-memory configuration.

        Returns:
            Copy of the current config, or None before the first sync

        Raises:
            ConfigCopyError: If the serializer round-trip fails
        """
        if self._cfg is None:
            return None
        return self._copy(self._cfg)

    def load(self) -> bool:
        """
        Perform the initial synchronization with disk.

        A missing file is created from a defaulted empty config when
        create_if_missing is set; otherwise the file is reloaded.

        Returns:
            True if the in-memory config changed
        """
        if self._create_if_missing and not self._file_path.exists():
            self._logger.info(f"Config file {self._file_path} not found, creating with defaults")
            return self.save(self._empty_config())
        return self.reload()

    def has_changed_on_disk(self) -> bool:
        """Check whether the file's size or modification time moved since the last sync."""
        return self._detector.has_changed(self._last_snapshot)

    def reload(self) -> bool:
        """
        Reload the configuration from disk if the file changed.

        Returns:
            True if a new config was adopted

        Raises:
            ConfigStatError: If the file cannot be stat-ed
            ConfigIOError: If the file cannot be read
            ConfigDecodeError: If the content cannot be decoded
            VersionConflictError: If the version on disk differs from memory;
                the in-memory config has been written back to disk
        """
        snapshot = FileSnapshot.capture(self._file_path)
        if snapshot == self._last_snapshot:
            self._logger.trace("Config unchanged on disk")
            return False

        loaded = self._read_from_disk()
        current = self._cfg
        verdict = self._arbiter.judge_reload(current, loaded)

        if verdict is ReloadVerdict.VERSION_CONFLICT and current is not None:
            expected, found = current.get_version(), loaded.get_version()
            self._logger.warning(
                f"Version mismatch on disk (expected {expected}, found {found}), "
                f"overwriting with current version")
            try:
                self._last_snapshot = self._writer.write(current)
            except ConfigStoreError as e:
                self._logger.error(f"Unable to write to disk: {e}")
            raise VersionConflictError(expected, found)

        if verdict is ReloadVerdict.UNCHANGED:
            # TODO: refresh the snapshot here to avoid decoding the file on every poll
            self._logger.trace("Config on disk is same as in memory, ignoring")
            return False

        if verdict is ReloadVerdict.NO_KNOWN_STATE:
            self._logger.debug("Loaded initial configuration from disk")
        else:
            self._logger.debug("Configuration changed on disk, applying")

        self._cfg = loaded
        self._last_snapshot = snapshot
        self._notify_observers()
        return True

    def save(self, updated: IConfig) -> bool:
        """
        Persist a new configuration if its content differs from memory.

        The version of ``updated`` is rewritten in place; the manager
        keeps its own copy, so later changes to ``updated`` have no effect
        until it is saved again.

        Args:
            updated: Config to save

        Returns:
            True if the config was written and adopted

        Raises:
            ConfigCopyError: If either config cannot be copied
            ConfigEncodeError: If the config cannot be serialized
            ConfigIOError: If the file cannot be written
        """
        self._logger.trace("Applying defaults before saving")
        updated.apply_defaults()

        original: Optional[IConfig] = None
        if self._cfg is not None:
            original = self._copy(self._cfg)
            original.set_version(0)
        next_version = self._arbiter.next_version(self._cfg)

        updated.set_version(0)
        if self._arbiter.is_save_noop(original, updated):
            self._logger.trace("Configuration unchanged, do nothing")
            return False

        self._logger.debug("Configuration changed programmatically, saving")
        updated.set_version(next_version)
        adopted = self._copy(updated)
        snapshot = self._writer.write(adopted)

        self._cfg = adopted
        self._last_snapshot = snapshot
        self._notify_observers()
        return True

    def update(self, mutate: Callable[[IConfig], None]) -> bool:
        """
        Apply a mutation to a copy of the current config and save it.

        Args:
            mutate: Function modifying the config in place

        Returns:
            True if the mutation produced a change that was saved
        """
        updated = self.current()
        if updated is None:
            updated = self._empty_config()
        mutate(updated)
        return self.save(updated)

    def register_observer(self, observer: Callable[[IConfig], None]) -> None:
        """
        Register an observer for configuration changes.

        Args:
            observer: Function called with a copy of each adopted config
        """
        if observer not in self._observers:
            self._observers.append(observer)
            self._logger.debug(f"Registered configuration observer: {observer!r}")

    def unregister_observer(self, observer: Callable[[IConfig], None]) -> None:
        """
        Unregister a configuration change observer.

        Args:
            observer: Observer function to remove
        """
        if observer in self._observers:
            self._observers.remove(observer)
            self._logger.debug(f"Unregistered configuration observer: {observer!r}")

    def _read_from_disk(self) -> IConfig:
        """Read the file, falling back to plain bytes when obfuscated reading fails."""
        if not self.obfuscated:
            self._logger.trace("Attempting to read non-obfuscated config")
            return self._reader.read(allow_decryption=False)

        self._logger.trace("Attempting to read obfuscated config")
        try:
            return self._reader.read(allow_decryption=True)
        except ConfigStoreError as obfuscated_error:
            self._logger.trace(
                f"Error reading obfuscated config from disk, try reading non-obfuscated: "
                f"{obfuscated_error}")
            try:
                return self._reader.read(allow_decryption=False)
            except ConfigStoreError:
                raise obfuscated_error

    def _copy(self, config: IConfig) -> IConfig:
        """Copy a config by round-tripping it through the serializer."""
        try:
            return self._serializer.decode(self._serializer.encode(config), self._empty_config())
        except ConfigStoreError as e:
            raise ConfigCopyError(f"Unable to copy config: {e}") from e

    def _notify_observers(self) -> None:
        """Notify all observers of the new configuration."""
        for observer in self._observers:
            try:
                config = self.current()
                if config is not None:
                    observer(config)
            except Exception as e:
                self._logger.error(f"Error in configuration observer {observer!r}: {e}")
