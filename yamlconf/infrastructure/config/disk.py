"""
Reading and writing the backing file.

DiskReader and DiskWriter move config values between memory and disk,
passing the bytes through the serializer and the byte transform. Both open
the file for the duration of a single call and close it on every exit path.
"""

import os
from pathlib import Path
from typing import Callable, Union

from ...core.exceptions import ConfigDecodeError, ConfigIOError, ConfigStatError
from ...core.interfaces.config import IByteTransform, IConfig, ISerializer
from .snapshot import FileSnapshot


class DiskReader:
    """Loads a config from the backing file."""

    def __init__(
        self,
        file_path: Union[str, Path],
        serializer: ISerializer,
        empty_config: Callable[[], IConfig],
        transform: IByteTransform
    ):
        self._file_path = Path(file_path)
        self._serializer = serializer
        self._empty_config = empty_config
        self._transform = transform

    def read(self, allow_decryption: bool) -> IConfig:
        """
        Read and decode the backing file.

        Args:
            allow_decryption: Pass the bytes through the transform first

        Returns:
            A newly decoded config

        Raises:
            ConfigIOError: If the file cannot be opened or read
            ConfigDecodeError: If the bytes cannot be decoded
            ObfuscationKeyError: If the cipher cannot be initialized
        """
        try:
            infile = open(self._file_path, 'rb')
        except OSError as e:
            raise ConfigIOError(
                f"Unable to open config file {self._file_path} for reading: {e}") from e

        try:
            with infile:
                data = infile.read()
        except OSError as e:
            raise ConfigIOError(f"Error reading config from {self._file_path}: {e}") from e

        if allow_decryption:
            data = self._transform.apply(data)

        try:
            return self._serializer.decode(data, self._empty_config())
        except ConfigDecodeError as e:
            raise ConfigDecodeError(
                f"Error unmarshaling config yaml from {self._file_path}: {e.message}") from e


class DiskWriter:
    """Persists a config to the backing file."""

    def __init__(
        self,
        file_path: Union[str, Path],
        serializer: ISerializer,
        transform: IByteTransform,
        file_mode: int = 0o644
    ):
        self._file_path = Path(file_path)
        self._serializer = serializer
        self._transform = transform
        self._file_mode = file_mode

    def write(self, config: IConfig) -> FileSnapshot:
        """
        Encode, transform and write a config, then stat the result.

        If the final stat fails the bytes are already on disk; the
        ConfigStatError only means the new snapshot is unknown.

        Args:
            config: Config to persist

        Returns:
            Snapshot of the file as written

        Raises:
            ConfigEncodeError: If the config cannot be serialized
            ConfigIOError: If the file cannot be opened, written or stat-ed
            ObfuscationKeyError: If the cipher cannot be initialized
        """
        data = self._transform.apply(self._serializer.encode(config))

        try:
            fd = os.open(self._file_path, os.O_CREAT | os.O_TRUNC | os.O_WRONLY, self._file_mode)
        except OSError as e:
            raise ConfigIOError(
                f"Unable to open file {self._file_path} for writing: {e}") from e

        try:
            with os.fdopen(fd, 'wb') as outfile:
                outfile.write(data)
        except OSError as e:
            raise ConfigIOError(
                f"Unable to write config yaml to file {self._file_path}: {e}") from e

        try:
            return FileSnapshot.capture(self._file_path)
        except ConfigStatError as e:
            raise ConfigStatError(f"Config written but {e.message}") from e
