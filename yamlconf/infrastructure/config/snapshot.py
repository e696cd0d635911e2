"""
File metadata snapshots and change detection.

A snapshot records the size and modification time of the backing file at
the moment the in-memory config was last synchronized with it. Comparing a
fresh snapshot against the stored one tells whether the file was touched
without reading its content.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ...core.exceptions import ConfigStatError


@dataclass(frozen=True)
class FileSnapshot:
    """Size and modification time of a file; equality ignores the path."""
    path: Path = field(compare=False)
    size: int
    mtime_ns: int

    @classmethod
    def capture(cls, path: Union[str, Path]) -> 'FileSnapshot':
        """
        Stat a file.

        Args:
            path: File to stat

        Returns:
            Snapshot of the file's current metadata

        Raises:
            ConfigStatError: If the file cannot be stat-ed
        """
        path = Path(path)
        try:
            stat = os.stat(path)
        except OSError as e:
            raise ConfigStatError(f"Unable to stat config file {path}: {e}") from e
        return cls(path=path, size=stat.st_size, mtime_ns=stat.st_mtime_ns)


class ChangeDetector:
    """Best-effort check for modifications made since the last snapshot."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def has_changed(self, last_snapshot: Optional[FileSnapshot]) -> bool:
        """
        Check whether the file differs from the last snapshot.

        A file that cannot be stat-ed counts as unchanged. With no snapshot
        yet, any observable file counts as changed.

        Args:
            last_snapshot: Snapshot taken at the last synchronization

        Returns:
            True if size or modification time differ
        """
        path = last_snapshot.path if last_snapshot is not None else self._path
        try:
            current = FileSnapshot.capture(path)
        except ConfigStatError:
            return False

        if last_snapshot is None:
            return True
        return current.size != last_snapshot.size or current.mtime_ns != last_snapshot.mtime_ns
