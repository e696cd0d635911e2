"""
Optimistic versioning decisions.

The arbiter compares the in-memory config with a config loaded from disk (on
reload) or with a caller-supplied config (on save) and reports what the
manager should do. It performs no I/O and holds no state.
"""

from enum import Enum
from typing import Optional

from ..interfaces.config import IConfig


class ReloadVerdict(Enum):
    """Outcome of comparing the in-memory config with one loaded from disk."""
    UNCHANGED = "unchanged"
    NO_KNOWN_STATE = "no_known_state"
    VERSION_CONFLICT = "version_conflict"
    CONTENT_CHANGED = "content_changed"


class VersionArbiter:
    """Decides between no-op, accept-update and conflict."""

    def judge_reload(self, current: Optional[IConfig], loaded: IConfig) -> ReloadVerdict:
        """
        Classify a config freshly loaded from disk.

        Args:
            current: In-memory config, None before the first sync
            loaded: Config decoded from the backing file

        Returns:
            NO_KNOWN_STATE when nothing is held in memory yet, VERSION_CONFLICT
            when versions differ, UNCHANGED when the values are equal and
            CONTENT_CHANGED otherwise
        """
        if current is None:
            return ReloadVerdict.NO_KNOWN_STATE
        if current.get_version() != loaded.get_version():
            return ReloadVerdict.VERSION_CONFLICT
        if current.equals(loaded):
            return ReloadVerdict.UNCHANGED
        return ReloadVerdict.CONTENT_CHANGED

    def next_version(self, current: Optional[IConfig]) -> int:
        """Version to stamp on the next saved config."""
        if current is None:
            return 0
        return current.get_version() + 1

    def is_save_noop(self, original: Optional[IConfig], updated: IConfig) -> bool:
        """
        Check whether a save would change nothing.

        Both sides must already have their version zeroed so that only the
        remaining content is compared.

        Args:
            original: Version-zeroed copy of the in-memory config, or None
            updated: Version-zeroed config about to be saved

        Returns:
            True if the save can be skipped
        """
        if original is None:
            return False
        return original.equals(updated)
