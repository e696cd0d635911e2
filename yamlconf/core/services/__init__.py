"""Core services with no I/O of their own."""

from .arbiter import VersionArbiter, ReloadVerdict

__all__ = [
    "VersionArbiter",
    "ReloadVerdict",
]
