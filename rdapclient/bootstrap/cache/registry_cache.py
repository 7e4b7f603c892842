"""Cache states and the interface shared by Service Registry caches."""

from __future__ import annotations

import enum
from typing import Protocol, runtime_checkable

DEFAULT_TIMEOUT = 24 * 60 * 60.0
"""Default number of seconds a cached file stays fresh."""


class FileState(enum.Enum):
    """The state of one file in a Service Registry cache."""

    ABSENT = enum.auto()
    """The file is not in the cache."""

    GOOD = enum.auto()
    """The file is cached and its latest version has been loaded or saved."""

    SHOULD_RELOAD = enum.auto()
    """The file is cached and a newer version is available to load."""

    EXPIRED = enum.auto()
    """The file is cached but has expired; it can still be loaded."""

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    FileState.ABSENT: "not cached",
    FileState.GOOD: "good",
    FileState.SHOULD_RELOAD: "good",
    FileState.EXPIRED: "expired",
}


@runtime_checkable
class RegistryCache(Protocol):
    """A store of Service Registry files, keyed by filename."""

    def load(self, filename: str) -> bytes:
        """Return the contents of *filename*, even if it has expired."""

    def save(self, filename: str, data: bytes) -> None:
        """Store *data* as *filename*."""

    def state(self, filename: str) -> FileState:
        """Return the cache state of *filename*."""

    def set_timeout(self, timeout: float) -> None:
        """Set how many seconds a file stays fresh."""