"""In-memory cache of Service Registry files."""

from __future__ import annotations

import time

from rdapclient.bootstrap.cache.registry_cache import DEFAULT_TIMEOUT, FileState


class MemoryCache:
    """Caches Service Registry files in memory."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._data: dict[str, bytes] = {}
        self._saved_at: dict[str, float] = {}

    def set_timeout(self, timeout: float) -> None:
        """Set how many seconds a file stays fresh."""
        self.timeout = timeout

    def save(self, filename: str, data: bytes) -> None:
        """Store a copy of *data* as *filename*."""
        self._data[filename] = bytes(data)
        self._saved_at[filename] = time.monotonic()

    def load(self, filename: str) -> bytes:
        """Return the contents of *filename*, even if it has expired."""
        try:
            return self._data[filename]
        except KeyError:
            raise FileNotFoundError(f"File {filename} not in cache") from None

    def state(self, filename: str) -> FileState:
        """Return ABSENT, GOOD or EXPIRED for *filename*."""
        saved_at = self._saved_at.get(filename)
        if saved_at is None:
            return FileState.ABSENT
        if saved_at + self.timeout < time.monotonic():
            return FileState.EXPIRED
        return FileState.GOOD