"""On-disk cache of Service Registry files."""

from __future__ import annotations

import stat
import time
from pathlib import Path

from rdapclient.bootstrap.cache.registry_cache import DEFAULT_TIMEOUT, FileState

DEFAULT_CACHE_DIR_NAME = ".openrdap"


class DiskCache:
    """Caches Service Registry files in a directory, using file mtimes for expiry.

    The default directory is ``~/.openrdap``; it is created as needed.
    """

    def __init__(
        self, directory: str | Path | None = None, timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        if directory is None:
            directory = Path.home() / DEFAULT_CACHE_DIR_NAME
        self.directory = Path(directory)
        self.timeout = timeout
        self._last_loaded: dict[str, int] = {}

    def init_dir(self) -> bool:
        """Create the cache directory if missing; return True if it was created."""
        try:
            info = self.directory.stat()
        except FileNotFoundError:
            self.directory.mkdir(mode=0o775)
            return True
        if not stat.S_ISDIR(info.st_mode):
            raise NotADirectoryError(f"Cache dir is not a dir: {self.directory}")
        return False

    def set_timeout(self, timeout: float) -> None:
        """Set how many seconds a file stays fresh."""
        self.timeout = timeout

    def save(self, filename: str, data: bytes) -> None:
        """Write *data* to *filename* in the cache directory."""
        self.init_dir()
        self._path(filename).write_bytes(bytes(data))
        try:
            mtime = self._mod_time(filename)
        except OSError as exc:
            raise OSError(f"File {filename} failed to save correctly: {exc}") from exc
        self._last_loaded[filename] = mtime

    def load(self, filename: str) -> bytes:
        """Return the contents of *filename*, even if it has expired."""
        try:
            mtime = self._mod_time(filename)
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Unable to load {filename}: {exc}") from exc
        data = self._path(filename).read_bytes()
        self._last_loaded[filename] = mtime
        return data

    def state(self, filename: str) -> FileState:
        """Return ABSENT, GOOD, SHOULD_RELOAD or EXPIRED for *filename*."""
        expiry = time.time_ns() - int(self.timeout * 1_000_000_000)
        try:
            mtime = self._mod_time(filename)
        except OSError:
            return FileState.ABSENT
        if mtime <= expiry:
            return FileState.EXPIRED
        last_loaded = self._last_loaded.get(filename)
        if last_loaded is not None and mtime <= last_loaded:
            return FileState.GOOD
        return FileState.SHOULD_RELOAD

    def _mod_time(self, filename: str) -> int:
        return self._path(filename).stat().st_mtime_ns

    def _path(self, filename: str) -> Path:
        return self.directory / filename