"""Local filesystem backing store: one JSON document per collection.

Storage layout:
    <data_dir>/<collection-name>.json   current collection bytes
    <data_dir>/.<collection-name>.<random>.tmp   in-flight write, renamed over the above
"""

import logging
import os
import re
import tempfile
from pathlib import Path

from app.application.interfaces import BackingStore
from app.domain.exceptions import CollectionNotStoredError, PersistenceError

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class LocalFileBackingStore(BackingStore):
    """Infrastructure adapter storing collection bytes as files in one directory."""

    def __init__(self, data_dir: str):
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        """Return the file holding collection ``name``."""
        if not _NAME_PATTERN.fullmatch(name):
            raise ValueError(f"Invalid collection name: {name!r}")
        return self._data_dir / f"{name}.json"

    def read(self, name: str) -> bytes:
        path = self.path_for(name)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise CollectionNotStoredError(name) from exc
        except OSError as exc:
            raise PersistenceError(f"could not read {path}: {exc}") from exc

    def write(self, name: str, data: bytes) -> None:
        """Write ``data`` to a sibling temp file, fsync it, then rename it into place.

        ``os.replace`` within one directory is atomic on POSIX and Windows,
        so readers only ever see a complete file. On POSIX the directory is
        fsynced afterwards so the rename itself survives a crash.
        """
        path = self.path_for(name)
        tmp_path: str | None = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self._data_dir, prefix=f".{name}.", suffix=".tmp"
            )
            try:
                tmp = os.fdopen(fd, "wb")
            except BaseException:
                os.close(fd)
                raise
            with tmp:
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, path)
            tmp_path = None
            _fsync_directory(self._data_dir)
        except OSError as exc:
            raise PersistenceError(f"could not write {path}: {exc}") from exc
        finally:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)

        logger.debug("Stored collection file: %s (%d bytes)", path, len(data))


def _fsync_directory(directory: Path) -> None:
    if os.name != "posix":
        return
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
