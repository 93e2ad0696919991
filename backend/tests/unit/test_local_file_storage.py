"""Unit tests for the local file backing store."""

import os
import tempfile

import pytest

from app.domain.exceptions import CollectionNotStoredError, PersistenceError
from app.infrastructure.storage.local_file_storage import LocalFileBackingStore


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def backing(data_dir) -> LocalFileBackingStore:
    return LocalFileBackingStore(data_dir=str(data_dir))


def test_creates_data_dir(data_dir, backing: LocalFileBackingStore):
    assert data_dir.is_dir()


def test_read_missing_collection_raises_not_stored(backing: LocalFileBackingStore):
    with pytest.raises(CollectionNotStoredError) as exc_info:
        backing.read("tasks")
    assert exc_info.value.name == "tasks"


def test_write_then_read(backing: LocalFileBackingStore):
    backing.write("tasks", b"[]\n")
    assert backing.read("tasks") == b"[]\n"
    assert backing.path_for("tasks").name == "tasks.json"


def test_overwrite_leaves_no_temp_files(data_dir, backing: LocalFileBackingStore):
    backing.write("certificates", b"[1]")
    backing.write("certificates", b"[1, 2]")

    assert backing.read("certificates") == b"[1, 2]"
    assert sorted(p.name for p in data_dir.iterdir()) == ["certificates.json"]


@pytest.mark.parametrize("name", ["../escape", "a/b", "", "tasks.json"])
def test_rejects_unsafe_collection_names(backing: LocalFileBackingStore, name: str):
    with pytest.raises(ValueError):
        backing.path_for(name)


def test_failed_write_keeps_old_content_and_cleans_up(
    data_dir, backing: LocalFileBackingStore, monkeypatch
):
    backing.write("tasks", b"[]")

    def failing_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(PersistenceError, match="No space left"):
        backing.write("tasks", b'[{"taskId": "T1"}]')

    monkeypatch.undo()
    assert backing.read("tasks") == b"[]"
    assert sorted(p.name for p in data_dir.iterdir()) == ["tasks.json"]


def test_unreadable_collection_raises_persistence_error(data_dir, backing: LocalFileBackingStore):
    (data_dir / "tasks.json").mkdir()
    with pytest.raises(PersistenceError):
        backing.read("tasks")


def test_temp_descriptor_is_closed_when_fdopen_fails(
    data_dir, backing: LocalFileBackingStore, monkeypatch
):
    opened: list[int] = []
    real_mkstemp = tempfile.mkstemp

    def recording_mkstemp(*args, **kwargs):
        fd, path = real_mkstemp(*args, **kwargs)
        opened.append(fd)
        return fd, path

    def failing_fdopen(fd, *args, **kwargs):
        raise OSError(24, "Too many open files")

    monkeypatch.setattr(tempfile, "mkstemp", recording_mkstemp)
    monkeypatch.setattr(os, "fdopen", failing_fdopen)

    with pytest.raises(PersistenceError, match="Too many open files"):
        backing.write("tasks", b"[]")

    monkeypatch.undo()
    assert len(opened) == 1
    with pytest.raises(OSError):
        os.fstat(opened[0])
    assert list(data_dir.iterdir()) == []


@pytest.mark.skipif(os.name != "posix", reason="directory fsync is POSIX-only")
def test_write_fsyncs_file_and_directory(backing: LocalFileBackingStore, monkeypatch):
    synced: list[int] = []
    real_fsync = os.fsync

    def counting_fsync(fd):
        synced.append(fd)
        real_fsync(fd)

    monkeypatch.setattr(os, "fsync", counting_fsync)

    backing.write("tasks", b"[]")

    assert len(synced) == 2
