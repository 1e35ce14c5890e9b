"""
Tests for upload handling in AuroraSync Server

Tests file placement, authoritative sizes, timestamps, and batch failure
behaviour.
"""

import io
import sys
import json
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.api import FileMeta
from models.infrastructure import IncomingFile
from managers.metadata_manager import MetadataManager
from upload_receiver import ReceiveUploads
from file_storage import GetFilePath, InitializeStorage


@pytest.fixture
def manager(tmp_path):
    return MetadataManager(tmp_path / "meta" / "metadata.json")


@pytest.fixture
def backup_root(tmp_path):
    return InitializeStorage(tmp_path / "Received")


def incoming(data: bytes, **kwargs) -> IncomingFile:
    kwargs.setdefault("filename", "upload.bin")
    return IncomingFile(stream=io.BytesIO(data), **kwargs)


def test_file_written_under_relative_path(manager, backup_root):
    result = ReceiveUploads([incoming(b"hello", rel="a/b.txt", last_modified=1000, size=5)],
                            manager, backup_root)

    assert result.saved_count == 1
    assert result.saved == ["a/b.txt"]
    assert (backup_root / "a" / "b.txt").read_bytes() == b"hello"
    assert manager.Get("a/b.txt") == FileMeta(last_modified=1000, size=5)


def test_recorded_size_is_size_on_disk(manager, backup_root):
    """Test that an incorrect client size is ignored"""
    ReceiveUploads([incoming(b"0123456789", rel="x.bin", last_modified=1000, size=999)],
                   manager, backup_root)

    on_disk = (backup_root / "x.bin").stat().st_size
    assert on_disk == 10
    assert manager.Get("x.bin").size == on_disk


def test_device_path_used_when_rel_missing(manager, backup_root):
    result = ReceiveUploads(
        [incoming(b"jpg", path="/storage/emulated/0/DCIM/photo.jpg", last_modified=1)],
        manager, backup_root
    )

    assert result.saved == ["DCIM/photo.jpg"]
    assert (backup_root / "DCIM" / "photo.jpg").exists()


def test_uploaded_name_used_when_no_path(manager, backup_root):
    result = ReceiveUploads([incoming(b"data", filename="IMG_1.jpg", last_modified=1)],
                            manager, backup_root, token_factory=lambda: "token")

    assert result.saved == ["IMG_1.jpg"]


def test_token_used_when_nothing_else(manager, backup_root):
    result = ReceiveUploads([incoming(b"data", filename="", last_modified=1)],
                            manager, backup_root, token_factory=lambda: "token")

    assert result.saved == ["token"]
    assert (backup_root / "token").read_bytes() == b"data"


def test_missing_timestamp_uses_clock(manager, backup_root):
    """Test that a zero or negative client timestamp falls back to now"""
    ReceiveUploads(
        [
            incoming(b"a", rel="zero.txt", last_modified=0),
            incoming(b"b", rel="negative.txt", last_modified=-5),
        ],
        manager, backup_root, clock=lambda: 1234567890123
    )

    assert manager.Get("zero.txt").last_modified == 1234567890123
    assert manager.Get("negative.txt").last_modified == 1234567890123


def test_existing_file_overwritten(manager, backup_root):
    ReceiveUploads([incoming(b"long original content", rel="f.txt", last_modified=1)], manager, backup_root)
    ReceiveUploads([incoming(b"short", rel="f.txt", last_modified=2)], manager, backup_root)

    assert (backup_root / "f.txt").read_bytes() == b"short"
    assert manager.Get("f.txt") == FileMeta(last_modified=2, size=5)


def test_batch_saved_once(manager, backup_root, monkeypatch):
    """Test that the metadata document is written once per batch"""
    import managers.metadata_manager as metadata_manager_module

    calls = []
    original_save = metadata_manager_module.SaveMetadata

    def counting_save(path, index):
        calls.append(len(index))
        original_save(path, index)

    monkeypatch.setattr(metadata_manager_module, "SaveMetadata", counting_save)

    ReceiveUploads([incoming(b"1", rel=f"f{i}.txt", last_modified=1) for i in range(5)],
                   manager, backup_root)

    assert calls == [5]
    document = json.loads(manager.metadata_path.read_text(encoding="utf-8"))
    assert sorted(document) == [f"f{i}.txt" for i in range(5)]


def test_duplicate_rels_in_batch_both_processed(manager, backup_root):
    result = ReceiveUploads(
        [incoming(b"first", rel="dup.txt", last_modified=1), incoming(b"second!", rel="dup.txt", last_modified=2)],
        manager, backup_root
    )

    assert result.saved == ["dup.txt", "dup.txt"]
    assert (backup_root / "dup.txt").read_bytes() == b"second!"
    assert manager.Get("dup.txt") == FileMeta(last_modified=2, size=7)


def test_failure_aborts_batch_without_metadata(manager, backup_root):
    """Test that a failing file stops the batch and nothing reaches the index"""
    files = [
        incoming(b"ok", rel="good.txt", last_modified=1),
        incoming(b"bad", rel="../escape.txt", last_modified=1),
        incoming(b"never", rel="later.txt", last_modified=1),
    ]

    with pytest.raises(ValueError):
        ReceiveUploads(files, manager, backup_root)

    # Written before the failure, but not indexed
    assert (backup_root / "good.txt").exists()
    assert manager.Get("good.txt") is None
    assert not (backup_root / "later.txt").exists()
    assert not (backup_root.parent / "escape.txt").exists()
    assert not manager.metadata_path.exists()


def test_get_file_path_translates_separators(backup_root):
    path = GetFilePath("a/b/c.txt", backup_root)

    assert path == backup_root / "a" / "b" / "c.txt"

    with pytest.raises(ValueError):
        GetFilePath("a/../../outside.txt", backup_root)
