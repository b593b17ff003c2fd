# ruff: noqa

import io

import pytest

from app.services.blobs import BlobStorage, BlobTooLargeError


def test_write_then_read_back(tmp_path):
    blobs = BlobStorage(tmp_path / "blobs", max_bytes=1024)
    stored = blobs.write(io.BytesIO(b"hello"))
    assert stored.size == 5
    path = blobs.existing_path(stored.key)
    assert path is not None
    assert path.read_bytes() == b"hello"


def test_keys_are_fresh_per_write(tmp_path):
    blobs = BlobStorage(tmp_path, max_bytes=1024)
    assert blobs.write(io.BytesIO(b"a")).key != blobs.write(io.BytesIO(b"a")).key


def test_oversized_write_leaves_nothing_behind(tmp_path):
    blobs = BlobStorage(tmp_path, max_bytes=4)
    with pytest.raises(BlobTooLargeError):
        blobs.write(io.BytesIO(b"12345"))
    assert list(tmp_path.iterdir()) == []


def test_delete_is_idempotent(tmp_path):
    blobs = BlobStorage(tmp_path, max_bytes=1024)
    stored = blobs.write(io.BytesIO(b"x"))
    assert blobs.delete(stored.key) is True
    assert blobs.delete(stored.key) is False
    assert blobs.existing_path(stored.key) is None


@pytest.mark.parametrize("key", ["../etc/passwd", "report.pdf", "", "A" * 32])
def test_keys_outside_generated_format_are_rejected(tmp_path, key):
    blobs = BlobStorage(tmp_path, max_bytes=1024)
    with pytest.raises(ValueError):
        blobs.path_for(key)
