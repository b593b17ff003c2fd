"""Flat on-disk storage for uploaded file bytes.

Blobs are keyed by a server-generated name; client-supplied filenames are
never used as paths.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Final
from uuid import uuid4

from app.core.logging import get_logger

_CHUNK_SIZE: Final[int] = 1024 * 1024
BLOB_KEY_PATTERN: Final[str] = r"^[0-9a-f]{32}$"
_KEY_RE: Final[re.Pattern[str]] = re.compile(BLOB_KEY_PATTERN)

logger = get_logger(__name__)


class BlobTooLargeError(ValueError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"File exceeds the {limit} byte limit")
        self.limit = limit


@dataclass(frozen=True, slots=True)
class StoredBlob:
    key: str
    size: int


class BlobStorage:
    def __init__(self, root: Path | str, *, max_bytes: int) -> None:
        self.root = Path(root)
        self.max_bytes = max_bytes

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        if not _KEY_RE.fullmatch(key):
            raise ValueError(f"Invalid blob key: {key!r}")
        return self.root / key

    def write(self, source: BinaryIO) -> StoredBlob:
        """Stream `source` to a fresh key, enforcing the size limit while copying."""
        self.ensure_root()
        key = uuid4().hex
        final_path = self.path_for(key)
        partial_path = self.root / f".{key}.part"
        size = 0
        try:
            with partial_path.open("wb") as out:
                while chunk := source.read(_CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise BlobTooLargeError(self.max_bytes)
                    out.write(chunk)
            os.replace(partial_path, final_path)
        except BaseException:
            partial_path.unlink(missing_ok=True)
            raise
        logger.debug("blobs.written key=%s size=%s", key, size)
        return StoredBlob(key=key, size=size)

    def existing_path(self, key: str) -> Path | None:
        path = self.path_for(key)
        return path if path.is_file() else None

    def delete(self, key: str) -> bool:
        """Remove a blob. A blob that is already gone is not an error."""
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.info("blobs.delete.missing key=%s", key)
            return False
        return True
