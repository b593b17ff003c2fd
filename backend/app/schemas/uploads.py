from __future__ import annotations

from datetime import datetime
from typing import Annotated, Final, Literal

from pydantic import ConfigDict, StringConstraints, field_validator
from sqlmodel import Field, SQLModel

from app.core.config import MAX_UPLOAD_BYTES
from app.core.time import as_utc
from app.schemas.common import MemberName
from app.services.blobs import BLOB_KEY_PATTERN

UploadFileType = Literal[
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
]

ALLOWED_FILE_TYPES: Final[frozenset[str]] = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)


class UploadCreate(SQLModel):
    """Metadata for bytes that are already stored under `filename`."""

    model_config = ConfigDict(extra="forbid")

    # Only keys produced by BlobStorage are accepted.
    filename: Annotated[str, StringConstraints(pattern=BLOB_KEY_PATTERN)]
    original_name: str = Field(min_length=1)
    member_name: MemberName
    file_size: int = Field(gt=0, le=MAX_UPLOAD_BYTES)
    file_type: UploadFileType


class UploadRead(SQLModel):
    id: str
    filename: str
    original_name: str
    member_name: str
    file_size: int
    file_type: str
    uploaded_at: datetime

    @field_validator("uploaded_at")
    @classmethod
    def _uploaded_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
