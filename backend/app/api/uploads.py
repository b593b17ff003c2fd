"""Upload metadata endpoints plus the byte handling around them.

Bytes are written before the metadata record exists and removed only after
the record is gone, so a failure never leaves a record without its file.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import FileResponse
from pydantic import ValidationError

from app.api.deps import BLOBS_DEP, STORE_DEP, store_errors
from app.core.logging import get_logger
from app.db.store import EntityStore
from app.schemas.common import OkResponse
from app.schemas.uploads import ALLOWED_FILE_TYPES, UploadCreate, UploadRead
from app.services.blobs import BlobStorage, BlobTooLargeError

router = APIRouter(prefix="/uploads", tags=["uploads"])
logger = get_logger(__name__)

FILE_FIELD = File(default=None)
MEMBER_NAME_FIELD = Form(default=None)
INVALID_TYPE_DETAIL = "Invalid file type. Only PDF, DOC, and DOCX files are allowed."


def get_upload_or_404(upload_id: str, store: EntityStore = STORE_DEP) -> UploadRead:
    with store_errors("fetch upload"):
        upload = store.get_upload(upload_id)
    if upload is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Upload not found")
    return upload


def _discard_blob(blobs: BlobStorage, key: str) -> None:
    try:
        blobs.delete(key)
    except (OSError, ValueError):
        logger.exception("uploads.blob_cleanup_failed key=%s", key)


@router.get("", response_model=list[UploadRead])
def list_uploads(store: EntityStore = STORE_DEP) -> list[UploadRead]:
    with store_errors("fetch uploads"):
        return store.list_uploads()


@router.post("", response_model=UploadRead, status_code=status.HTTP_201_CREATED)
def create_upload(
    file: UploadFile | None = FILE_FIELD,
    member_name: str | None = MEMBER_NAME_FIELD,
    store: EntityStore = STORE_DEP,
    blobs: BlobStorage = BLOBS_DEP,
) -> UploadRead:
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    if not member_name or not member_name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Member name is required")
    if file.content_type not in ALLOWED_FILE_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_TYPE_DETAIL)

    try:
        blob = blobs.write(file.file)
    except BlobTooLargeError as exc:
        limit_mb = exc.limit // (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File too large. Maximum size is {limit_mb}MB.",
        ) from exc
    except OSError as exc:
        logger.exception("uploads.blob_write_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload file",
        ) from exc

    try:
        payload = UploadCreate(
            filename=blob.key,
            original_name=file.filename,
            member_name=member_name,
            file_size=blob.size,
            file_type=file.content_type,
        )
    except ValidationError as exc:
        _discard_blob(blobs, blob.key)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc

    try:
        with store_errors("upload file"):
            upload = store.create_upload(payload)
    except HTTPException:
        _discard_blob(blobs, blob.key)
        raise
    logger.info("uploads.created upload_id=%s size=%s", upload.id, upload.file_size)
    return upload


@router.get("/{upload_id}", response_model=UploadRead)
def get_upload(upload: UploadRead = Depends(get_upload_or_404)) -> UploadRead:
    return upload


@router.get("/{upload_id}/download")
def download_upload(
    upload: UploadRead = Depends(get_upload_or_404),
    blobs: BlobStorage = BLOBS_DEP,
) -> FileResponse:
    try:
        path = blobs.existing_path(upload.filename)
    except ValueError:
        # A stored filename that is not a blob key cannot name any bytes.
        path = None
    if path is None:
        logger.warning("uploads.download.blob_missing upload_id=%s", upload.id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found on disk")
    return FileResponse(path, media_type=upload.file_type, filename=upload.original_name)


@router.delete("/{upload_id}", response_model=OkResponse)
def delete_upload(
    upload: UploadRead = Depends(get_upload_or_404),
    store: EntityStore = STORE_DEP,
    blobs: BlobStorage = BLOBS_DEP,
) -> OkResponse:
    with store_errors("delete file"):
        deleted = store.delete_upload(upload.id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Upload not found")
    # Metadata is gone; a blob left behind here is an orphan, not a broken record.
    _discard_blob(blobs, upload.filename)
    logger.info("uploads.deleted upload_id=%s", upload.id)
    return OkResponse(message="File deleted successfully")
