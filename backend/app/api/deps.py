from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Depends, HTTPException, Request, status

from app.core.logging import get_logger
from app.db.store import EntityStore, NotFoundError
from app.services.blobs import BlobStorage

logger = get_logger(__name__)


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_blob_storage(request: Request) -> BlobStorage:
    return request.app.state.blobs


STORE_DEP = Depends(get_store)
BLOBS_DEP = Depends(get_blob_storage)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Turn unexpected backend failures into a generic 500 for `action`.

    HTTP errors and NotFoundError pass through untouched.
    """
    try:
        yield
    except (HTTPException, NotFoundError):
        raise
    except Exception as exc:
        logger.exception("store.failed action=%s", action.replace(" ", "_"))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}",
        ) from exc
