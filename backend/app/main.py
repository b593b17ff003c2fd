"""FastAPI application factory for the team dashboard backend."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import dashboard, tasks, team_members, uploads
from app.core.config import Settings
from app.core.config import settings as default_settings
from app.core.logging import configure_logging, get_logger
from app.db.backends import build_store
from app.db.store import EntityStore, NotFoundError
from app.services.blobs import BlobStorage
from app.services.seed import ensure_default_members

logger = get_logger(__name__)

_NOT_FOUND_DETAILS = {
    "team_member": "Team member not found",
    "task": "Task not found",
    "upload": "Upload not found",
}


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": _NOT_FOUND_DETAILS.get(exc.kind, "Not found")},
    )


def create_app(
    settings: Settings | None = None,
    *,
    store: EntityStore | None = None,
    blobs: BlobStorage | None = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    store = store or build_store(settings)
    blobs = blobs or BlobStorage(settings.upload_dir, max_bytes=settings.max_upload_bytes)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        blobs.ensure_root()
        if settings.seed_default_members:
            ensure_default_members(store)
        logger.info("app.started backend=%s upload_dir=%s", settings.storage_backend, blobs.root)
        try:
            yield
        finally:
            store.close()
            logger.info("app.stopped")

    app = FastAPI(title="Team Dashboard API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.blobs = blobs

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(NotFoundError, _not_found_handler)

    api_router = APIRouter(prefix="/api")
    api_router.include_router(team_members.router)
    api_router.include_router(tasks.router)
    api_router.include_router(uploads.router)
    api_router.include_router(dashboard.router)
    app.include_router(api_router)

    @app.get("/healthz", tags=["health"])
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app
