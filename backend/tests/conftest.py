# ruff: noqa

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.memory import MemoryStore
from app.db.session import create_db_engine, init_db
from app.db.sql import SqlStore
from app.db.store import EntityStore
from app.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        upload_dir=str(tmp_path / "uploads"),
        seed_default_members=False,
        log_level="WARNING",
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture(params=["memory", "sql"])
def any_store(request: pytest.FixtureRequest, tmp_path: Path) -> Iterator[EntityStore]:
    if request.param == "memory":
        yield MemoryStore()
        return
    engine = create_db_engine(f"sqlite:///{tmp_path / 'store.db'}")
    init_db(engine)
    sql_store = SqlStore(engine)
    yield sql_store
    sql_store.close()


@pytest.fixture
def app(settings: Settings, store: MemoryStore) -> FastAPI:
    return create_app(settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
