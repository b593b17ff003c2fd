from __future__ import annotations

from app.core.config import Settings
from app.core.logging import get_logger
from app.db.memory import MemoryStore
from app.db.session import create_db_engine, init_db
from app.db.sql import SqlStore
from app.db.store import EntityStore

logger = get_logger(__name__)


def build_store(settings: Settings) -> EntityStore:
    if settings.storage_backend == "sql":
        engine = create_db_engine(settings.database_url)
        if settings.db_auto_create:
            init_db(engine)
        logger.info("store.backend backend=sql url=%s", engine.url.render_as_string(hide_password=True))
        return SqlStore(engine)
    logger.info("store.backend backend=memory")
    return MemoryStore()
