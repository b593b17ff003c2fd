# ruff: noqa

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

from app.db.session import create_db_engine
from app.db.sql import SqlStore

from factories import make_task

BACKEND_DIR = Path(__file__).resolve().parents[1]


def _alembic_config(url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    config.set_main_option("sqlalchemy.url", url)
    return config


def test_upgrade_creates_tables_the_sql_store_can_use(tmp_path, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    config = _alembic_config(url)
    command.upgrade(config, "head")

    engine = create_db_engine(url)
    assert {"team_members", "tasks", "uploads"} <= set(inspect(engine).get_table_names())

    store = SqlStore(engine)
    task = store.create_task(make_task(assignees=["dev", "vivek"]))
    assert store.get_task(task.id) == task
    store.close()

    command.downgrade(config, "base")
    assert "tasks" not in set(inspect(create_db_engine(url)).get_table_names())
