"""SQLModel-backed store for any SQLAlchemy database URL.

Each operation runs in its own short session, so single-row writes inherit
the database's atomicity. Concurrent patches to the same record are
last-write-wins.
"""

from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlmodel import col

from app.core.logging import get_logger
from app.db import crud
from app.db.session import session_scope
from app.db.store import EntityStore, NotFoundError, mutable_changes
from app.models.tasks import Task
from app.models.team_members import TeamMember
from app.models.uploads import Upload
from app.schemas.tasks import TaskCreate, TaskRead, TaskUpdate
from app.schemas.team_members import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate
from app.schemas.uploads import UploadCreate, UploadRead

logger = get_logger(__name__)


class SqlStore(EntityStore):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_team_members(self) -> list[TeamMemberRead]:
        with session_scope(self._engine) as session:
            rows = crud.list_all(session, TeamMember, col(TeamMember.name).asc(), col(TeamMember.id).asc())
            return [TeamMemberRead.model_validate(row) for row in rows]

    def get_team_member(self, member_id: str) -> TeamMemberRead | None:
        with session_scope(self._engine) as session:
            row = crud.get_by_id(session, TeamMember, member_id)
            return TeamMemberRead.model_validate(row) if row is not None else None

    def create_team_member(self, payload: TeamMemberCreate) -> TeamMemberRead:
        with session_scope(self._engine) as session:
            row = crud.create(session, TeamMember, **payload.model_dump())
            return TeamMemberRead.model_validate(row)

    def update_team_member(self, member_id: str, patch: TeamMemberUpdate) -> TeamMemberRead:
        with session_scope(self._engine) as session:
            row = crud.get_by_id(session, TeamMember, member_id)
            if row is None:
                raise NotFoundError("team_member", member_id)
            for key, value in mutable_changes("team_member", patch.changes()).items():
                setattr(row, key, value)
            return TeamMemberRead.model_validate(crud.save(session, row))

    def list_tasks(self) -> list[TaskRead]:
        with session_scope(self._engine) as session:
            rows = crud.list_all(session, Task, col(Task.created_at).asc(), col(Task.id).asc())
            return [TaskRead.model_validate(row) for row in rows]

    def get_task(self, task_id: str) -> TaskRead | None:
        with session_scope(self._engine) as session:
            row = crud.get_by_id(session, Task, task_id)
            return TaskRead.model_validate(row) if row is not None else None

    def create_task(self, payload: TaskCreate) -> TaskRead:
        with session_scope(self._engine) as session:
            row = crud.create(session, Task, **payload.model_dump())
            return TaskRead.model_validate(row)

    def update_task(self, task_id: str, patch: TaskUpdate) -> TaskRead:
        with session_scope(self._engine) as session:
            row = crud.get_by_id(session, Task, task_id)
            if row is None:
                raise NotFoundError("task", task_id)
            for key, value in mutable_changes("task", patch.changes()).items():
                setattr(row, key, value)
            return TaskRead.model_validate(crud.save(session, row))

    def delete_task(self, task_id: str) -> bool:
        with session_scope(self._engine) as session:
            return crud.delete_by_id(session, Task, task_id)

    def list_uploads(self) -> list[UploadRead]:
        with session_scope(self._engine) as session:
            rows = crud.list_all(session, Upload, col(Upload.uploaded_at).asc(), col(Upload.id).asc())
            return [UploadRead.model_validate(row) for row in rows]

    def get_upload(self, upload_id: str) -> UploadRead | None:
        with session_scope(self._engine) as session:
            row = crud.get_by_id(session, Upload, upload_id)
            return UploadRead.model_validate(row) if row is not None else None

    def create_upload(self, payload: UploadCreate) -> UploadRead:
        with session_scope(self._engine) as session:
            row = crud.create(session, Upload, **payload.model_dump())
            return UploadRead.model_validate(row)

    def delete_upload(self, upload_id: str) -> bool:
        with session_scope(self._engine) as session:
            return crud.delete_by_id(session, Upload, upload_id)

    def close(self) -> None:
        logger.debug("store.sql.dispose url=%s", self._engine.url.render_as_string(hide_password=True))
        self._engine.dispose()
