"""Process-local store backed by insertion-ordered dicts."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from sqlmodel import SQLModel

from app.core.ids import new_id
from app.core.time import utcnow
from app.db.store import EntityStore, NotFoundError, mutable_changes
from app.schemas.common import PatchModel
from app.schemas.tasks import TaskCreate, TaskRead, TaskUpdate
from app.schemas.team_members import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate
from app.schemas.uploads import UploadCreate, UploadRead

RecordT = TypeVar("RecordT", bound=SQLModel)


class _Collection(Generic[RecordT]):
    """One entity kind. A single lock serializes every read and write."""

    def __init__(self, kind: str, record_type: type[RecordT]) -> None:
        self.kind = kind
        self._record_type = record_type
        self._records: dict[str, RecordT] = {}
        self._lock = threading.Lock()

    def _snapshot(self, record: RecordT) -> RecordT:
        return record.model_copy(deep=True)

    def all(self) -> list[RecordT]:
        with self._lock:
            return [self._snapshot(record) for record in self._records.values()]

    def get(self, entity_id: str) -> RecordT | None:
        with self._lock:
            record = self._records.get(entity_id)
            return self._snapshot(record) if record is not None else None

    def add(self, build: Callable[[str], RecordT]) -> RecordT:
        with self._lock:
            entity_id = new_id()
            while entity_id in self._records:
                entity_id = new_id()
            record = build(entity_id)
            self._records[entity_id] = record
            return self._snapshot(record)

    def merge(self, entity_id: str, patch: PatchModel) -> RecordT:
        changes = mutable_changes(self.kind, patch.changes())
        with self._lock:
            current = self._records.get(entity_id)
            if current is None:
                raise NotFoundError(self.kind, entity_id)
            merged = self._record_type.model_validate({**current.model_dump(), **changes})
            self._records[entity_id] = merged
            return self._snapshot(merged)

    def remove(self, entity_id: str) -> bool:
        with self._lock:
            return self._records.pop(entity_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class MemoryStore(EntityStore):
    def __init__(self) -> None:
        self.team_members: _Collection[TeamMemberRead] = _Collection("team_member", TeamMemberRead)
        self.tasks: _Collection[TaskRead] = _Collection("task", TaskRead)
        self.uploads: _Collection[UploadRead] = _Collection("upload", UploadRead)

    def list_team_members(self) -> list[TeamMemberRead]:
        return self.team_members.all()

    def get_team_member(self, member_id: str) -> TeamMemberRead | None:
        return self.team_members.get(member_id)

    def create_team_member(self, payload: TeamMemberCreate) -> TeamMemberRead:
        data = payload.model_dump()
        return self.team_members.add(lambda entity_id: TeamMemberRead(id=entity_id, **data))

    def update_team_member(self, member_id: str, patch: TeamMemberUpdate) -> TeamMemberRead:
        return self.team_members.merge(member_id, patch)

    def list_tasks(self) -> list[TaskRead]:
        return self.tasks.all()

    def get_task(self, task_id: str) -> TaskRead | None:
        return self.tasks.get(task_id)

    def create_task(self, payload: TaskCreate) -> TaskRead:
        data = payload.model_dump()
        return self.tasks.add(
            lambda entity_id: TaskRead(id=entity_id, created_at=utcnow(), **data)
        )

    def update_task(self, task_id: str, patch: TaskUpdate) -> TaskRead:
        return self.tasks.merge(task_id, patch)

    def delete_task(self, task_id: str) -> bool:
        return self.tasks.remove(task_id)

    def list_uploads(self) -> list[UploadRead]:
        return self.uploads.all()

    def get_upload(self, upload_id: str) -> UploadRead | None:
        return self.uploads.get(upload_id)

    def create_upload(self, payload: UploadCreate) -> UploadRead:
        data = payload.model_dump()
        return self.uploads.add(
            lambda entity_id: UploadRead(id=entity_id, uploaded_at=utcnow(), **data)
        )

    def delete_upload(self, upload_id: str) -> bool:
        return self.uploads.remove(upload_id)
