"""Storage contract for team members, tasks and upload metadata.

Every backend hands out value snapshots: mutating a returned record never
changes what the store holds. The only error a backend raises on its own
is :class:`NotFoundError`, for updates against an unknown id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.schemas.tasks import TaskCreate, TaskRead, TaskUpdate
from app.schemas.team_members import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate
from app.schemas.uploads import UploadCreate, UploadRead

# Fields a patch can never overwrite, whatever the patch type allows.
IMMUTABLE_FIELDS: dict[str, frozenset[str]] = {
    "team_member": frozenset({"id"}),
    "task": frozenset({"id", "created_at"}),
    "upload": frozenset({"id", "filename", "uploaded_at"}),
}


class NotFoundError(LookupError):
    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


def mutable_changes(kind: str, changes: dict[str, object]) -> dict[str, object]:
    blocked = IMMUTABLE_FIELDS[kind]
    return {key: value for key, value in changes.items() if key not in blocked}


class EntityStore(ABC):
    """Backend-agnostic bookkeeping for the three entity kinds.

    Members have no delete and uploads have no update.
    """

    # Team members

    @abstractmethod
    def list_team_members(self) -> list[TeamMemberRead]:
        raise NotImplementedError

    @abstractmethod
    def get_team_member(self, member_id: str) -> TeamMemberRead | None:
        raise NotImplementedError

    @abstractmethod
    def create_team_member(self, payload: TeamMemberCreate) -> TeamMemberRead:
        raise NotImplementedError

    @abstractmethod
    def update_team_member(self, member_id: str, patch: TeamMemberUpdate) -> TeamMemberRead:
        raise NotImplementedError

    # Tasks

    @abstractmethod
    def list_tasks(self) -> list[TaskRead]:
        raise NotImplementedError

    @abstractmethod
    def get_task(self, task_id: str) -> TaskRead | None:
        raise NotImplementedError

    @abstractmethod
    def create_task(self, payload: TaskCreate) -> TaskRead:
        raise NotImplementedError

    @abstractmethod
    def update_task(self, task_id: str, patch: TaskUpdate) -> TaskRead:
        raise NotImplementedError

    @abstractmethod
    def delete_task(self, task_id: str) -> bool:
        raise NotImplementedError

    # Uploads

    @abstractmethod
    def list_uploads(self) -> list[UploadRead]:
        raise NotImplementedError

    @abstractmethod
    def get_upload(self, upload_id: str) -> UploadRead | None:
        raise NotImplementedError

    @abstractmethod
    def create_upload(self, payload: UploadCreate) -> UploadRead:
        raise NotImplementedError

    @abstractmethod
    def delete_upload(self, upload_id: str) -> bool:
        raise NotImplementedError

    def close(self) -> None:
        """Release backend resources. Default: nothing to release."""
        return None
