from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, StrictInt, field_validator
from sqlmodel import Field, SQLModel

from app.core.time import as_utc
from app.schemas.common import MemberName, PatchModel

TaskStatus = Literal["pending", "in-progress", "completed"]
TaskCategory = Literal["problem-recognition", "solution-development"]

TASK_STATUSES: tuple[TaskStatus, ...] = ("pending", "in-progress", "completed")
TASK_CATEGORIES: tuple[TaskCategory, ...] = ("problem-recognition", "solution-development")


class TaskCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    assignees: list[MemberName] = Field(min_length=1)
    status: TaskStatus
    category: TaskCategory
    progress: StrictInt = Field(default=0, ge=0, le=100)
    due_date: str = Field(min_length=1)


class TaskUpdate(PatchModel):
    # Status and progress are independent; neither implies the other.
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    assignees: list[MemberName] | None = Field(default=None, min_length=1)
    status: TaskStatus | None = None
    category: TaskCategory | None = None
    progress: StrictInt | None = Field(default=None, ge=0, le=100)
    due_date: str | None = Field(default=None, min_length=1)


class TaskRead(SQLModel):
    id: str
    title: str
    description: str
    assignees: list[str]
    status: TaskStatus
    category: TaskCategory
    progress: int
    due_date: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
