from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

from app.core.ids import new_id
from app.core.time import utcnow


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: str = Field(default_factory=new_id, primary_key=True)
    title: str
    description: str
    # Member display names, not foreign keys.
    assignees: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    status: str = Field(index=True)  # pending | in-progress | completed
    category: str = Field(index=True)  # problem-recognition | solution-development
    progress: int = Field(default=0)
    due_date: str
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
