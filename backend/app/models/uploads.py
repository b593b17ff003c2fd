from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from app.core.ids import new_id
from app.core.time import utcnow


class Upload(SQLModel, table=True):
    __tablename__ = "uploads"

    id: str = Field(default_factory=new_id, primary_key=True)
    # Blob key generated by the server; the original name is display-only.
    filename: str = Field(unique=True)
    original_name: str
    member_name: str = Field(index=True)
    file_size: int
    file_type: str
    uploaded_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
