from __future__ import annotations

from sqlmodel import Field, SQLModel

from app.core.ids import new_id


class TeamMember(SQLModel, table=True):
    __tablename__ = "team_members"

    id: str = Field(default_factory=new_id, primary_key=True)
    # Not unique: two members may share a display name.
    name: str = Field(index=True)
    role: str = Field(default="")
    avatar: str
    color: str
