from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, model_validator
from sqlmodel import Field, SQLModel

from app.schemas.common import MemberName, PatchModel

MemberColor = Literal["blue", "green", "purple", "orange", "red", "teal"]


class TeamMemberCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: MemberName
    role: str = ""
    # Defaults to the upper-cased first letter of the name.
    avatar: str | None = Field(default=None, min_length=1, max_length=4)
    color: MemberColor = "blue"

    @model_validator(mode="after")
    def _default_avatar(self) -> "TeamMemberCreate":
        if self.avatar is None:
            self.avatar = self.name[:1].upper()
        return self


class TeamMemberUpdate(PatchModel):
    name: MemberName | None = None
    role: str | None = None
    avatar: str | None = Field(default=None, min_length=1, max_length=4)
    color: MemberColor | None = None


class TeamMemberRoleUpdate(PatchModel):
    """The only member patch accepted over HTTP."""

    role: str | None = None


class TeamMemberRead(SQLModel):
    id: str
    name: str
    role: str
    avatar: str
    color: str
