from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, StringConstraints, model_validator
from sqlmodel import SQLModel

# Member names are matched by exact string across members, tasks and uploads,
# so every one of them is stored stripped.
MemberName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class OkResponse(SQLModel):
    ok: bool = True
    message: str | None = None


class PatchModel(SQLModel):
    """Base for partial updates: unknown keys are rejected, and so are explicit nulls."""

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> "PatchModel":
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields may not be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)
