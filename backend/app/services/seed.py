from __future__ import annotations

from typing import Final

from app.core.logging import get_logger
from app.db.store import EntityStore
from app.schemas.team_members import TeamMemberCreate

logger = get_logger(__name__)

DEFAULT_MEMBERS: Final[tuple[TeamMemberCreate, ...]] = (
    TeamMemberCreate(name="dev", role="Member", avatar="D", color="blue"),
    TeamMemberCreate(name="dhruvi", role="Member", avatar="D", color="green"),
    TeamMemberCreate(name="krisha", role="Member", avatar="K", color="purple"),
    TeamMemberCreate(name="keval", role="Member", avatar="K", color="orange"),
    TeamMemberCreate(name="param", role="Member", avatar="P", color="red"),
    TeamMemberCreate(name="vivek", role="Member", avatar="V", color="teal"),
)


def ensure_default_members(store: EntityStore) -> int:
    """Insert each default member whose name is not taken yet. Returns the number created."""
    existing = {member.name for member in store.list_team_members()}
    created = 0
    for member in DEFAULT_MEMBERS:
        if member.name in existing:
            continue
        store.create_team_member(member)
        existing.add(member.name)
        created += 1
    if created:
        logger.info("seed.default_members created=%s", created)
    return created
