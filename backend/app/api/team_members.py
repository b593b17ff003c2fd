from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.api.deps import STORE_DEP, store_errors
from app.core.logging import get_logger
from app.db.store import EntityStore
from app.schemas.team_members import (
    TeamMemberCreate,
    TeamMemberRead,
    TeamMemberRoleUpdate,
    TeamMemberUpdate,
)

router = APIRouter(prefix="/team-members", tags=["team-members"])
logger = get_logger(__name__)


@router.get("", response_model=list[TeamMemberRead])
def list_team_members(store: EntityStore = STORE_DEP) -> list[TeamMemberRead]:
    with store_errors("fetch team members"):
        return store.list_team_members()


@router.post("", response_model=TeamMemberRead, status_code=status.HTTP_201_CREATED)
def create_team_member(payload: TeamMemberCreate, store: EntityStore = STORE_DEP) -> TeamMemberRead:
    with store_errors("create team member"):
        member = store.create_team_member(payload)
    logger.info("team_members.created member_id=%s", member.id)
    return member


@router.get("/{member_id}", response_model=TeamMemberRead)
def get_team_member(member_id: str, store: EntityStore = STORE_DEP) -> TeamMemberRead:
    with store_errors("fetch team member"):
        member = store.get_team_member(member_id)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found")
    return member


@router.patch("/{member_id}", response_model=TeamMemberRead)
def update_team_member(
    member_id: str,
    payload: TeamMemberRoleUpdate,
    store: EntityStore = STORE_DEP,
) -> TeamMemberRead:
    # Only the role is editable over HTTP; the store itself accepts more.
    patch = TeamMemberUpdate(**payload.changes())
    with store_errors("update team member"):
        member = store.update_team_member(member_id, patch)
    logger.info("team_members.updated member_id=%s fields=%s", member_id, sorted(patch.changes()))
    return member
