from __future__ import annotations

from fastapi import APIRouter, Query

from app.api.deps import STORE_DEP, store_errors
from app.db.store import EntityStore
from app.schemas.dashboard import ActivityItem, DashboardSummary
from app.services.dashboard import DEFAULT_ACTIVITY_LIMIT, build_activity_feed, build_dashboard_summary

router = APIRouter(prefix="/dashboard", tags=["dashboard"])
ACTIVITY_LIMIT_QUERY = Query(default=DEFAULT_ACTIVITY_LIMIT, ge=1, le=50)


@router.get("", response_model=DashboardSummary)
def get_dashboard(store: EntityStore = STORE_DEP) -> DashboardSummary:
    with store_errors("fetch dashboard"):
        members = store.list_team_members()
        tasks = store.list_tasks()
        uploads = store.list_uploads()
    return build_dashboard_summary(members, tasks, uploads)


@router.get("/activity", response_model=list[ActivityItem])
def get_activity(
    limit: int = ACTIVITY_LIMIT_QUERY,
    store: EntityStore = STORE_DEP,
) -> list[ActivityItem]:
    with store_errors("fetch activity"):
        tasks = store.list_tasks()
        uploads = store.list_uploads()
    return build_activity_feed(tasks, uploads, limit=limit)
