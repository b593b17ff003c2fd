"""Read-side statistics derived from the current tasks and uploads.

Everything here is recomputed on each request; nothing is cached.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from app.schemas.dashboard import (
    ActivityItem,
    CategoryProgress,
    DashboardSummary,
    MemberStats,
    ProblemStatementStatus,
)
from app.schemas.tasks import TASK_CATEGORIES, TaskRead
from app.schemas.team_members import TeamMemberRead
from app.schemas.uploads import UploadRead

DEFAULT_ACTIVITY_LIMIT = 10


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def problem_statement_status(member_name: str, uploads: Iterable[UploadRead]) -> ProblemStatementStatus:
    if any(upload.member_name == member_name for upload in uploads):
        return "submitted"
    return "pending"


def member_stats(
    member: TeamMemberRead,
    tasks: Sequence[TaskRead],
    uploads: Sequence[UploadRead],
) -> MemberStats:
    # Matching is by exact display name; members sharing a name share stats.
    assigned = [task for task in tasks if member.name in task.assignees]
    return MemberStats(
        member_id=member.id,
        name=member.name,
        tasks_assigned=len(assigned),
        tasks_completed=sum(1 for task in assigned if task.status == "completed"),
        problem_statement_status=problem_statement_status(member.name, uploads),
    )


def category_progress(category: str, tasks: Sequence[TaskRead]) -> CategoryProgress:
    matching = [task for task in tasks if task.category == category]
    progress = 0
    if matching:
        progress = _round_half_up(sum(task.progress for task in matching) / len(matching))
    return CategoryProgress(category=category, task_count=len(matching), progress=progress)


def build_dashboard_summary(
    members: Sequence[TeamMemberRead],
    tasks: Sequence[TaskRead],
    uploads: Sequence[UploadRead],
) -> DashboardSummary:
    return DashboardSummary(
        member_count=len(members),
        task_count=len(tasks),
        completed_task_count=sum(1 for task in tasks if task.status == "completed"),
        submitted_member_count=len({upload.member_name for upload in uploads}),
        categories=[category_progress(category, tasks) for category in TASK_CATEGORIES],
        members=[member_stats(member, tasks, uploads) for member in members],
    )


def build_activity_feed(
    tasks: Sequence[TaskRead],
    uploads: Sequence[UploadRead],
    *,
    limit: int = DEFAULT_ACTIVITY_LIMIT,
) -> list[ActivityItem]:
    items: list[ActivityItem] = []
    for task in tasks:
        items.append(
            ActivityItem(
                id=f"task-created-{task.id}",
                type="task_created",
                title="New Task Created",
                description=f'"{task.title}" assigned to {", ".join(task.assignees)}',
                timestamp=task.created_at,
            )
        )
        if task.status == "completed":
            # No completion time is recorded, so the creation time stands in.
            items.append(
                ActivityItem(
                    id=f"task-completed-{task.id}",
                    type="task_completed",
                    title="Task Completed",
                    description=f'"{task.title}" has been completed',
                    timestamp=task.created_at,
                )
            )
    for upload in uploads:
        items.append(
            ActivityItem(
                id=f"upload-{upload.id}",
                type="file_uploaded",
                title="File Uploaded",
                description=f'{upload.member_name} uploaded "{upload.original_name}"',
                timestamp=upload.uploaded_at,
            )
        )
    items.sort(key=lambda item: item.timestamp, reverse=True)
    return items[: max(0, limit)]
