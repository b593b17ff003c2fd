from __future__ import annotations

from datetime import datetime
from typing import Literal

from sqlmodel import SQLModel

ProblemStatementStatus = Literal["submitted", "pending"]
ActivityType = Literal["task_created", "task_completed", "file_uploaded"]


class MemberStats(SQLModel):
    member_id: str
    name: str
    tasks_assigned: int
    tasks_completed: int
    problem_statement_status: ProblemStatementStatus


class CategoryProgress(SQLModel):
    category: str
    task_count: int
    progress: int


class DashboardSummary(SQLModel):
    member_count: int
    task_count: int
    completed_task_count: int
    submitted_member_count: int
    categories: list[CategoryProgress]
    members: list[MemberStats]


class ActivityItem(SQLModel):
    id: str
    type: ActivityType
    title: str
    description: str
    timestamp: datetime
