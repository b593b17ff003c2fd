from __future__ import annotations

from app.schemas.tasks import TaskCreate


def task_payload(**overrides: object) -> dict[str, object]:
    """Plain JSON body for POST /api/tasks; overrides are applied unvalidated."""
    data: dict[str, object] = {
        "title": "A",
        "description": "d",
        "assignees": ["Dev"],
        "status": "pending",
        "category": "problem-recognition",
        "due_date": "2025-01-01",
    }
    data.update(overrides)
    return data


def make_task(**overrides: object) -> TaskCreate:
    return TaskCreate(**task_payload(**overrides))
