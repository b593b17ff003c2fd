from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import STORE_DEP, store_errors
from app.core.logging import get_logger
from app.db.store import EntityStore
from app.schemas.common import OkResponse
from app.schemas.tasks import TaskCreate, TaskRead, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])
logger = get_logger(__name__)


def get_task_or_404(task_id: str, store: EntityStore = STORE_DEP) -> TaskRead:
    with store_errors("fetch task"):
        task = store.get_task(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.get("", response_model=list[TaskRead])
def list_tasks(store: EntityStore = STORE_DEP) -> list[TaskRead]:
    with store_errors("fetch tasks"):
        return store.list_tasks()


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskCreate, store: EntityStore = STORE_DEP) -> TaskRead:
    with store_errors("create task"):
        task = store.create_task(payload)
    logger.info("tasks.created task_id=%s category=%s", task.id, task.category)
    return task


@router.get("/{task_id}", response_model=TaskRead)
def get_task(task: TaskRead = Depends(get_task_or_404)) -> TaskRead:
    return task


@router.patch("/{task_id}", response_model=TaskRead)
def update_task(task_id: str, payload: TaskUpdate, store: EntityStore = STORE_DEP) -> TaskRead:
    with store_errors("update task"):
        task = store.update_task(task_id, payload)
    logger.info("tasks.updated task_id=%s fields=%s", task_id, sorted(payload.changes()))
    return task


@router.delete("/{task_id}", response_model=OkResponse)
def delete_task(task_id: str, store: EntityStore = STORE_DEP) -> OkResponse:
    with store_errors("delete task"):
        deleted = store.delete_task(task_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    logger.info("tasks.deleted task_id=%s", task_id)
    return OkResponse(message="Task deleted successfully")
