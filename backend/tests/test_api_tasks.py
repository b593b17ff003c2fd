# ruff: noqa

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from app.core.time import utcnow
from app.db.memory import MemoryStore
from app.main import create_app

from factories import task_payload


def test_list_tasks_empty(client):
    resp = client.get("/api/tasks")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_task_stamps_server_fields(client):
    started = utcnow()
    resp = client.post("/api/tasks", json=task_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"]
    assert body["progress"] == 0
    assert body["status"] == "pending"
    assert datetime.fromisoformat(body["created_at"]) >= started


def test_created_task_is_readable(client):
    created = client.post("/api/tasks", json=task_payload(progress=25)).json()
    resp = client.get(f"/api/tasks/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created
    assert client.get("/api/tasks").json() == [created]


@pytest.mark.parametrize(
    "overrides",
    [
        {"assignees": []},
        {"assignees": ["  "]},
        {"status": "blocked"},
        {"category": "misc"},
        {"progress": 150},
        {"progress": 3.5},
        {"due_date": ""},
    ],
)
def test_create_task_rejects_invalid_payload_with_400(client, overrides):
    resp = client.post("/api/tasks", json=task_payload(**overrides))
    assert resp.status_code == 400
    assert client.get("/api/tasks").json() == []


def test_create_task_rejects_missing_title(client):
    payload = task_payload()
    del payload["title"]
    resp = client.post("/api/tasks", json=payload)
    assert resp.status_code == 400
    assert isinstance(resp.json()["detail"], list)


def test_get_missing_task_is_404(client):
    resp = client.get("/api/tasks/nope")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Task not found"}


def test_patch_task_merges_fields(client):
    created = client.post("/api/tasks", json=task_payload()).json()
    resp = client.patch(f"/api/tasks/{created['id']}", json={"status": "completed"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "completed"
    assert body["progress"] == 0
    assert {k: v for k, v in body.items() if k != "status"} == {
        k: v for k, v in created.items() if k != "status"
    }


def test_patch_task_rejects_identity_and_unknown_keys(client):
    created = client.post("/api/tasks", json=task_payload()).json()
    assert client.patch(f"/api/tasks/{created['id']}", json={"id": "hijack"}).status_code == 400
    assert client.patch(f"/api/tasks/{created['id']}", json={"owner": "x"}).status_code == 400
    assert client.patch(f"/api/tasks/{created['id']}", json={"title": None}).status_code == 400
    assert client.get(f"/api/tasks/{created['id']}").json() == created


def test_patch_missing_task_is_404(client):
    resp = client.patch("/api/tasks/nope", json={"progress": 10})
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Task not found"}
    assert client.get("/api/tasks").json() == []


def test_delete_task_then_again_is_404(client):
    created = client.post("/api/tasks", json=task_payload()).json()
    resp = client.delete(f"/api/tasks/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True
    assert client.get(f"/api/tasks/{created['id']}").status_code == 404
    assert client.delete(f"/api/tasks/{created['id']}").status_code == 404


class _BrokenStore(MemoryStore):
    def list_tasks(self):
        raise RuntimeError("connection refused to 10.0.0.5:5432")


def test_backend_failure_is_generic_500(settings):
    app = create_app(settings, store=_BrokenStore())
    with TestClient(app) as client:
        resp = client.get("/api/tasks")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to fetch tasks"}
    assert "10.0.0.5" not in resp.text
