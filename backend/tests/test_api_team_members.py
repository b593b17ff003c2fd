# ruff: noqa

from dataclasses import replace

from fastapi.testclient import TestClient

from app.main import create_app


def _create(client, **overrides):
    payload = {"name": "dev", "role": "Member", "color": "blue"}
    payload.update(overrides)
    return client.post("/api/team-members", json=payload)


def test_create_and_fetch_member(client):
    resp = _create(client)
    assert resp.status_code == 201
    member = resp.json()
    assert member["avatar"] == "D"
    assert client.get(f"/api/team-members/{member['id']}").json() == member
    assert client.get("/api/team-members").json() == [member]


def test_duplicate_names_are_allowed(client):
    first = _create(client).json()
    second = _create(client).json()
    assert first["id"] != second["id"]
    assert len(client.get("/api/team-members").json()) == 2


def test_create_member_requires_name(client):
    assert _create(client, name="").status_code == 400


def test_get_missing_member_is_404(client):
    resp = client.get("/api/team-members/nope")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Team member not found"}


def test_patch_updates_role_only(client):
    member = _create(client).json()
    resp = client.patch(f"/api/team-members/{member['id']}", json={"role": "Team Lead"})
    assert resp.status_code == 200
    assert resp.json() == {**member, "role": "Team Lead"}


def test_patch_rejects_fields_other_than_role(client):
    member = _create(client).json()
    resp = client.patch(f"/api/team-members/{member['id']}", json={"name": "mallory"})
    assert resp.status_code == 400
    assert client.get(f"/api/team-members/{member['id']}").json() == member


def test_patch_missing_member_is_404(client):
    resp = client.patch("/api/team-members/nope", json={"role": "Lead"})
    assert resp.status_code == 404


def test_default_members_seeded_on_startup(settings):
    app = create_app(replace(settings, seed_default_members=True))
    with TestClient(app) as client:
        names = [member["name"] for member in client.get("/api/team-members").json()]
    assert names == ["dev", "dhruvi", "krisha", "keval", "param", "vivek"]
