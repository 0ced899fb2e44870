import io

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.deps import get_http_client
from backend.main import app

DREAM_ROLE = {
    "role": "Frontend Developer",
    "level": "Mid",
    "frameworks": ["React", "Vue"],
    "languages": ["JavaScript"],
    "tools": ["Git"],
}


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _override_http(handler):
    async def fake_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as c:
            yield c
    app.dependency_overrides[get_http_client] = fake_client


def test_health(client, no_ai):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["ai"] is False
    assert body["demo"] is False


def test_roadmap_local(client, no_ai):
    r = client.post("/api/roadmap", json={
        "skills": {"frameworks": ["React"], "languages": ["JavaScript"]},
        "profileData": {"githubValid": True, "linkedinValid": False, "dreamRole": {}},
    })
    assert r.status_code == 200
    body = r.json()
    assert body["source"] == "local"
    assert len(body["milestones"]) == 15
    assert len(body["roadmapId"]) == 16
    assert all(1 <= m["days"] <= 7 for m in body["milestones"])
    assert body["milestones"][0]["title"] == "Update GitHub portfolio with projects"


def test_roadmap_for_dream_role(client, no_ai):
    r = client.post("/api/roadmap", json={
        "skills": {"frameworks": ["React"], "languages": ["JavaScript"], "tools": ["Git"]},
        "profileData": {"dreamRole": DREAM_ROLE},
    })
    assert r.status_code == 200
    milestones = r.json()["milestones"]
    assert milestones[0]["title"] == "Learn Vue"
    assert milestones[-1]["title"] == "Negotiate offer"


def test_roadmap_same_input_same_id(client, no_ai):
    payload = {"skills": {"languages": ["Python"]}}
    first = client.post("/api/roadmap", json=payload).json()
    second = client.post("/api/roadmap", json=payload).json()
    assert first["roadmapId"] == second["roadmapId"]


def test_roadmap_rejects_missing_skills(client, no_ai):
    assert client.post("/api/roadmap", json={}).status_code == 422


def test_skill_gaps(client):
    r = client.post("/api/skill-gaps", json={
        "currentSkills": ["react.js", "JavaScript", "git"],
        "dreamRole": DREAM_ROLE,
    })
    assert r.status_code == 200
    body = r.json()
    assert body["missingFrameworks"] == ["Vue"]
    assert body["totalGaps"] == 1
    assert body["matchPercentage"] == 75


def test_dream_role_requires_key(client, no_ai):
    r = client.post("/api/analyze-dream-role", json={"roleTitle": "Data Engineer"})
    assert r.status_code == 503


def test_dream_role_demo(client, demo_mode):
    r = client.post("/api/analyze-dream-role", json={"roleTitle": "Data Engineer"})
    assert r.status_code == 200
    body = r.json()
    assert body["role"] == "Data Engineer"
    assert "avgSalary" in body


def test_dream_role_model_failure_is_502(client, with_ai, fake_client):
    fake_client(error="boom")
    r = client.post("/api/analyze-dream-role", json={"roleTitle": "Data Engineer"})
    assert r.status_code == 502


def test_upload_text_resume(client, no_ai):
    text = b"Backend developer with Python, Django and Docker. Good communication skills."
    r = client.post("/api/upload", files={"resume": ("cv.txt", io.BytesIO(text), "text/plain")})
    assert r.status_code == 200
    body = r.json()
    assert "Django" in body["frameworks"]
    assert "Python" in body["languages"]
    assert body["analysis"]["experienceLevel"] == "Mid"


def test_upload_rejects_unknown_type(client, no_ai):
    r = client.post("/api/upload", files={"resume": ("cv.exe", io.BytesIO(b"MZ"), "application/octet-stream")})
    assert r.status_code == 400


def test_upload_too_short(client, no_ai):
    r = client.post("/api/upload", files={"resume": ("cv.txt", io.BytesIO(b"Python"), "text/plain")})
    assert r.status_code == 422


def test_validate_github(client):
    _override_http(lambda request: httpx.Response(404))
    r = client.post("/api/validate/github", json={"url": "https://github.com/ghost-user"})
    assert r.status_code == 200
    assert r.json() == {
        "valid": False,
        "username": "ghost-user",
        "name": None,
        "avatar": None,
        "profileUrl": None,
        "error": "GitHub profile not found",
    }


def test_validate_github_upstream_error(client):
    _override_http(lambda request: httpx.Response(502))
    r = client.post("/api/validate/github", json={"url": "octocat"})
    assert r.status_code == 502


def test_validate_linkedin_format(client, monkeypatch):
    monkeypatch.setattr("backend.routes.profile.PROXYCURL_API_KEY", None)
    _override_http(lambda request: httpx.Response(500))
    r = client.post("/api/validate/linkedin", json={"url": "https://linkedin.com/in/jane-doe"})
    assert r.status_code == 200
    assert r.json()["profileUrl"] == "https://www.linkedin.com/in/jane-doe"
