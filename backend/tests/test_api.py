import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_ai_scorer, get_candidate_repository
from api.router import limiter
from config import settings
from main import app
from models.schemas.ai_score import AIScore
from services.ai_scorer import AIScorer
from services.errors import UpstreamFailure


class EchoScorer(AIScorer):
    async def score(self, role, contact, candidates, distances):
        return [AIScore(candidate_id=c.id, ai_score=60, match_reason="ok") for c in candidates]


class TimeoutScorer(AIScorer):
    async def score(self, role, contact, candidates, distances):
        raise UpstreamFailure("AI scoring timed out")


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_candidate_repository] = lambda: repo
    app.dependency_overrides[get_ai_scorer] = EchoScorer
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_roles(client):
    response = client.get("/roles")
    assert response.status_code == 200
    assert {r["name"] for r in response.json()} == {"Zimmermann EFZ", "Maler EFZ", "Elektroinstallateur EFZ"}


def test_match_points(client):
    response = client.post("/match", json={"contactId": "c-acme", "roleName": "Zimmermann", "method": "points"})
    assert response.status_code == 200
    data = response.json()
    assert data["method"] == "points"
    assert data["roleName"] == "Zimmermann EFZ"
    assert data["contact"]["company_name"] == "Acme AG"
    assert [m["id"] for m in data["matches"]] == ["cand-x", "cand-y"]

    top = data["matches"][0]
    breakdown = top["score_breakdown"]
    assert set(breakdown) == {"roleMatch", "quality", "experience", "docsBonus", "notesBonus", "total"}
    assert breakdown["total"] == top["points_score"]
    assert top["distance_km"] is not None


def test_match_defaults_to_points(client):
    response = client.post("/match", json={"contactId": "c-acme", "roleName": "Zimmermann"})
    assert response.status_code == 200
    assert response.json()["method"] == "points"


def test_match_ai(client):
    response = client.post("/match", json={"contactId": "c-acme", "roleName": "Zimmermann", "method": "ai"})
    assert response.status_code == 200
    data = response.json()
    assert data["method"] == "ai"
    for m in data["matches"]:
        assert 0 <= m["ai_score"] <= 100
        assert isinstance(m["match_reason"], str)


def test_contact_scoped_route(client):
    response = client.post("/contacts/c-acme/match-candidates", json={"roleName": "Zimmermann EFZ"})
    assert response.status_code == 200
    assert response.json()["matches"][0]["id"] == "cand-x"


def test_empty_pool_returns_empty_matches(empty_repo):
    app.dependency_overrides[get_candidate_repository] = lambda: empty_repo
    try:
        response = TestClient(app).post("/match", json={"contactId": "c-acme", "roleName": "Zimmermann"})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json()["matches"] == []


def test_unknown_contact_is_404(client):
    response = client.post("/match", json={"contactId": "c-nope", "roleName": "Zimmermann"})
    assert response.status_code == 404
    assert response.json() == {"kind": "NotFound", "message": "Contact c-nope not found"}


def test_rate_limited_is_429_with_error_body(client):
    limit = int(settings.match_rate_limit.split("/")[0])
    body = {"contactId": "c-acme", "roleName": "Zimmermann"}
    limiter.enabled = True
    try:
        responses = [client.post("/match", json=body) for _ in range(limit + 1)]
    finally:
        limiter.reset()
    assert all(r.status_code == 200 for r in responses[:-1])
    assert responses[-1].status_code == 429
    error = responses[-1].json()
    assert error["kind"] == "RateLimited"
    assert error["message"].startswith("Rate limit exceeded")
    assert set(error) == {"kind", "message"}


def test_unknown_role_is_400(client):
    response = client.post("/match", json={"contactId": "c-acme", "roleName": "Astronaut"})
    assert response.status_code == 400
    assert response.json()["kind"] == "InvalidInput"


def test_bad_method_is_400(client):
    response = client.post("/match", json={"contactId": "c-acme", "roleName": "Zimmermann", "method": "magic"})
    assert response.status_code == 400
    assert response.json()["kind"] == "InvalidInput"


def test_malformed_body_is_400(client):
    response = client.post("/match", json={"roleName": "Zimmermann"})
    assert response.status_code == 400
    data = response.json()
    assert data["kind"] == "InvalidInput"
    assert "contactId" in data["message"]


def test_ai_timeout_is_502_without_matches(client):
    app.dependency_overrides[get_ai_scorer] = TimeoutScorer
    response = client.post("/match", json={"contactId": "c-acme", "roleName": "Zimmermann", "method": "ai"})
    assert response.status_code == 502
    data = response.json()
    assert data["kind"] == "UpstreamFailure"
    assert "matches" not in data


def test_team_candidates(client):
    response = client.post("/contacts/c-acme/team-candidates", json={"selectedCandidateId": "cand-y"})
    assert response.status_code == 200
    rows = response.json()
    assert [r["id"] for r in rows] == ["cand-x"]
    assert rows[0]["role"]["name"] == "Zimmermann EFZ"


def test_team_candidates_unknown_selected(client):
    response = client.post("/contacts/c-acme/team-candidates", json={"selectedCandidateId": "ghost"})
    assert response.status_code == 404
