# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for Roster Service — HTTP API
Run:  pytest test_main.py -v
"""

import random

import pytest
from fastapi.testclient import TestClient

from main import app
from roster.core.config import settings
from roster.core.dependencies import get_context
from roster.models.palette import TEAM_COLORS
from roster.services.assignment import make_assignment_queue

client = TestClient(app)
context = get_context()


class LastChoice:
    """Deterministic tie-break: always the last candidate team."""

    def choice(self, seq):
        return seq[-1]


# ============================================
# Fixtures / helpers
# ============================================
@pytest.fixture(autouse=True)
def reset_state():
    """Start every test from an empty roster."""
    context.reset()
    yield
    context.reset()


def _add_person(name="", power=None):
    body = {"name": name}
    if power is not None:
        body["power"] = power
    response = client.post("/api/v1/people", json=body)
    assert response.status_code == 201
    return response.json()


def _add_team(**body):
    response = client.post("/api/v1/teams", json=body)
    assert response.status_code == 201
    return response.json()


# ============================================
# Health & Metrics
# ============================================
class TestHealth:
    def test_health_returns_ok_status(self):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == settings.SERVICE_NAME
        assert data["version"] == settings.SERVICE_VERSION

    def test_health_includes_counts(self):
        _add_person("Alice")
        _add_team(name="Red")
        data = client.get("/health").json()
        assert data["people_count"] == 1
        assert data["teams_count"] == 1

    def test_readiness(self):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["storage_ok"] is True


class TestRequestID:
    def test_request_id_propagated(self):
        response = client.get("/health", headers={"X-Request-ID": "req-42"})
        assert response.headers["X-Request-ID"] == "req-42"

    def test_auto_generated_request_id(self):
        response = client.get("/health")
        assert len(response.headers.get("X-Request-ID", "")) > 0


class TestMetrics:
    def test_metrics_returns_200(self):
        response = client.get("/metrics")
        assert response.status_code == 200

    def test_metrics_contains_roster_counters(self):
        _add_team()
        client.post("/api/v1/assignments/queue")
        text = client.get("/metrics").text
        assert "roster_requests_total" in text
        assert "roster_assignment_runs_total" in text
        assert "roster_teams" in text


# ============================================
# People
# ============================================
class TestPeople:
    def test_create_person(self):
        data = _add_person("Alice", 3)
        assert data["name"] == "Alice"
        assert data["power"] == 3
        assert data["id"]

    def test_create_person_defaults(self):
        data = _add_person()
        assert data["name"] == "Person #1"
        assert data["power"] == 1

    def test_create_person_clamps_power(self):
        assert _add_person("Low", 0)["power"] == 1
        assert _add_person("Neg", -4)["power"] == 1
        assert _add_person("Frac", 2.9)["power"] == 2

    def test_create_person_strips_name(self):
        assert _add_person("  Bob  ")["name"] == "Bob"

    def test_list_people_keeps_order(self):
        for name in ("A", "B", "C"):
            _add_person(name)
        names = [p["name"] for p in client.get("/api/v1/people").json()]
        assert names == ["A", "B", "C"]

    def test_get_person_not_found(self):
        assert client.get("/api/v1/people/missing").status_code == 404

    def test_update_person_keeps_power_when_omitted(self):
        person = _add_person("Alice", 4)
        response = client.patch(f"/api/v1/people/{person['id']}", json={"name": "Alicia"})
        assert response.status_code == 200
        assert response.json() == {"id": person["id"], "name": "Alicia", "power": 4}

    def test_update_person_power(self):
        person = _add_person("Alice", 4)
        response = client.patch(
            f"/api/v1/people/{person['id']}", json={"name": "Alice", "power": 0.5}
        )
        assert response.json()["power"] == 1

    def test_update_person_requires_name(self):
        person = _add_person("Alice", 2)
        response = client.patch(f"/api/v1/people/{person['id']}", json={"power": 5})
        assert response.status_code == 422
        assert client.get(f"/api/v1/people/{person['id']}").json() == person

    def test_update_unknown_person_404(self):
        response = client.patch("/api/v1/people/nope", json={"name": "X"})
        assert response.status_code == 404

    def test_delete_person_cascades(self):
        person = _add_person("Alice")
        team = _add_team()
        client.patch(f"/api/v1/teams/{team['id']}", json={"members": [person["id"]]})
        response = client.delete(f"/api/v1/people/{person['id']}")
        assert response.status_code == 200
        assert response.json()["teams_changed"] is True
        for t in client.get("/api/v1/teams").json():
            assert person["id"] not in t["members"]
        assert client.get("/api/v1/people").json() == []

    def test_delete_person_idempotent(self):
        response = client.delete("/api/v1/people/ghost")
        assert response.status_code == 200
        assert response.json()["teams_changed"] is False


# ============================================
# Teams
# ============================================
class TestTeams:
    def test_create_team_defaults(self):
        data = _add_team()
        assert data["name"] == "Team #1"
        assert data["color"] == TEAM_COLORS[0]
        assert data["members"] == []

    def test_three_teams_take_palette_in_order(self):
        colors = [_add_team()["color"] for _ in range(3)]
        assert colors == list(TEAM_COLORS[:3])

    def test_palette_exhausted_gives_empty_color(self):
        for _ in TEAM_COLORS:
            _add_team()
        assert _add_team()["color"] == ""

    def test_create_team_explicit_empty_color(self):
        assert _add_team(name="Plain", color="")["color"] == ""

    def test_create_team_with_taken_color(self):
        first = _add_team(name="A")
        second = _add_team(name="B", color=first["color"])
        assert second["color"] != first["color"]
        assert second["color"] == TEAM_COLORS[1]

    def test_update_team_color_conflict(self):
        first = _add_team(name="A")
        second = _add_team(name="B")
        response = client.patch(
            f"/api/v1/teams/{second['id']}",
            json={"color": first["color"], "name": "Renamed", "members": ["p1"]},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["team"]["color"] == second["color"]
        assert data["team"]["name"] == "Renamed"
        assert data["team"]["members"] == ["p1"]
        assert len(data["warnings"]) == 1

    def test_update_team_own_color_is_allowed(self):
        team = _add_team()
        response = client.patch(f"/api/v1/teams/{team['id']}", json={"color": team["color"]})
        assert response.json()["warnings"] == []

    def test_update_team_clear_color(self):
        team = _add_team()
        response = client.patch(f"/api/v1/teams/{team['id']}", json={"color": ""})
        assert response.json()["team"]["color"] == ""

    def test_update_unknown_team_404(self):
        response = client.patch("/api/v1/teams/nope", json={"name": "X"})
        assert response.status_code == 404

    def test_delete_team(self):
        team = _add_team()
        response = client.delete(f"/api/v1/teams/{team['id']}")
        assert response.json()["existed"] is True
        assert client.get(f"/api/v1/teams/{team['id']}").status_code == 404

    def test_clear_members(self):
        team = _add_team()
        client.patch(f"/api/v1/teams/{team['id']}", json={"members": ["a", "b"]})
        data = client.post("/api/v1/teams/clear-members").json()
        assert all(t["members"] == [] for t in data)


# ============================================
# Moves
# ============================================
class TestMoves:
    def test_move_member(self):
        a = _add_team(name="A")
        b = _add_team(name="B")
        client.patch(f"/api/v1/teams/{a['id']}", json={"members": ["p1"]})
        response = client.post("/api/v1/moves", json={
            "person_id": "p1", "from_team_id": a["id"], "to_team_id": b["id"],
        })
        assert response.status_code == 200
        teams = {t["id"]: t for t in response.json()}
        assert teams[a["id"]]["members"] == []
        assert teams[b["id"]]["members"] == ["p1"]

    def test_move_twice_is_idempotent(self):
        a = _add_team(name="A")
        b = _add_team(name="B")
        body = {"person_id": "p1", "from_team_id": a["id"], "to_team_id": b["id"]}
        client.post("/api/v1/moves", json=body)
        client.post("/api/v1/moves", json=body)
        assert client.get(f"/api/v1/teams/{b['id']}").json()["members"] == ["p1"]

    def test_move_unknown_team_404(self):
        a = _add_team(name="A")
        response = client.post("/api/v1/moves", json={
            "person_id": "p1", "from_team_id": a["id"], "to_team_id": "missing",
        })
        assert response.status_code == 404

    def test_move_missing_payload_field_422(self):
        response = client.post("/api/v1/moves", json={"person_id": "p1"})
        assert response.status_code == 422


# ============================================
# Assignments
# ============================================
class TestAssignments:
    def test_queue_requires_teams(self):
        _add_person("Alone")
        response = client.post("/api/v1/assignments/queue")
        assert response.status_code == 400

    def test_queue_covers_everyone_heaviest_first(self):
        _add_team()
        _add_team()
        ids = [_add_person(f"P{i}", power)["id"] for i, power in enumerate([1, 5, 3, 3])]
        data = client.post("/api/v1/assignments/queue").json()
        assert data["count"] == 4
        assert sorted(step["person"]["id"] for step in data["queue"]) == sorted(ids)
        powers = [step["person"]["power"] for step in data["queue"]]
        assert powers == sorted(powers, reverse=True)

    def test_queue_does_not_touch_teams(self):
        _add_team()
        _add_person("A")
        client.post("/api/v1/assignments/queue")
        assert client.get("/api/v1/teams").json()[0]["members"] == []

    def test_apply_balances_teams(self):
        _add_team()
        _add_team()
        for power in (5, 3, 3, 1):
            _add_person(power=power)
        data = client.post("/api/v1/assignments/apply").json()
        assert data["count"] == 4
        stats = client.get("/api/v1/stats").json()
        totals = [t["power"] for t in stats["teams"]]
        assert sum(totals) == 12
        assert stats["spread"] <= 5
        assert stats["unassigned_people"] == 0

    def test_apply_replaces_previous_membership(self):
        team = _add_team()
        person = _add_person("A")
        client.patch(f"/api/v1/teams/{team['id']}", json={"members": ["stale"]})
        data = client.post("/api/v1/assignments/apply").json()
        assert data["teams"][0]["members"] == [person["id"]]

    def test_apply_with_injected_rng(self, monkeypatch):
        monkeypatch.setattr(context.organizer, "_rng", LastChoice())
        a = _add_team(name="A")
        b = _add_team(name="B")
        ids = [_add_person(power=p)["id"] for p in (5, 3, 3, 1)]
        data = client.post("/api/v1/assignments/apply").json()
        assert [(s["person"]["id"], s["team_id"]) for s in data["queue"]] == [
            (ids[0], b["id"]), (ids[1], a["id"]), (ids[2], a["id"]), (ids[3], b["id"]),
        ]
        teams = {t["id"]: t["members"] for t in data["teams"]}
        assert teams == {a["id"]: [ids[1], ids[2]], b["id"]: [ids[0], ids[3]]}

    def test_apply_with_seeded_random_matches_engine(self, monkeypatch):
        monkeypatch.setattr(context.organizer, "_rng", random.Random(7))
        for _ in range(3):
            _add_team()
        for power in (4, 4, 2, 2, 1, 1):
            _add_person(power=power)
        expected = make_assignment_queue(
            context.people.list(), context.teams.list(), random.Random(7)
        )
        data = client.post("/api/v1/assignments/apply").json()
        assert [(s["person"]["id"], s["team_id"]) for s in data["queue"]] == [
            (step.person.id, step.team_id) for step in expected
        ]
        for team in data["teams"]:
            assert team["members"] == [
                step.person.id for step in expected if step.team_id == team["id"]
            ]

    def test_stats_empty(self):
        stats = client.get("/api/v1/stats").json()
        assert stats["total_people"] == 0
        assert stats["total_teams"] == 0
        assert stats["spread"] == 0
