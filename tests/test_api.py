"""
Tests for the HTTP routes wrapping the engines.
"""

import sys
import os

from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cricket_scheduler.main import app

client = TestClient(app)

DATE = "2024-01-15"


def match_payload(match_id, home_id, away_id, start_time, duration=120, status="scheduled"):
    return {
        "id": match_id,
        "home_team": {"id": home_id},
        "away_team": {"id": away_id},
        "venue": "Eden Gardens",
        "date": DATE,
        "start_time": start_time,
        "duration_minutes": duration,
        "status": status,
    }


def test_health():
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_check_player_without_record():
    response = client.post("/api/availability/check", json={
        "player": {"id": "player1"},
        "date": DATE,
        "start_time": "10:00",
        "duration_minutes": 180,
    })

    assert response.status_code == 200
    assert response.json() == {"is_available": True, "conflicts": []}


def test_check_player_with_veto():
    response = client.post("/api/availability/check", json={
        "player": {"id": "player1", "availability": [{"date": DATE, "is_available": False}]},
        "date": DATE,
        "start_time": "10:00",
        "duration_minutes": 180,
    })

    body = response.json()
    assert body["is_available"] is False
    assert body["conflicts"] == [
        {"player_id": "player1", "conflicting_match_ids": [], "reason": "player_unavailable"}
    ]


def test_check_multiple_players():
    response = client.post("/api/availability/check-multiple", json={
        "players": [
            {"id": "p1"},
            {"id": "p2", "availability": [{"date": DATE, "is_available": False}]},
        ],
        "date": DATE,
        "start_time": "10:00",
        "duration_minutes": 60,
    })

    body = response.json()
    assert [p["id"] for p in body["available_players"]] == ["p1"]
    assert [p["id"] for p in body["unavailable_players"]] == ["p2"]
    assert len(body["conflicts"]) == 1


def test_player_suggestions():
    response = client.post("/api/availability/suggestions", json={
        "players": [{"id": "p1"}],
        "date": DATE,
        "duration_minutes": 180,
    })

    assert response.json()["suggestions"][0] == "06:00"
    assert len(response.json()["suggestions"]) == 8


def test_schedule_self_match():
    team = {"id": "A", "members": [{"player_id": "a1"}]}

    response = client.post("/api/schedule", json={
        "home_team": team,
        "away_team": team,
        "venue": "Eden Gardens",
        "date": DATE,
        "start_time": "10:00",
        "duration_minutes": 180,
    })

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is False
    assert body["match"] is None
    assert body["conflicts"][0]["player_id"] == "team_conflict"
    assert body["conflicts"][0]["reason"] == "time_overlap"


def test_schedule_match_success():
    response = client.post("/api/schedule", json={
        "home_team": {"id": "A", "members": [{"player_id": "a1"}]},
        "away_team": {"id": "B", "members": [{"player_id": "b1"}]},
        "venue": "Eden Gardens",
        "date": DATE,
        "start_time": "14:00",
        "duration_minutes": 180,
        "existing_matches": [match_payload("m1", "C", "D", "10:00")],
        "players": [{"id": "a1"}, {"id": "b1"}],
    })

    body = response.json()
    assert body["success"] is True
    assert body["match"]["status"] == "scheduled"
    assert body["match"]["playing_xi"] == {"home_team": [], "away_team": []}
    assert body["suggestions"] == []


def test_invalid_time_returns_422():
    response = client.post("/api/availability/check", json={
        "player": {"id": "player1"},
        "date": DATE,
        "start_time": "half past ten",
        "duration_minutes": 60,
    })

    assert response.status_code == 422
    assert "HH:MM" in response.json()["detail"]


def test_empty_window_returns_422():
    response = client.post("/api/schedule/slots", json={"date": DATE, "duration_minutes": 0})

    assert response.status_code == 422


def test_reschedule_match():
    response = client.post("/api/schedule/reschedule", json={
        "match_id": "m1",
        "new_date": DATE,
        "new_time": "16:00",
        "matches": [match_payload("m1", "A", "B", "10:00")],
    })

    body = response.json()
    assert body["success"] is True
    assert body["match"]["start_time"] == "16:00"


def test_cancel_match():
    matches = [match_payload("m1", "A", "B", "10:00"), match_payload("m2", "A", "C", "14:00")]

    response = client.post("/api/schedule/cancel", json={"match_id": "m1", "matches": matches})

    statuses = [m["status"] for m in response.json()["matches"]]
    assert statuses == ["cancelled", "scheduled"]

    missing = client.post("/api/schedule/cancel", json={"match_id": "m9", "matches": matches})
    assert missing.status_code == 404


def test_available_slots_and_stats():
    matches = [
        match_payload("m1", "A", "B", "09:00"),
        match_payload("m2", "A", "C", "14:00", status="completed"),
    ]

    slots = client.post("/api/schedule/slots", json={"date": DATE, "duration_minutes": 60, "matches": matches})
    assert "10:00" not in slots.json()["available_slots"]
    assert "12:00" in slots.json()["available_slots"]

    stats = client.post("/api/schedule/stats", json={"matches": matches}).json()
    assert stats["total_matches"] == 2
    assert stats["scheduled_matches"] == 1
    assert stats["completed_matches"] == 1
