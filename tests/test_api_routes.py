"""
tests/test_api_routes.py — FastAPI Route Integration Tests
===========================================================

Exercises every /rpg endpoint through the TestClient against an in-memory
SQLite database.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from rpgtracker.constants import threshold
from rpgtracker.database.models import Pet, User


class TestHealthAndIndex:
    def test_health_returns_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_index_lists_endpoints(self, client):
        resp = client.get("/rpg/")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "API running"
        assert "/rpg/ganhar_xp/{id}" in body["endpoints"]
        assert len(body["endpoints"]) == 4


class TestGainXp:
    def test_awards_and_reports_state(self, client, make_user):
        uid = make_user()
        resp = client.post(f"/rpg/ganhar_xp/{uid}", json=70)
        assert resp.status_code == 200
        assert resp.json() == {
            "level": 4,
            "experience": 0,
            "hasPet": False,
            "levelsGained": 3,
            "xpToNextLevel": 80,
        }

    def test_zero_awards_default(self, client, make_user):
        uid = make_user()
        resp = client.post(f"/rpg/ganhar_xp/{uid}", json=0)
        assert resp.status_code == 200
        assert resp.json()["experience"] == 5

    def test_unknown_user_404(self, client):
        resp = client.post("/rpg/ganhar_xp/999", json=10)
        assert resp.status_code == 404
        assert resp.json()["detail"] == "User not found"

    def test_missing_body_rejected(self, client, make_user):
        uid = make_user()
        resp = client.post(f"/rpg/ganhar_xp/{uid}")
        assert resp.status_code == 422

    @pytest.mark.parametrize("xp", [2**31, 2**70, -(2**31) - 1])
    def test_out_of_range_award_rejected(self, client, db_engine, make_user, xp):
        uid = make_user()
        resp = client.post(f"/rpg/ganhar_xp/{uid}", json=xp)
        assert resp.status_code == 422
        with Session(db_engine) as session:
            assert session.get(User, uid).experience == 0

    def test_largest_award_accepted(self, client, make_user):
        uid = make_user()
        resp = client.post(f"/rpg/ganhar_xp/{uid}", json=2**31 - 1)
        assert resp.status_code == 200
        body = resp.json()
        assert 0 <= body["experience"] < threshold(body["level"])
        assert body["xpToNextLevel"] == threshold(body["level"]) - body["experience"]

    def test_pet_unlocked_through_api(self, client, db_engine, make_user):
        uid = make_user(level=4, experience=79)
        resp = client.post(f"/rpg/ganhar_xp/{uid}", json=1)
        assert resp.json()["hasPet"] is True

        client.post(f"/rpg/ganhar_xp/{uid}", json=200)
        with Session(db_engine) as session:
            pets = session.scalars(select(Pet).where(Pet.user_id == uid)).all()
            assert len(pets) == 1


class TestSuggest:
    def test_returns_recurring_descriptions(self, client, make_user, make_task):
        uid = make_user()
        for desc in ("A", "A", "A", "B"):
            make_task(uid, desc)
        resp = client.get(f"/rpg/sugerir/{uid}")
        assert resp.status_code == 200
        assert resp.json() == {"suggestions": ["A"]}

    def test_unknown_user_empty(self, client):
        resp = client.get("/rpg/sugerir/404")
        assert resp.status_code == 200
        assert resp.json() == {"suggestions": []}


class TestCreatePet:
    def test_creates_pet(self, client, db_engine, make_user):
        uid = make_user(level=5)
        resp = client.post(f"/rpg/criar_pet/{uid}", json={"name": "Rex", "type": "Dog"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "Rex"
        assert body["type"] == "Dog"
        assert body["userId"] == uid
        assert isinstance(body["id"], int)

        with Session(db_engine) as session:
            assert session.get(User, uid).has_pet is True

    def test_unknown_user_404(self, client):
        resp = client.post("/rpg/criar_pet/999", json={"name": "Rex", "type": "Dog"})
        assert resp.status_code == 404

    def test_low_level_400(self, client, make_user):
        uid = make_user(level=4)
        resp = client.post(f"/rpg/criar_pet/{uid}", json={"name": "Rex", "type": "Dog"})
        assert resp.status_code == 400
        assert "level 5" in resp.json()["detail"]

    def test_already_has_pet_400(self, client, make_user):
        uid = make_user(level=6, has_pet=True)
        resp = client.post(f"/rpg/criar_pet/{uid}", json={"name": "Rex", "type": "Dog"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "User already has a pet"

    def test_missing_fields_rejected(self, client, make_user):
        uid = make_user(level=5)
        resp = client.post(f"/rpg/criar_pet/{uid}", json={"name": "Rex"})
        assert resp.status_code == 422


class TestDungeon:
    def test_denied_with_four(self, client, make_user, make_task):
        uid = make_user()
        for _ in range(4):
            make_task(uid, completed=True)
        resp = client.get(f"/rpg/dungeon/{uid}")
        assert resp.status_code == 400
        assert "at least 5" in resp.json()["detail"]

    def test_granted_with_five(self, client, make_user, make_task):
        uid = make_user()
        for _ in range(5):
            make_task(uid, completed=True)
        resp = client.get(f"/rpg/dungeon/{uid}")
        assert resp.status_code == 200
        assert resp.json()["completedToday"] == 5

    def test_old_completions_ignored(self, client, make_user, make_task):
        uid = make_user()
        last_week = datetime.now(UTC) - timedelta(days=7)
        for _ in range(5):
            make_task(uid, completed=True, created_at=last_week)
        resp = client.get(f"/rpg/dungeon/{uid}")
        assert resp.status_code == 400
