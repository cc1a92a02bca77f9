"""
tests/test_api_routes.py — FastAPI Route Integration Tests
===========================================================

Routes run against the in-memory SQLite ledger through dependency overrides.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from karmabot.api.deps import get_config, get_engine
from karmabot.api.main import app


@pytest.fixture
def client(db_engine, cfg):
    app.dependency_overrides[get_engine] = lambda: db_engine
    app.dependency_overrides[get_config] = lambda: cfg
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def _seed(ledger):
    for name, delta in [("E1", 2), ("E2", -1), ("E3", 1), ("E4", 4), ("E5", 3)]:
        ledger.append(name, delta, "User")


class TestHealthEndpoint:
    def test_health_returns_ok(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestTargetEndpoint:
    def test_unknown_target_is_zero(self, client):
        resp = client.get("/api/karma/targets/nobody")
        assert resp.status_code == 200
        assert resp.json() == {"name": "nobody", "total": 0}

    def test_total(self, client, ledger):
        ledger.append("Ken", 3, "U1")
        ledger.append("Ken", -1, "U2")
        assert client.get("/api/karma/targets/Ken").json()["total"] == 2


class TestLeaderboardEndpoint:
    def test_top(self, client, ledger):
        _seed(ledger)
        body = client.get("/api/karma/leaderboard/top", params={"n": 3}).json()
        assert body["direction"] == "top"
        assert body["targets"] == [
            {"name": "E4", "total": 4, "rank": 1},
            {"name": "E5", "total": 3, "rank": 2},
            {"name": "E1", "total": 2, "rank": 3},
        ]

    def test_bottom(self, client, ledger):
        _seed(ledger)
        body = client.get("/api/karma/leaderboard/bottom", params={"n": 3}).json()
        assert [t["name"] for t in body["targets"]] == ["E2", "E3", "E1"]

    def test_invalid_direction(self, client):
        assert client.get("/api/karma/leaderboard/sideways").status_code == 422

    def test_n_out_of_range(self, client):
        assert client.get("/api/karma/leaderboard/top", params={"n": 0}).status_code == 422


class TestTimeSeriesEndpoint:
    def test_daily_series_ends_today(self, client, ledger):
        today = datetime.now(UTC)
        ledger.append("Ken", 2, "U1", timestamp=today - timedelta(days=2))
        ledger.append("Ken", 1, "U1", timestamp=today)

        body = client.get(
            "/api/karma/timeseries",
            params={"granularity": "day", "buckets": 10},
        ).json()

        assert body["granularity"] == "day"
        assert [b["values"]["Ken"] for b in body["buckets"]] == [2, 2, 3]
        assert body["buckets"][-1]["label"] == today.date().isoformat()

    def test_defaults_come_from_config(self, client, ledger):
        ledger.append("Ken", 1, "U1")
        body = client.get("/api/karma/timeseries").json()
        assert body["granularity"] == "week"
        assert body["direction"] == "top"
        assert len(body["buckets"]) == 1

    def test_invalid_granularity(self, client):
        assert client.get("/api/karma/timeseries", params={"granularity": "hour"}).status_code == 422
