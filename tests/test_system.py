"""Tests for /health and /info."""

import random
from datetime import datetime

from fastapi.testclient import TestClient

from mock_database.app.core.db import init_store
from mock_database.app.main import create_app
from mock_database.app.services.system_service import SystemService, utc_timestamp


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    parsed = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


def test_utc_timestamp_format():
    ts = utc_timestamp(datetime(2025, 1, 2, 3, 4, 5, 678000).astimezone())
    assert ts.endswith("Z")
    assert len(ts) == len("2025-01-02T03:04:05.678Z")


def test_info(client):
    resp = client.get("/info")
    assert resp.status_code == 200
    data = resp.json()
    assert data["database"] == "mock_database"
    assert data["version"] == "1.0.0"
    assert 1 <= data["connection_count"] <= 10
    assert data["uptime"] >= 0


def test_info_connection_count_stays_in_range(client):
    counts = {client.get("/info").json()["connection_count"] for _ in range(50)}
    assert counts <= set(range(1, 11))


def test_info_connection_count_follows_seeded_rng():
    expected = random.Random(7).randint(1, 10)
    with TestClient(create_app(rng=random.Random(7))) as c:
        assert c.get("/info").json()["connection_count"] == expected


async def test_uptime_grows(store):
    first = await SystemService.get_info(store)
    second = await SystemService.get_info(store)
    assert second.uptime >= first.uptime


def test_default_app_serves_default_seed():
    with TestClient(create_app()) as c:
        assert len(c.get("/users").json()) == len(init_store().users)


def test_unknown_path_is_404(client):
    assert client.get("/orders").status_code == 404
