"""Health & Readiness - liveness always 200, readiness follows the database."""

import ledger_api.infrastructure.database as db_module


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "ledger-api"
    assert res.json()["version"] == "1.0.0"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ready",
        "checks": {"database": "healthy"},
        "dialect": "sqlite",
    }


async def test_readiness_without_database(client):
    db_module.db_manager = None
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_when_health_check_fails(client, monkeypatch):
    async def _down():
        return False

    monkeypatch.setattr(db_module.db_manager, "health_check", _down)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
