"""
ContosoPets API — Health Endpoint Tests
========================================

What:  GET /health reports database reachability.
How:   The module-level engine points at in-memory SQLite during tests;
       the unreachable case swaps it for a mock whose connect() raises.
"""

from unittest.mock import MagicMock, patch

import pytest

from contoso_pets import __version__


@pytest.mark.asyncio
async def test_health_reports_healthy(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["version"] == __version__
    assert body["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_health_reports_unhealthy_when_database_down(test_client):
    broken_engine = MagicMock()
    broken_engine.connect.side_effect = OSError("connection refused")

    with patch("contoso_pets.database.engine", broken_engine):
        response = await test_client.get("/health")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "unhealthy"
    assert body["database"] == "disconnected"
