"""Unit tests for the health endpoint."""

import httpx
import pytest

from exchange.interface.api.app import create_app
from tests.di import build_test_container


@pytest.mark.asyncio
async def test_health_reports_version():
    container = build_test_container()
    app = create_app(container)

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.get("/health")

    await container.close()

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "0.1.0"
    assert "git_sha" in body
