"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.
"""

from __future__ import annotations

import httpx
import pytest


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "car-registry"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz", headers={"x-request-id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"

    r = await client.get("/healthz")
    assert r.headers["x-request-id"]
