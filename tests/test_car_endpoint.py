"""
tests.test_car_endpoint

Endpoint behavior against an in-memory `CarStore`, isolating the HTTP layer
from persistence.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from car_registry.api.deps import car_store
from car_registry.services.dtos import CarDTO, Page, PageRequest


class InMemoryCarStore:
    def __init__(self) -> None:
        self.rows: dict[int, CarDTO] = {}
        self.calls: list[str] = []
        self._next_id = 1

    async def save(self, car: CarDTO) -> CarDTO:
        self.calls.append("save")
        if car.id is None:
            car = car.model_copy(update={"id": self._next_id})
            self._next_id += 1
        self.rows[car.id] = car
        return car

    async def find_one(self, car_id: int) -> CarDTO | None:
        self.calls.append("find_one")
        return self.rows.get(car_id)

    async def find_page(self, page_request: PageRequest) -> Page[CarDTO]:
        self.calls.append("find_page")
        ordered = [self.rows[k] for k in sorted(self.rows)]
        start = page_request.offset
        return Page(
            content=ordered[start : start + page_request.size],
            number=page_request.page,
            size=page_request.size,
            total_elements=len(ordered),
        )

    async def delete(self, car_id: int) -> None:
        self.calls.append("delete")
        self.rows.pop(car_id, None)


class FailingCarStore(InMemoryCarStore):
    async def save(self, car: CarDTO) -> CarDTO:
        raise RuntimeError("constraint violated")


@pytest.fixture
def store() -> InMemoryCarStore:
    return InMemoryCarStore()


@pytest_asyncio.fixture
async def fake_client(app: FastAPI, store: InMemoryCarStore) -> AsyncIterator[httpx.AsyncClient]:
    app.dependency_overrides[car_store] = lambda: store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_rejected_create_never_reaches_store(
    fake_client: httpx.AsyncClient, store: InMemoryCarStore
) -> None:
    r = await fake_client.post("/api/cars", json={"id": 3, "model": "Golf"})

    assert r.status_code == 400
    assert store.calls == []


@pytest.mark.asyncio
async def test_rejected_update_never_reaches_store(
    fake_client: httpx.AsyncClient, store: InMemoryCarStore
) -> None:
    r = await fake_client.put("/api/cars", json={"model": "Golf"})

    assert r.status_code == 400
    assert store.calls == []


@pytest.mark.asyncio
async def test_create_is_a_single_store_write(
    fake_client: httpx.AsyncClient, store: InMemoryCarStore
) -> None:
    r = await fake_client.post("/api/cars", json={"model": "Golf"})

    assert r.status_code == 201
    assert r.json() == {"id": 1, "model": "Golf"}
    assert store.calls == ["save"]


@pytest.mark.asyncio
async def test_delete_is_delegated_unconditionally(
    fake_client: httpx.AsyncClient, store: InMemoryCarStore
) -> None:
    r = await fake_client.delete("/api/cars/8")

    assert r.status_code == 200
    assert store.calls == ["delete"]


@pytest.mark.asyncio
async def test_list_page_never_exceeds_size(
    fake_client: httpx.AsyncClient, store: InMemoryCarStore
) -> None:
    for i in range(7):
        await store.save(CarDTO(model=f"m{i}"))

    r = await fake_client.get("/api/cars", params={"page": 2, "size": 3})

    assert [c["model"] for c in r.json()] == ["m6"]
    assert r.headers["x-total-count"] == "7"
    assert 'rel="next"' not in r.headers["link"]
    assert '</api/cars?page=1&size=3>; rel="prev"' in r.headers["link"]


@pytest.mark.asyncio
async def test_store_failures_surface_as_server_errors(app: FastAPI) -> None:
    app.dependency_overrides[car_store] = FailingCarStore
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.post("/api/cars", json={"model": "Golf"})
    app.dependency_overrides.clear()

    assert r.status_code == 500
