"""
car_registry.services.car_service

Car store: the collaborator the REST endpoint delegates to.

Responsibilities:
- Define the narrow `CarStore` interface consumed by the API layer.
- Implement it over `CarRepo`, owning commit boundaries and DTO mapping.
"""

from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from car_registry.db.models import Car
from car_registry.db.repositories.cars import CarRepo
from car_registry.observability.logging import get_logger
from car_registry.services.dtos import CarDTO, Page, PageRequest, SortOrder

log = get_logger(__name__)

# Sort properties accepted by `find_page`, mapped to their columns.
SORTABLE_COLUMNS = {"id": Car.id}


class UnsupportedSortError(ValueError):
    def __init__(self, sort_property: str) -> None:
        super().__init__(f"cannot sort cars by {sort_property!r}")
        self.sort_property = sort_property


class CarStore(Protocol):
    async def save(self, car: CarDTO) -> CarDTO: ...

    async def find_one(self, car_id: int) -> CarDTO | None: ...

    async def find_page(self, page_request: PageRequest) -> Page[CarDTO]: ...

    async def delete(self, car_id: int) -> None: ...


def to_dto(car: Car) -> CarDTO:
    return CarDTO(id=car.id, **car.attributes)


def _order_by(sort: tuple[SortOrder, ...]) -> list[ColumnElement[Any]]:
    clauses: list[ColumnElement[Any]] = []
    for order in sort:
        column = SORTABLE_COLUMNS.get(order.property)
        if column is None:
            raise UnsupportedSortError(order.property)
        clauses.append(column.desc() if order.direction == "desc" else column.asc())
    return clauses


class CarService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._cars = CarRepo(session)

    async def save(self, car: CarDTO) -> CarDTO:
        attributes = car.extra_fields()
        if car.id is None:
            row = await self._cars.create(attributes=attributes)
        else:
            row = await self._cars.update(car_id=car.id, attributes=attributes)
            if row is None:
                # Unknown id: stored as a new car under a database-assigned id.
                row = await self._cars.create(attributes=attributes)
        await self._session.commit()
        log.debug("car_saved", car_id=row.id)
        return to_dto(row)

    async def find_one(self, car_id: int) -> CarDTO | None:
        row = await self._cars.get(car_id)
        return to_dto(row) if row is not None else None

    async def find_page(self, page_request: PageRequest) -> Page[CarDTO]:
        order_by = _order_by(page_request.sort)
        total = await self._cars.count()
        rows = await self._cars.list_page(
            offset=page_request.offset, limit=page_request.size, order_by=order_by
        )
        return Page(
            content=[to_dto(r) for r in rows],
            number=page_request.page,
            size=page_request.size,
            total_elements=total,
            sort=page_request.sort,
        )

    async def delete(self, car_id: int) -> None:
        await self._cars.delete(car_id)
        await self._session.commit()
        log.debug("car_deleted", car_id=car_id)


# --- Module Notes -----------------------------------------------------------
# Database errors are not caught here; they reach the HTTP boundary as 500s.
