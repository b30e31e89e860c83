"""
car_registry.db.repositories.cars

Repository for `Car` rows.

Responsibilities:
- Insert/upsert, fetch, page and delete cars.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from car_registry.db.models import Car, is_storable_id


class CarRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, attributes: dict[str, Any]) -> Car:
        car = Car(attributes=attributes)
        self._session.add(car)
        # Flush so the database assigns the id.
        await self._session.flush()
        return car

    async def update(self, *, car_id: int, attributes: dict[str, Any]) -> Car | None:
        # Returns None when no row has this id; ids are never inserted explicitly.
        if not is_storable_id(car_id):
            return None
        car = await self._session.get(Car, car_id, with_for_update=True)
        if car is None:
            return None
        car.attributes = attributes
        await self._session.flush()
        return car

    async def get(self, car_id: int) -> Car | None:
        if not is_storable_id(car_id):
            return None
        return await self._session.get(Car, car_id)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(Car)
        return int((await self._session.execute(stmt)).scalar_one())

    async def list_page(
        self,
        *,
        offset: int,
        limit: int,
        order_by: Sequence[ColumnElement[Any]] = (),
    ) -> list[Car]:
        stmt = select(Car).order_by(*(order_by or (Car.id.asc(),))).offset(offset).limit(limit)
        return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, car_id: int) -> None:
        # Deleting a missing id is a no-op.
        if not is_storable_id(car_id):
            return
        await self._session.execute(delete(Car).where(Car.id == car_id))
