"""
car_registry.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and the car store.
- Encapsulate app.state access patterns (engine/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from car_registry.services.car_service import CarService, CarStore
from car_registry.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The settings object the app was built with (see `create_app`).
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created on app startup in `car_registry.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit is managed explicitly by the service layer.
    async with session_factory() as session:
        yield session


def car_store(session: AsyncSession = Depends(db_session)) -> CarStore:
    # Override this dependency to swap the persistence collaborator (tests do).
    return CarService(session=session)


# --- Module Notes -----------------------------------------------------------
# Routers depend on `car_store`, never on CarService or the session directly.
