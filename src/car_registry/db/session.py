"""
car_registry.db.session

Async engine + session factory for the car store.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from car_registry.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # `db_echo` logs every SQL statement; leave it off outside local debugging.
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_pre_ping=True,
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # CarService returns DTOs built from rows after commit, so rows must not expire.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )
