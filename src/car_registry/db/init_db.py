"""
car_registry.db.init_db

Schema bootstrap for dev/test runs. Production applies `alembic upgrade head`.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from car_registry.db import models  # noqa: F401  # registers `cars` on Base.metadata
from car_registry.db.base import Base
from car_registry.observability.logging import get_logger

log = get_logger(__name__)


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("schema_ready", tables=sorted(Base.metadata.tables))
