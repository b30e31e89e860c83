"""
car_registry.api.routers.health

Liveness (`/healthz`) and readiness (`/readyz`) probes.

Readiness queries the `cars` table itself, so a reachable database without the
schema applied still reports not ready (500).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from car_registry import __version__
from car_registry.api.deps import db_session, settings_dep
from car_registry.db.models import Car
from car_registry.settings import Settings

router = APIRouter()


@router.get("/healthz")
async def healthz(settings: Settings = Depends(settings_dep)) -> dict[str, str]:
    return {"status": "ok", "service": settings.service_name, "version": __version__}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    await session.execute(select(Car.id).limit(1))
    return {"status": "ready"}
