"""
car_registry.db.models

Persistence schema for the car registry.

Responsibilities:
- Define the `Car` row. Every client-supplied field other than `id` lives in the
  `attributes` JSON column untouched.
- Expose the id range the `cars.id` column can hold.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from car_registry.db.base import Base

# Signed 64-bit, the range of `cars.id`.
MIN_CAR_ID = -(2**63)
MAX_CAR_ID = 2**63 - 1

# SQLite only autoincrements an `INTEGER PRIMARY KEY` (already 64-bit there).
CarIdType = BigInteger().with_variant(Integer(), "sqlite")


def _utcnow() -> datetime:
    # Naive UTC timestamps.
    return datetime.utcnow()


def is_storable_id(car_id: int) -> bool:
    return MIN_CAR_ID <= car_id <= MAX_CAR_ID


class Car(Base):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(CarIdType, primary_key=True, autoincrement=True)
    attributes: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)


# --- Module Notes -----------------------------------------------------------
# Timestamps are bookkeeping only and are not part of the wire DTO.
