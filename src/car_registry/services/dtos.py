"""
car_registry.services.dtos

Wire and paging types shared by the API and service layers.

Responsibilities:
- `CarDTO`: the record exchanged with clients (`id` plus pass-through fields).
- `PageRequest` / `Page`: a bounded slice request and its result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]


class CarDTO(BaseModel):
    """
    Car as seen by clients. Only `id` is interpreted; any other field is kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    id: int | None = None

    def extra_fields(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude={"id"})


@dataclass(frozen=True, slots=True)
class SortOrder:
    property: str
    direction: SortDirection = "asc"


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page index must not be negative")
        if self.size < 1:
            raise ValueError("page size must be at least one")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    content: list[T]
    number: int
    size: int
    total_elements: int
    sort: tuple[SortOrder, ...] = field(default=())

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size > 0 else 1

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0


# --- Module Notes -----------------------------------------------------------
# Page numbers are zero-based, matching the `page` query parameter.
