"""
car_registry.api.routers.cars

REST endpoints for managing cars.

Responsibilities:
- Check identifier presence/absence on create/update.
- Delegate to the injected `CarStore`.
- Shape responses: status codes, Location, alert and pagination headers.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response
from starlette.status import HTTP_201_CREATED, HTTP_404_NOT_FOUND

from car_registry.api.deps import car_store, settings_dep
from car_registry.api.errors import BadRequestAlertError
from car_registry.api.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
    pagination_headers,
)
from car_registry.observability.logging import get_logger
from car_registry.services.car_service import CarStore, UnsupportedSortError
from car_registry.services.dtos import CarDTO, PageRequest, SortOrder
from car_registry.settings import Settings

log = get_logger(__name__)

ENTITY_NAME = "car"

# Zero-based page index bound; with `max_page_size` bounded the same way the
# row offset stays inside 64 bits.
MAX_PAGE_INDEX = 2**31 - 1

router = APIRouter(tags=["cars"])


def _parse_sort(raw: list[str]) -> tuple[SortOrder, ...]:
    # Each value is `property[,asc|desc]`, e.g. `sort=id,desc`.
    orders: list[SortOrder] = []
    for value in raw:
        prop, _, direction = value.partition(",")
        direction = direction.strip().lower() or "asc"
        if not prop.strip() or direction not in ("asc", "desc"):
            raise BadRequestAlertError(f"Invalid sort: {value!r}", ENTITY_NAME, "sortinvalid")
        orders.append(SortOrder(property=prop.strip(), direction=direction))  # type: ignore[arg-type]
    return tuple(orders)


@router.post("/cars", response_model=CarDTO, status_code=HTTP_201_CREATED)
async def create_car(
    car: CarDTO,
    response: Response,
    store: CarStore = Depends(car_store),
    settings: Settings = Depends(settings_dep),
) -> CarDTO:
    log.debug("rest_request_save_car", car=car.model_dump(mode="json"))
    if car.id is not None:
        raise BadRequestAlertError("A new car cannot already have an ID", ENTITY_NAME, "idexists")
    result = await store.save(car)
    response.headers["Location"] = f"{settings.api_prefix}/cars/{result.id}"
    response.headers.update(
        entity_creation_alert(settings.application_name, ENTITY_NAME, str(result.id))
    )
    return result


@router.put("/cars", response_model=CarDTO)
async def update_car(
    car: CarDTO,
    response: Response,
    store: CarStore = Depends(car_store),
    settings: Settings = Depends(settings_dep),
) -> CarDTO:
    log.debug("rest_request_update_car", car=car.model_dump(mode="json"))
    if car.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    result = await store.save(car)
    response.headers.update(
        entity_update_alert(settings.application_name, ENTITY_NAME, str(result.id))
    )
    return result


@router.get("/cars", response_model=list[CarDTO])
async def get_all_cars(
    response: Response,
    page: int = Query(default=0, ge=0, le=MAX_PAGE_INDEX),
    size: int | None = Query(default=None, ge=1),
    sort: list[str] = Query(default=[]),
    store: CarStore = Depends(car_store),
    settings: Settings = Depends(settings_dep),
) -> list[CarDTO]:
    log.debug("rest_request_get_cars_page", page=page, size=size, sort=sort)
    page_request = PageRequest(
        page=page,
        size=min(size or settings.default_page_size, settings.max_page_size),
        sort=_parse_sort(sort),
    )
    try:
        result = await store.find_page(page_request)
    except UnsupportedSortError as e:
        raise BadRequestAlertError(str(e), ENTITY_NAME, "sortinvalid") from e
    response.headers.update(pagination_headers(result, f"{settings.api_prefix}/cars"))
    return result.content


@router.get("/cars/{car_id}", response_model=CarDTO)
async def get_car(car_id: int, store: CarStore = Depends(car_store)) -> CarDTO | Response:
    log.debug("rest_request_get_car", car_id=car_id)
    car = await store.find_one(car_id)
    if car is None:
        return Response(status_code=HTTP_404_NOT_FOUND)
    return car


@router.delete("/cars/{car_id}")
async def delete_car(
    car_id: int,
    store: CarStore = Depends(car_store),
    settings: Settings = Depends(settings_dep),
) -> Response:
    log.debug("rest_request_delete_car", car_id=car_id)
    # Idempotent: a missing id is not reported.
    await store.delete(car_id)
    return Response(
        headers=entity_deletion_alert(settings.application_name, ENTITY_NAME, str(car_id)),
    )


# --- Module Notes -----------------------------------------------------------
# Mounted under `settings.api_prefix`; Location and Link headers follow that prefix.
