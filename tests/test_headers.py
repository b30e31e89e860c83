"""
tests.test_headers

Alert and pagination header builders.
"""

from __future__ import annotations

from car_registry.api.headers import (
    entity_creation_alert,
    failure_alert_headers,
    pagination_headers,
)
from car_registry.services.dtos import Page


def test_entity_creation_alert() -> None:
    assert entity_creation_alert("fleetApp", "car", "5") == {
        "X-fleetApp-alert": "fleetApp.car.created",
        "X-fleetApp-params": "5",
    }


def test_failure_alert_headers() -> None:
    assert failure_alert_headers("fleetApp", "car", "idnull") == {
        "X-fleetApp-error": "error.idnull",
        "X-fleetApp-params": "car",
    }


def test_pagination_headers_for_empty_result() -> None:
    page: Page[str] = Page(content=[], number=0, size=20, total_elements=0)

    headers = pagination_headers(page, "/api/cars")

    assert headers["X-Total-Count"] == "0"
    assert headers["Link"] == (
        '</api/cars?page=0&size=20>; rel="last",</api/cars?page=0&size=20>; rel="first"'
    )


def test_pagination_headers_on_first_page() -> None:
    page = Page(content=["a", "b"], number=0, size=2, total_elements=3)

    links = pagination_headers(page, "/api/cars")["Link"].split(",")

    assert links == [
        '</api/cars?page=1&size=2>; rel="next"',
        '</api/cars?page=1&size=2>; rel="last"',
        '</api/cars?page=0&size=2>; rel="first"',
    ]


def test_page_arithmetic() -> None:
    page = Page(content=["x"], number=2, size=10, total_elements=21)

    assert page.total_pages == 3
    assert not page.has_next
    assert page.has_previous
