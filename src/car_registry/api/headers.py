"""
car_registry.api.headers

Response header builders.

Responsibilities:
- Entity alert headers (`X-<app>-alert`, `X-<app>-params`).
- Failure alert headers (`X-<app>-error`, `X-<app>-params`).
- Pagination headers (`X-Total-Count`, RFC 5988 `Link`).
"""

from __future__ import annotations

from typing import Any

from car_registry.services.dtos import Page


def alert_headers(app_name: str, message: str, param: str) -> dict[str, str]:
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": param,
    }


def entity_creation_alert(app_name: str, entity_name: str, param: str) -> dict[str, str]:
    return alert_headers(app_name, f"{app_name}.{entity_name}.created", param)


def entity_update_alert(app_name: str, entity_name: str, param: str) -> dict[str, str]:
    return alert_headers(app_name, f"{app_name}.{entity_name}.updated", param)


def entity_deletion_alert(app_name: str, entity_name: str, param: str) -> dict[str, str]:
    return alert_headers(app_name, f"{app_name}.{entity_name}.deleted", param)


def failure_alert_headers(app_name: str, entity_name: str, error_key: str) -> dict[str, str]:
    return {
        f"X-{app_name}-error": f"error.{error_key}",
        f"X-{app_name}-params": entity_name,
    }


def _page_uri(base_url: str, page: int, size: int) -> str:
    return f"{base_url}?page={page}&size={size}"


def pagination_headers(page: Page[Any], base_url: str) -> dict[str, str]:
    """
    `X-Total-Count` plus a `Link` header with next/prev/last/first relations.

    `next` and `prev` are only present when such a page exists; `last` points at
    page 0 for an empty result.
    """

    links: list[str] = []
    if page.has_next:
        links.append(f'<{_page_uri(base_url, page.number + 1, page.size)}>; rel="next"')
    if page.has_previous:
        links.append(f'<{_page_uri(base_url, page.number - 1, page.size)}>; rel="prev"')
    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    links.append(f'<{_page_uri(base_url, last_page, page.size)}>; rel="last"')
    links.append(f'<{_page_uri(base_url, 0, page.size)}>; rel="first"')
    return {
        "X-Total-Count": str(page.total_elements),
        "Link": ",".join(links),
    }
