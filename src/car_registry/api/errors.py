"""
car_registry.api.errors

Client error type and its HTTP translation.

Responsibilities:
- `BadRequestAlertError`: a rejected request tied to an entity and an error key.
- Render it as a 400 problem body plus `X-<app>-error` headers.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from car_registry.api.headers import failure_alert_headers
from car_registry.observability.logging import get_logger

log = get_logger(__name__)


class BadRequestAlertError(Exception):
    def __init__(self, message: str, entity_name: str, error_key: str) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


async def _bad_request_alert_handler(request: Request, exc: BadRequestAlertError) -> JSONResponse:
    log.info("bad_request", entity=exc.entity_name, error_key=exc.error_key)
    app_name = request.app.state.settings.application_name
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "title": exc.message,
            "status": HTTP_400_BAD_REQUEST,
            "message": f"error.{exc.error_key}",
            "entityName": exc.entity_name,
            "errorKey": exc.error_key,
        },
        headers=failure_alert_headers(app_name, exc.entity_name, exc.error_key),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BadRequestAlertError, _bad_request_alert_handler)


# --- Module Notes -----------------------------------------------------------
# Only client errors are translated here. Anything else raised by the store
# surfaces as a 500 from Starlette.
