"""
car_registry.api.__main__

Entrypoint for running the FastAPI application via `python -m car_registry.api`.
"""

from __future__ import annotations

import uvicorn

from car_registry.api.app import create_app
from car_registry.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
