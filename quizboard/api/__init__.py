"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI

from .frontend import API_PREFIX, router as frontend_router
from .routers import ALL_ROUTERS


def register_routes(app: FastAPI) -> None:
    """Attach the API routers, then the front-end catch-all."""

    for router in ALL_ROUTERS:
        app.include_router(router, prefix=API_PREFIX)
    app.include_router(frontend_router)


__all__ = ["register_routes"]
