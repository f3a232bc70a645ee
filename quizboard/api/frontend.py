"""Static front-end hosting with a single-page-app fallback."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, PlainTextResponse

from ..core import STATIC_DIR

router = APIRouter(include_in_schema=False)

API_PREFIX = "/api"


def _resolve_static(path: str) -> Path | None:
    root = STATIC_DIR.resolve()
    candidate = (root / path).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate if candidate.is_file() else None


_API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@router.api_route(API_PREFIX, methods=_API_METHODS)
@router.api_route(API_PREFIX + "/{path:path}", methods=_API_METHODS)
def api_not_found() -> PlainTextResponse:
    return PlainTextResponse("API Endpoint Not Found", status_code=404)


@router.get("/{path:path}")
def serve_frontend(path: str) -> FileResponse:
    """Serve a bundled asset, or ``index.html`` for client-side routes."""

    asset = _resolve_static(path) if path else None
    if asset:
        return FileResponse(asset)

    index = STATIC_DIR / "index.html"
    if not index.is_file():
        raise HTTPException(404, "Front-end bundle not found")
    return FileResponse(index)


__all__ = ["API_PREFIX", "router"]
