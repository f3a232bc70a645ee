"""Aggregate API routers."""

from fastapi import APIRouter

from .admin import router as admin_router
from .problems import router as problems_router
from .system import router as system_router
from .users import router as users_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    users_router,
    admin_router,
    problems_router,
)

__all__ = ["ALL_ROUTERS"]
