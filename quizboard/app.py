"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel
from starlette.middleware.sessions import SessionMiddleware

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DB_RESET,
    LOG_LEVEL,
    PORT,
    SECRET_KEY,
    configure_logging,
    engine,
)
from .services import QuizboardError

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create tables and verify the database answers; raise if it does not."""

    try:
        if DB_RESET:
            SQLModel.metadata.drop_all(engine)
        SQLModel.metadata.create_all(engine)
        with Session(engine) as session:
            session.exec(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Database connection failed: %s", exc)
        raise
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


async def quizboard_error_handler(request: Request, exc: QuizboardError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> PlainTextResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return PlainTextResponse(str(exc), status_code=500)


async def unexpected_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse(str(exc) or exc.__class__.__name__, status_code=500)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    return PlainTextResponse("Request body must be a JSON object", status_code=400)


def create_app() -> FastAPI:
    configure_logging(LOG_LEVEL)

    app = FastAPI(title="Daily Quiz API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=SECRET_KEY,
        session_cookie="sid",
        https_only=COOKIE_SECURE,
        same_site=COOKIE_SAMESITE,
    )

    app.add_exception_handler(QuizboardError, quizboard_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("quizboard.app:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
