# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Team Time-Off Tracker
=====================
Team members, their time off, the on-call rotation document, and a
pass-through public holiday lookup.

Build the application with ``create_app(database)``; the process
entrypoint lives in ``timeoff_tracker.__main__``.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from timeoff_tracker.controllers import (
    holiday_controller,
    member_controller,
    oncall_controller,
    system_controller,
    timeoff_controller,
)
from timeoff_tracker.core.config import settings
from timeoff_tracker.core.dependencies import wire
from timeoff_tracker.core.logging import get_logger
from timeoff_tracker.middleware import MetricsMiddleware, RequestIDMiddleware
from timeoff_tracker.schemas.scheduling import ErrorResponse
from timeoff_tracker.services.holiday_client import HolidayClient

logger = get_logger(__name__)


def create_app(
    database: Database,
    holiday_client: Optional[HolidayClient] = None,
    mongo_client: Optional[MongoClient] = None,
    static_dir: Optional[str] = None,
) -> FastAPI:
    """
    Build the FastAPI application around an already-connected database.
    ``mongo_client``, when given, is closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        logger.info(
            "Service starting: db=%s, holiday_countries=%s",
            database.name, ",".join(application.state.holiday_client.countries),
        )
        yield
        if mongo_client is not None:
            mongo_client.close()
            logger.info("MongoDB client closed, shutting down")

    app = FastAPI(
        title="Team Time-Off Tracker",
        description="Team members, time off, on-call rotation and public holidays.",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
        responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
    )
    wire(app, database, holiday_client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Error handlers ──

    @app.exception_handler(PyMongoError)
    async def store_error_handler(request: Request, exc: PyMongoError):
        req_id = getattr(request.state, "request_id", None)
        logger.error("Store operation failed: %s", exc, exc_info=exc, extra={"request_id": req_id})
        return JSONResponse(
            status_code=500,
            content={"error": "store_error", "detail": str(exc), "request_id": req_id},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.exception("Unhandled exception", extra={"request_id": req_id})
        return JSONResponse(
            status_code=500,
            content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
        )

    # ── Routes ──

    app.include_router(system_controller.router)
    app.include_router(member_controller.router)
    app.include_router(timeoff_controller.router)
    app.include_router(oncall_controller.router)
    app.include_router(holiday_controller.router)

    public_dir = Path(static_dir or settings.STATIC_DIR)

    @app.get("/", include_in_schema=False)
    def index():
        """Landing page."""
        return FileResponse(public_dir / "index.html")

    # Must stay last: a mount at / shadows every route registered after it.
    app.mount("/", StaticFiles(directory=public_dir, check_dir=False), name="public")

    return app
