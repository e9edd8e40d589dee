# -*- coding: utf-8 -*-
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from event_service.api import events
from event_service.config import Settings, get_settings
from event_service.errors import EventNotFoundError
from event_service.logging_config import configure_logging
from event_service.models import ErrorMessage, VersionInfo
from event_service.services.event_store import EventStore
from event_service.services.seed import create_default_events

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[EventStore] = None,
) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = EventStore(create_default_events() if settings.seed_events else None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info(
            "Events API starting",
            extra={"version": settings.version, "events": store.get_events_count()},
        )
        yield
        logger.info("Events API shutting down")

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(EventNotFoundError)
    async def event_not_found_handler(request: Request, exc: EventNotFoundError) -> JSONResponse:
        logger.info(
            "event not found",
            extra={"method": request.method, "path": request.url.path, "event_id": exc.event_id},
        )
        return JSONResponse(status_code=404, content=ErrorMessage(message=str(exc)).model_dump())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled exception",
            extra={"method": request.method, "path": request.url.path, "error": str(exc)},
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content=ErrorMessage(message=str(exc)).model_dump())

    app.include_router(events.router, tags=["events"])

    # ヘルスチェック：空配列を返すだけ
    @app.get("/")
    def root():
        return []

    @app.get("/version", response_model=VersionInfo)
    def version():
        return VersionInfo(version=settings.version)

    return app


app = create_app()
