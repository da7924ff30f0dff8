"""FastAPI app exposing the local data layer as JSON endpoints."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from anymais.core.config import get_settings
from anymais.core.logging_config import configure_logging
from anymais.database import Database, open_database
from anymais.repositories.base import StorageError
from anymais.routers import adoption as adoption_router
from anymais.routers import auth as auth_router
from anymais.routers import bookings as bookings_router
from anymais.routers import ongs as ongs_router
from anymais.routers import pets as pets_router
from anymais.routers import tools as tools_router

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Factory compativel com ``uvicorn --factory anymais.app:create_app``."""
    settings = get_settings()
    configure_logging(settings.log_level)
    owns_database = database is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_database:
            app.state.database.close()

    app = FastAPI(title="AnyMais Local API", lifespan=lifespan)
    app.state.database = database or open_database(settings)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Falha de armazenamento em %s: %s", request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Armazenamento local indisponivel."})

    app.include_router(auth_router.router)
    app.include_router(pets_router.router)
    app.include_router(ongs_router.router)
    app.include_router(bookings_router.router)
    app.include_router(adoption_router.router)
    app.include_router(tools_router.router)
    return app
