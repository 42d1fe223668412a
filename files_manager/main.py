# files_manager/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from files_manager.core.config import Settings, get_settings
from files_manager.core.errors import FilesManagerError
from files_manager.core.logging import configure_logging
from files_manager.models.database import create_session_factory
from files_manager.routers import app as app_routes
from files_manager.routers import auth, files, users
from files_manager.services.cache import RedisCache
from files_manager.services.queue import EMAIL_QUEUE, THUMBNAIL_QUEUE, JobQueue
from files_manager.services.sessions import SessionStore


def create_app(
    settings: Optional[Settings] = None,
    *,
    session_factory=None,
    cache=None,
    thumbnail_queue=None,
    email_queue=None,
) -> FastAPI:
    """Build the API; every collaborator not passed in is built from settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    session_factory = session_factory or create_session_factory(settings.database_url)
    cache = cache or RedisCache.from_url(settings.redis_url)
    thumbnail_queue = thumbnail_queue or JobQueue.from_url(
        settings.redis_url,
        name=THUMBNAIL_QUEUE,
        function="generate_thumbnails",
        timeout=settings.thumbnail_job_timeout,
        retries=1,
    )
    email_queue = email_queue or JobQueue.from_url(
        settings.redis_url, name=EMAIL_QUEUE, function="send_welcome_email", retries=1
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await thumbnail_queue.connect()
        await email_queue.connect()
        yield
        await thumbnail_queue.disconnect()
        await email_queue.disconnect()

    app = FastAPI(title="Files Manager", version="1.0.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.cache = cache
    app.state.sessions = SessionStore(cache, ttl=settings.session_ttl_seconds)
    app.state.thumbnail_queue = thumbnail_queue
    app.state.email_queue = email_queue

    @app.exception_handler(FilesManagerError)
    async def files_manager_error(request: Request, exc: FilesManagerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        logger.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    # include our routers
    app.include_router(app_routes.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(files.router)

    return app
