"""FastAPI application for the fitness catalog."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings, get_settings
from ..db import EntityStore, init_db
from ..errors import CatalogError
from ..logging import configure_logging, get_logger
from ..messaging import MessageRouter
from ..rules import Catalog
from .routers import entities, messages

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the schema and wire the message router on startup."""
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        await init_db(settings.db_path)
        app.state.message_router = MessageRouter(Catalog(EntityStore(settings.db_path)))
        logger.info("catalog_ready", db_path=str(settings.db_path))
        yield

    app = FastAPI(
        title="fitness-catalog",
        description="Exercise, workout and training plan catalog",
        version=__version__,
        lifespan=lifespan,
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_response().model_dump())

    app.include_router(messages.router)
    app.include_router(entities.workout_children)
    for router in entities.build_entity_routers():
        app.include_router(router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
