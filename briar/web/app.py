"""Briar Theme Web Application - layout and markup helpers over HTTP."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from briar import __version__
from briar.core.config_validator import ValidationError
from briar.web.dependencies import initialize_theme
from briar.web.routes import layout, markup, menu, config, pages

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    # Startup
    theme = initialize_theme()
    logger.info(f"Briar theme ready (title shim active: {theme.title_shim_active})")

    yield

    # Shutdown
    logger.info("Application stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application with all routers mounted."""
    app = FastAPI(title="Briar Theme", version=__version__, lifespan=lifespan)

    app.include_router(layout.router)
    app.include_router(markup.router)
    app.include_router(menu.router)
    app.include_router(config.router)
    app.include_router(pages.router)

    @app.exception_handler(ValidationError)
    async def config_validation_error(request: Request, exc: ValidationError):
        logger.error(f"Configuration error: {exc}")
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "field": exc.field, "config_file": exc.config_file},
        )

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()
