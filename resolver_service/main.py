"""Entry points for running the FastAPI application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from redirect_resolver import __version__
from redirect_resolver.logging_utils import configure_logging
from redirect_resolver.resolver import create_client, create_resolver

from .api.routes import router as api_router
from .config import get_settings
from .monitoring.metrics import metrics_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_file, settings.log_level)
    config = settings.resolver_config()
    async with create_client(config) as client:
        app.state.resolver = create_resolver(client, config)
        logger.info("Starting Redirect Resolver Service (%s)", settings.environment)
        yield
    logger.info("Redirect Resolver Service stopped")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(title="Redirect Resolver Service", version=__version__, lifespan=lifespan)
    app.include_router(api_router)

    if settings.enable_metrics:
        app.include_router(metrics_router)

    return app


app = create_app()

__all__ = ["create_app", "app"]
