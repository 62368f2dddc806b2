"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, recall.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recall.api.deps.dependencies import get_service_cache
from recall.boundary.db import create_tables
from recall.configs import get_settings
from recall.observability import configure_logging

from .routers import health_router, items_router, query_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Creates tables, resolves the provider once and pre-warms the service
    cache on startup; clears it on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    await create_tables()

    cache = get_service_cache()
    config = await cache.resolve_provider()
    logger.info(f"{__name__}:lifespan - Provider mode={config.mode.value}, chat_model={config.chat_model}")
    _ = cache.retriever
    _ = cache.synthesizer
    logger.info(f"{__name__}:lifespan - Service cache pre-warmed")

    yield

    cache.clear()
    logger.info(f"{__name__}:lifespan - Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Recall API",
        description="Personal knowledge base with hybrid retrieval and cited answers",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(items_router, prefix="/api")
    app.include_router(query_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "recall.api.main:app",
        host="0.0.0.0",
        port=5000,
    )
