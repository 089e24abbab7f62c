"""FastAPI application factory for Docker Home."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..services.dashboard_service import DashboardService
from ..services.exceptions import (
    ContainerNotFoundError,
    CurationStoreError,
    DockerServiceError,
)
from .routes import router

logger = logging.getLogger(__name__)


def create_app(dashboard: DashboardService, static_dir: Optional[Path] = None) -> FastAPI:
    """Build the API around already constructed services.

    Args:
        dashboard: Service the routes delegate to
        static_dir: Optional directory of presentation files served at ``/``

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        yield
        logger.info("Shutting down Docker Home")
        await dashboard.hub_client.aclose()
        dashboard.docker_service.close()

    app = FastAPI(title="Docker Home", version=__version__, lifespan=lifespan)
    app.state.dashboard = dashboard

    @app.exception_handler(ContainerNotFoundError)
    async def container_not_found(request: Request, exc: ContainerNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(DockerServiceError)
    async def docker_unavailable(request: Request, exc: DockerServiceError):
        logger.error(f"Docker request failed: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.exception_handler(CurationStoreError)
    async def curation_not_saved(request: Request, exc: CurationStoreError):
        logger.error(str(exc))
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    app.include_router(router)

    if static_dir is not None:
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app
