"""
FastAPI application factory for the Image API.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from http import HTTPStatus

from aws_lambda_powertools import Logger
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from image_api import __version__
from image_api.core.config import AppConfig
from image_api.core.infrastructure.adapters.s3_adapter import S3Adapter
from image_api.core.infrastructure.aws.s3_image_storage import S3ImageStorage
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.constants import (
    API_PREFIX,
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    SERVICE_NAME,
)
from image_api.core.utils.mime import MimeMap
from image_api.handlers.delete_image.handler import router as delete_image_router
from image_api.handlers.get_image.handler import router as get_image_router
from image_api.handlers.list_image.handler import router as list_image_router
from image_api.handlers.update_image.handler import router as update_image_router
from image_api.handlers.upload_image.handler import router as upload_image_router

logger = Logger(service=SERVICE_NAME, UTC=True)


def build_storage(config: AppConfig) -> ImageStorageRepository:
    """Create the S3-backed storage gateway.

    Raises:
        RuntimeError: If no bucket is configured
    """
    return S3ImageStorage(S3Adapter(config))


async def redirect_without_slash(request: Request) -> RedirectResponse:
    """Send ``/image/`` to ``/image``, keeping the query string."""
    url = request.url.replace(path=request.url.path.rstrip("/"))
    return RedirectResponse(url=str(url), status_code=HTTPStatus.MOVED_PERMANENTLY)


def create_app(
    config: AppConfig | None = None,
    *,
    storage: ImageStorageRepository | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        config: Settings; read from the environment when omitted
        storage: Storage gateway to use instead of the S3 one

    The storage gateway is opened when the application starts and closed
    when it shuts down. Startup fails with RuntimeError when the bucket is
    not configured or STATIC_DIR is not a directory.
    """
    config = config or AppConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        config.require_static_dir()
        gateway = storage if storage is not None else build_storage(config)
        app.state.storage = gateway
        logger.info(
            "Image API starting",
            extra={"bucket": config.bucket, "port": config.port, "gateway": type(gateway).__name__},
        )
        try:
            yield
        finally:
            logger.info("Image API shutting down")
            gateway.close()

    app = FastAPI(
        title="Image API",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.mime_map = MimeMap(config.allowed_mime_types)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[CORS_ORIGIN],
        allow_methods=list(CORS_METHODS),
        allow_headers=list(CORS_HEADERS),
    )

    for router in (
        list_image_router,
        upload_image_router,
        get_image_router,
        delete_image_router,
        update_image_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    app.add_api_route(
        f"{API_PREFIX}/image/",
        redirect_without_slash,
        methods=[m for m in CORS_METHODS if m != "OPTIONS"],
        include_in_schema=False,
    )

    # Must be registered last: it matches every path
    app.mount(
        "/",
        StaticFiles(directory=config.static_dir, html=True, check_dir=False),
        name="static",
    )

    return app
