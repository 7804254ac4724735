"""
Route handler responsible for listing images.
"""

from aws_lambda_powertools import Logger
from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from image_api.core.utils.constants import SERVICE_NAME
from image_api.core.utils.decorators import api_handler
from image_api.core.utils.response import ResponseBuilder
from image_api.handlers.dependencies import StorageDep

from .service import ListService

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["images"])


@router.get("/image")
@api_handler
async def list_images(storage: StorageDep) -> Response:
    """
    Handle requests to list images.

    Returns a JSON array with every image in the bucket.
    """
    logger.info("Received list images request")

    service = ListService(storage)
    images = await run_in_threadpool(service.list_images)

    return ResponseBuilder.ok(images)
