"""
Route handler responsible for image retrieval.
"""

from aws_lambda_powertools import Logger
from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from image_api.core.utils.constants import SERVICE_NAME
from image_api.core.utils.decorators import api_handler
from image_api.core.utils.response import ResponseBuilder
from image_api.core.utils.validators import validate_request
from image_api.handlers.dependencies import StorageDep

from .models import GetImageRequest
from .service import GetService

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["images"])


@router.get("/image/{image_id}")
@api_handler
async def get_image(image_id: str, storage: StorageDep) -> Response:
    """
    Handle image read requests.

    Answers 200 with the image as JSON, or 204 with an empty body when
    the id does not exist.
    """
    logger.info("Received get image request", extra={"image_id": image_id})

    request = validate_request(GetImageRequest, {"image_id": image_id})

    service = GetService(storage)
    image = await run_in_threadpool(service.get_image, request.image_id)

    if image is None:
        return ResponseBuilder.no_content()

    return ResponseBuilder.ok(image)
