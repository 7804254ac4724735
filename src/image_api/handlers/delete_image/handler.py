"""
Route handler responsible for deleting an image resource.
"""

from http import HTTPStatus

from aws_lambda_powertools import Logger
from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from image_api.core.utils.constants import SERVICE_NAME
from image_api.core.utils.decorators import api_handler
from image_api.core.utils.response import ResponseBuilder
from image_api.core.utils.validators import validate_request
from image_api.handlers.dependencies import StorageDep

from .models import DeleteImageRequest
from .service import DeleteService

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["images"])


@router.delete("/image/{image_id}")
@api_handler
async def delete_image(image_id: str, storage: StorageDep) -> Response:
    """
    Handle image deletion requests.

    Answers 204. The confirmation message is logged; no body is sent.
    """
    logger.info("Received image delete request", extra={"image_id": image_id})

    request = validate_request(DeleteImageRequest, {"image_id": image_id})

    service = DeleteService(storage)
    message = await run_in_threadpool(service.delete_image, request.image_id)

    return ResponseBuilder.json(message, status=HTTPStatus.NO_CONTENT)
