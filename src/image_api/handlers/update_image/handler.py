"""
Route handler responsible for replacing an existing image.
"""

from http import HTTPStatus

from aws_lambda_powertools import Logger
from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from image_api.core.utils.constants import SERVICE_NAME
from image_api.core.utils.decorators import api_handler
from image_api.core.utils.multipart import read_upload
from image_api.core.utils.response import ResponseBuilder
from image_api.core.utils.validators import validate_request
from image_api.handlers.dependencies import ConfigDep, MimeMapDep, StorageDep

from .models import ReplaceImageRequest
from .service import ReplaceService

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["images"])


@router.api_route("/image/{image_id}", methods=["PUT", "POST"])
@api_handler
async def update_image(
    image_id: str,
    request: Request,
    storage: StorageDep,
    mime_map: MimeMapDep,
    config: ConfigDep,
) -> Response:
    """
    Handle image replace requests.

    Expects a multipart form with the new image in the ``myFile`` field.
    Answers 200 with an empty body.
    """
    logger.info("Received image replace request", extra={"image_id": image_id})

    params = validate_request(ReplaceImageRequest, {"image_id": image_id})
    service = ReplaceService(storage, mime_map)

    async with read_upload(request, max_size=config.max_upload_size) as upload:
        await run_in_threadpool(service.replace_image, params.image_id, upload)

    return ResponseBuilder.empty(HTTPStatus.OK)
