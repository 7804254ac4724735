"""
Route handler responsible for image upload.
"""

from aws_lambda_powertools import Logger
from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from image_api.core.utils.constants import SERVICE_NAME
from image_api.core.utils.decorators import api_handler
from image_api.core.utils.multipart import read_upload
from image_api.core.utils.response import ResponseBuilder
from image_api.handlers.dependencies import ConfigDep, MimeMapDep, StorageDep

from .service import UploadService

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["images"])


@router.post("/image")
@api_handler
async def upload_image(
    request: Request,
    storage: StorageDep,
    mime_map: MimeMapDep,
    config: ConfigDep,
) -> Response:
    """
    Handle image upload requests.

    Expects a multipart form with the image in the ``myFile`` field.
    Answers 201 with an empty body once the image is stored.
    """
    logger.info(
        "Received image upload request",
        extra={"content_type": request.headers.get("content-type")},
    )

    service = UploadService(storage, mime_map)

    async with read_upload(request, max_size=config.max_upload_size) as upload:
        await run_in_threadpool(service.upload_image, upload)

    return ResponseBuilder.created()
