"""Multipart form parsing for image uploads."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from aws_lambda_powertools import Logger
from starlette.datastructures import UploadFile
from starlette.requests import Request

from image_api.core.models.errors import FileSizeError, ValidationError
from image_api.core.models.upload import ImageUploadRequest
from image_api.core.utils.constants import (
    SERVICE_NAME,
    UPLOAD_FIELD_NAME,
    get_max_upload_size_mb,
)
from image_api.core.utils.validators import validate_request

logger = Logger(service=SERVICE_NAME, UTC=True)

ERROR_PREFIX = "error retrieving file"


@asynccontextmanager
async def read_upload(
    request: Request,
    *,
    max_size: int,
    field: str = UPLOAD_FIELD_NAME,
) -> AsyncIterator[ImageUploadRequest]:
    """Parse the request form and yield the uploaded file.

    The form (and its spooled temporary files) is closed on exit, so the
    file stream is only valid inside the ``async with`` block.

    Raises:
        ValidationError: If the body is not a form or has no file in ``field``
        FileSizeError: If the file is larger than ``max_size`` bytes
    """
    try:
        form = await request.form()
    except Exception as exc:
        logger.warning("Unable to parse multipart form", extra={"error": str(exc)})
        raise ValidationError(message=f"{ERROR_PREFIX}: {exc}") from exc

    try:
        upload = form.get(field)
        if not isinstance(upload, UploadFile):
            raise ValidationError(
                message=f"{ERROR_PREFIX}: no such file in field {field!r}",
                details={"field": field},
            )

        size = upload.size if upload.size is not None else 0
        if size > max_size:
            raise FileSizeError(
                message=f"{ERROR_PREFIX}: file exceeds {get_max_upload_size_mb(max_size)}MB limit",
                details={"size": size, "max_size": max_size},
            )

        yield validate_request(
            ImageUploadRequest,
            {
                "filename": upload.filename or "",
                "content_type": upload.content_type or "",
                "size": size,
                "file": upload.file,
            },
            message_prefix=ERROR_PREFIX,
        )
    finally:
        await form.close()
