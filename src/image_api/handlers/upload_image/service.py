"""Business logic for image upload operations.

This module validates the uploaded content type and stores the file,
translating failures into domain-specific errors.
"""

from aws_lambda_powertools import Logger

from image_api.core.models.errors import MIMETypeError, StorageError
from image_api.core.models.upload import ImageUploadRequest
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.constants import ERROR_CODE_IMAGE_UPLOAD_FAILED, SERVICE_NAME
from image_api.core.utils.mime import MimeMap

logger = Logger(service=SERVICE_NAME, UTC=True)


def ensure_allowed_type(mime_map: MimeMap, content_type: str) -> None:
    """Raise MIMETypeError unless ``content_type`` is in the allow-list."""
    if mime_map.valid(content_type):
        return

    logger.warning(
        "Unsupported MIME type",
        extra={"mime_type": content_type},
    )
    raise MIMETypeError(
        message=f"invalid image type, want one of {mime_map.list()} got : {content_type}",
        details={"mime_type": content_type},
    )


class UploadService:
    """Application service responsible for image uploads.

    This service orchestrates:
    - Content type validation against the allow-list
    - Uploading image content to storage
    """

    def __init__(self, storage: ImageStorageRepository, mime_map: MimeMap) -> None:
        self.storage = storage
        self.mime_map = mime_map

    def store(self, upload: ImageUploadRequest) -> None:
        """Write the uploaded file under its file name.

        Raises:
            StorageError: If storage upload fails
        """
        try:
            self.storage.create_object(
                upload.filename,
                upload.file,
                content_type=upload.content_type,
            )
        except StorageError as exc:
            raise StorageError(
                message=f"image couldn't be created: {exc.message}",
                error_code=ERROR_CODE_IMAGE_UPLOAD_FAILED,
                details={"filename": upload.filename},
            ) from exc

    def upload_image(self, upload: ImageUploadRequest) -> None:
        """Validate and store a new image.

        The upload flow is:
        1. Validate the declared content type
        2. Upload image to object storage

        Args:
            upload: Validated multipart file

        Raises:
            MIMETypeError: If the content type is not allowed
            StorageError: If storage upload fails
        """
        logger.debug(
            "Starting image upload",
            extra={"file_name": upload.filename, "size": upload.size},
        )

        ensure_allowed_type(self.mime_map, upload.content_type)
        self.store(upload)

        logger.info("Image uploaded successfully", extra={"file_name": upload.filename})
