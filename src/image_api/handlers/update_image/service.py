"""Business logic for replacing an image.

Replacement deletes the existing object and then writes the uploaded
file under its own file name. The two steps are not atomic: if the write
fails after the delete succeeded, the old image is gone and nothing
replaces it.
"""

from aws_lambda_powertools import Logger

from image_api.core.models.errors import StorageError
from image_api.core.models.upload import ImageUploadRequest
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.constants import ERROR_CODE_IMAGE_REPLACE_FAILED, SERVICE_NAME
from image_api.core.utils.mime import MimeMap
from image_api.handlers.upload_image.service import UploadService, ensure_allowed_type

logger = Logger(service=SERVICE_NAME, UTC=True)


class ReplaceService:
    """Application service responsible for replacing images."""

    def __init__(self, storage: ImageStorageRepository, mime_map: MimeMap) -> None:
        self.storage = storage
        self.mime_map = mime_map
        self._uploader = UploadService(storage, mime_map)

    def replace_image(self, image_id: str, upload: ImageUploadRequest) -> None:
        """Replace ``image_id`` with the uploaded file.

        The replace flow is:
        1. Validate the declared content type
        2. Delete the existing object
        3. Upload the new file under its file name

        Raises:
            MIMETypeError: If the content type is not allowed
            StorageError: If the delete or the upload fails
        """
        logger.debug(
            "Starting image replace",
            extra={"image_id": image_id, "file_name": upload.filename},
        )

        ensure_allowed_type(self.mime_map, upload.content_type)

        try:
            self.storage.delete_object(image_id)
        except StorageError as exc:
            raise StorageError(
                message=f"error replacing file: {exc.message}",
                error_code=ERROR_CODE_IMAGE_REPLACE_FAILED,
                details={"image_id": image_id},
            ) from exc

        try:
            self._uploader.store(upload)
        except StorageError:
            logger.error(
                "Image deleted but replacement upload failed",
                extra={"image_id": image_id, "file_name": upload.filename},
            )
            raise

        logger.info(
            "Image replaced successfully",
            extra={"image_id": image_id, "file_name": upload.filename},
        )
