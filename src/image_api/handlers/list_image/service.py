"""Business logic for listing images.

This module reads every object from storage and converts the result
into API images, translating failures into domain-specific errors.
"""

from aws_lambda_powertools import Logger

from image_api.core.models.errors import ImageMappingError, StorageError
from image_api.core.models.image import Image, images_from_objects
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.constants import ERROR_CODE_IMAGE_LIST_FAILED, SERVICE_NAME

logger = Logger(service=SERVICE_NAME, UTC=True)


class ListService:
    """Application service responsible for listing images."""

    def __init__(self, storage: ImageStorageRepository) -> None:
        self.storage = storage

    def list_images(self) -> list[Image]:
        """Return every stored image.

        Raises:
            StorageError: If the storage listing fails
            ImageMappingError: If any object cannot be converted
        """
        logger.debug("Listing images")

        try:
            objects = self.storage.list_objects()
        except StorageError as exc:
            raise StorageError(
                message=f"failed to list files: {exc.message}",
                error_code=ERROR_CODE_IMAGE_LIST_FAILED,
                details=exc.details,
            ) from exc

        try:
            images = images_from_objects(objects)
        except ImageMappingError as exc:
            raise ImageMappingError(
                message=f"failed to convert files to images: {exc.message}",
                details=exc.details,
            ) from exc

        logger.info("Images listed", extra={"count": len(images)})
        return images
