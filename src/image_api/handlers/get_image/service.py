"""
Business logic for image retrieval.
"""

from aws_lambda_powertools import Logger

from image_api.core.models.errors import ImageMappingError, StorageError
from image_api.core.models.image import Image, images_from_objects
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.constants import ERROR_CODE_IMAGE_READ_FAILED, SERVICE_NAME

logger = Logger(service=SERVICE_NAME, UTC=True)


class GetService:
    """Application service responsible for reading a single image."""

    def __init__(self, storage: ImageStorageRepository) -> None:
        self.storage = storage

    def get_image(self, image_id: str) -> Image | None:
        """
        Read an image by id.

        Args:
            image_id: Object name of the image

        Returns:
            The image, or None when no object has this id

        Raises:
            StorageError: If the storage read fails
            ImageMappingError: If the object cannot be converted
        """
        logger.debug("Reading image", extra={"image_id": image_id})

        try:
            objects = self.storage.read_object(image_id)
        except StorageError as exc:
            raise StorageError(
                message=f"failed to read files {image_id}: {exc.message}",
                error_code=ERROR_CODE_IMAGE_READ_FAILED,
                details={"image_id": image_id},
            ) from exc

        try:
            images = images_from_objects(objects)
        except ImageMappingError as exc:
            raise ImageMappingError(
                message=f"failed to convert files to images: {exc.message}",
                details={"image_id": image_id},
            ) from exc

        if not images:
            logger.info("Image not found", extra={"image_id": image_id})
            return None

        return images[0]
