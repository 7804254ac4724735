"""Business logic for image deletion.

Deletion is passed straight to storage. Deleting an id that does not
exist is not special-cased; the outcome is whatever the backend reports.
"""

from aws_lambda_powertools import Logger

from image_api.core.models.message import Message
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.constants import SERVICE_NAME

logger = Logger(service=SERVICE_NAME, UTC=True)


class DeleteService:
    """Application service responsible for deleting images."""

    def __init__(self, storage: ImageStorageRepository) -> None:
        self.storage = storage

    def delete_image(self, image_id: str) -> Message:
        """Delete an image.

        Args:
            image_id: Unique identifier of the image to delete

        Returns:
            Confirmation message for the API consumer

        Raises:
            StorageError: If storage deletion fails
        """
        logger.debug("Starting image deletion", extra={"image_id": image_id})

        self.storage.delete_object(image_id)

        logger.info("Image deleted successfully", extra={"image_id": image_id})

        return Message(text="image deleted", details=f"image id: {image_id}")
