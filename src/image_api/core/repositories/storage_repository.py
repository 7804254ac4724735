"""Abstract contract for image file storage."""

from abc import ABC, abstractmethod
from typing import BinaryIO

from image_api.core.models.image import StoredObject


class ImageStorageRepository(ABC):
    """Contract for storing and retrieving image files.

    Implementations could be S3, GCS, local disk, etc.
    Handlers depend on this interface, not the implementation.
    Implementations must be safe to call from several request threads at once.
    """

    @abstractmethod
    def list_objects(self) -> list[StoredObject]:
        """List every stored object, content included.

        Returns:
            Stored objects in backend order

        Raises:
            StorageError: If listing or reading any object fails
        """

    @abstractmethod
    def read_object(self, object_id: str) -> list[StoredObject]:
        """Read a single object by id.

        Args:
            object_id: Object name as exposed by the API

        Returns:
            A list with the object, or an empty list when it does not exist

        Raises:
            StorageError: If the read fails for any other reason
        """

    @abstractmethod
    def create_object(
        self,
        name: str,
        content: BinaryIO,
        *,
        content_type: str,
    ) -> None:
        """Store ``content`` under ``name``.

        Args:
            name: Object name
            content: Readable binary stream positioned at the start
            content_type: MIME type to record with the object

        Raises:
            StorageError: If the upload fails
        """

    @abstractmethod
    def delete_object(self, object_id: str) -> None:
        """Delete an object by id.

        Args:
            object_id: Object name as exposed by the API

        Raises:
            StorageError: If the backend reports a failure
        """

    @abstractmethod
    def close(self) -> None:
        """Release backend connections."""
