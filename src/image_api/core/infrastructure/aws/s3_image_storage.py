"""S3-backed implementation of ImageStorageRepository."""

from collections.abc import Mapping
from typing import Any, BinaryIO

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from image_api.core.infrastructure.adapters.s3_adapter import S3AdapterProtocol
from image_api.core.models.errors import StorageError
from image_api.core.models.image import StoredObject
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.constants import SERVICE_NAME
from image_api.core.utils.time import to_utc_iso

logger = Logger(service=SERVICE_NAME, UTC=True)

NOT_FOUND_CODES = frozenset({"NoSuchKey", "NotFound", "404"})


def _error_code(exc: ClientError) -> str:
    return str(exc.response.get("Error", {}).get("Code", ""))


def _describe(exc: Exception) -> str:
    """Render a boto error as ``Code: message`` for API consumers."""
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = error.get("Code", "Unknown")
        message = error.get("Message") or str(exc)
        return f"{code}: {message}"
    return str(exc)


class S3ImageStorage(ImageStorageRepository):
    """Image storage implementation backed by Amazon S3."""

    def __init__(self, adapter: S3AdapterProtocol) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3 = adapter

    def _key(self, object_id: str) -> str:
        return f"{self._s3.key_prefix}{object_id}"

    def _object_id(self, key: str) -> str:
        prefix = self._s3.key_prefix
        return key[len(prefix):] if prefix and key.startswith(prefix) else key

    def _to_stored_object(self, key: str, response: Mapping[str, Any]) -> StoredObject:
        content: bytes | None
        try:
            content = response["Body"].read()
        except (BotoCoreError, OSError):
            logger.warning("Unable to read object body", extra={"key": key}, exc_info=True)
            content = None

        return StoredObject(
            name=self._object_id(key),
            content=content,
            content_type=response.get("ContentType"),
            size=response.get("ContentLength"),
            updated_at=to_utc_iso(response.get("LastModified")),
        )

    def list_objects(self) -> list[StoredObject]:
        """List all objects in the bucket with their content."""
        logger.debug("Listing objects")

        objects: list[StoredObject] = []
        try:
            for key in self._s3.list_keys():
                if key.endswith("/"):
                    # folder placeholder, not an image
                    logger.debug("Skipping folder placeholder", extra={"key": key})
                    continue
                try:
                    response = self._s3.get_object(key=key)
                except ClientError as exc:
                    if _error_code(exc) in NOT_FOUND_CODES:
                        # removed between list and get
                        logger.warning("Listed object disappeared", extra={"key": key})
                        continue
                    raise
                objects.append(self._to_stored_object(key, response))

        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 list failed", extra={"error": _describe(exc)})
            raise StorageError(
                message=_describe(exc),
                details={"operation": "list"},
            ) from exc

        logger.info("Objects listed", extra={"count": len(objects)})
        return objects

    def read_object(self, object_id: str) -> list[StoredObject]:
        """Read one object; an empty list means it does not exist."""
        key = self._key(object_id)
        logger.debug("Reading object", extra={"key": key})

        try:
            response = self._s3.get_object(key=key)

        except ClientError as exc:
            if _error_code(exc) in NOT_FOUND_CODES:
                logger.info("Object not found", extra={"key": key})
                return []

            logger.error("S3 read failed", extra={"key": key})
            raise StorageError(
                message=_describe(exc),
                details={"key": key},
            ) from exc

        except BotoCoreError as exc:
            logger.exception("Unexpected error reading object")
            raise StorageError(
                message=_describe(exc),
                details={"key": key},
            ) from exc

        return [self._to_stored_object(key, response)]

    def create_object(
        self,
        name: str,
        content: BinaryIO,
        *,
        content_type: str,
    ) -> None:
        """Upload ``content`` to S3 under ``name``."""
        key = self._key(name)
        logger.debug("Uploading object", extra={"key": key, "content_type": content_type})

        try:
            self._s3.put_object(key=key, body=content, content_type=content_type)
            logger.info("Object uploaded successfully", extra={"key": key})

        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 upload failed", extra={"key": key})
            raise StorageError(
                message=_describe(exc),
                details={"key": key},
            ) from exc

    def delete_object(self, object_id: str) -> None:
        """Delete an object from S3."""
        key = self._key(object_id)
        logger.debug("Deleting object", extra={"key": key})

        try:
            self._s3.delete_object(key=key)
            logger.info("Object deleted successfully", extra={"key": key})

        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 deletion failed", extra={"key": key})
            raise StorageError(
                message=_describe(exc),
                details={"key": key},
            ) from exc

    def close(self) -> None:
        logger.debug("Closing S3 client")
        self._s3.close()
