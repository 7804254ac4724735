"""Shared image models and the stored object -> image mapping."""

import base64
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, StrictBytes, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from image_api.core.models.errors import ImageMappingError
from image_api.core.utils.constants import FALLBACK_CONTENT_TYPE
from image_api.core.utils.mime import detect_mime_type


class StoredObject(BaseModel):
    """A file as reported by the object store."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(..., min_length=1, description="Object name, also used as the image id")
    content: StrictBytes | None = Field(None, description="Object bytes, None when unreadable")
    content_type: StrictStr | None = Field(None, description="Content type reported by the store")
    size: StrictInt | None = Field(None, description="Object size in bytes")
    updated_at: StrictStr | None = Field(None, description="ISO-8601 last modified timestamp (UTC)")


class Image(BaseModel):
    """Image returned by the Image API."""

    id: StrictStr = Field(..., description="Image identifier")
    name: StrictStr = Field(..., description="Image file name")
    content: StrictStr = Field(..., description="Base64 encoded image content")
    content_type: StrictStr = Field(..., description="MIME type of the image (e.g. image/png)")
    size: StrictInt = Field(..., description="Image size in bytes")
    updated_at: StrictStr | None = Field(None, description="ISO-8601 last update timestamp (UTC)")

    def decoded_content(self) -> bytes:
        return base64.b64decode(self.content)


def _resolve_content_type(obj: StoredObject, content: bytes) -> str:
    if obj.content_type and obj.content_type != FALLBACK_CONTENT_TYPE:
        return obj.content_type

    try:
        return detect_mime_type(content)
    except ValueError:
        return FALLBACK_CONTENT_TYPE


def image_from_object(obj: StoredObject) -> Image:
    """Build an Image from a single stored object.

    Raises:
        ImageMappingError: If the object content is missing or the image
            cannot be constructed.
    """
    if obj.content is None:
        raise ImageMappingError(
            message=f"content of {obj.name} could not be read",
            details={"name": obj.name},
        )

    try:
        return Image(
            id=obj.name,
            name=obj.name,
            content=base64.b64encode(obj.content).decode("ascii"),
            content_type=_resolve_content_type(obj, obj.content),
            size=len(obj.content),
            updated_at=obj.updated_at,
        )
    except PydanticValidationError as exc:
        raise ImageMappingError(
            message=f"{obj.name} is not a valid image: {exc.error_count()} invalid field(s)",
            details={"name": obj.name},
        ) from exc


def images_from_objects(objects: Iterable[StoredObject]) -> list[Image]:
    """Map stored objects to images, preserving order.

    Fails on the first object that cannot be mapped; no partial list is
    returned.
    """
    return [image_from_object(obj) for obj in objects]
