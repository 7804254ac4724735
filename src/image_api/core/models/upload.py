"""Pydantic model for an uploaded image file."""

from pathlib import PurePosixPath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ImageUploadRequest(BaseModel):
    """Validation model for the ``myFile`` part of a multipart upload."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    filename: str = Field(..., min_length=1, max_length=1024, description="Uploaded file name")
    content_type: str = Field("", description="Content-Type header of the file part, kept verbatim")
    size: int = Field(..., ge=0, description="File size in bytes")
    file: Any = Field(..., exclude=True, description="Readable binary stream")

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, value: str) -> str:
        """Keep only the final path component; some clients send full paths."""
        name = PurePosixPath(value.strip().replace("\\", "/")).name.strip()
        if not name or name in {".", ".."}:
            raise ValueError("filename must not be blank")
        return name
