"""Pydantic models for replace image request."""

from pydantic import BaseModel, Field


class ReplaceImageRequest(BaseModel):
    """Validation model for the id of the image being replaced."""

    image_id: str = Field(
        ...,
        min_length=1,
        description="Image ID to replace",
    )
