"""Pydantic models for delete image request."""

from pydantic import BaseModel, Field


class DeleteImageRequest(BaseModel):
    """Validation model for delete image request."""

    image_id: str = Field(
        ...,
        min_length=1,
        description="Image ID to delete",
    )
