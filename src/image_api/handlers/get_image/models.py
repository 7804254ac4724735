from pydantic import BaseModel, Field, StrictStr


class GetImageRequest(BaseModel):
    """Validation model for get image request.

    The id is used exactly as received; surrounding whitespace is part of it.
    """

    image_id: StrictStr = Field(
        ...,
        min_length=1,
        description="Image ID to retrieve",
    )
