"""Notification payload model."""

from pydantic import BaseModel, Field, StrictStr


class Message(BaseModel):
    """Additional information communicated to the API consumer."""

    text: StrictStr = Field(..., description="Short notification text")
    details: StrictStr = Field(..., description="Human readable details")
