"""API request and response models."""

from enum import Enum

from pydantic import BaseModel, Field


class Tone(str, Enum):
    """Writing tones offered by the page."""

    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"
    FUNNY = "funny"
    CASUAL = "casual"
    ACADEMIC = "academic"
    INSPIRATIONAL = "inspirational"


DEFAULT_TONE = Tone.FRIENDLY


class BlogRequest(BaseModel):
    """Request model for blog generation.

    The tone is usually one of ``Tone`` but any label is accepted and passed
    through to the prompt as-is.
    """

    topic: str = Field(min_length=1, description="Blog topic")
    tone: str = Field(description="Writing tone label")


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: str = Field(description="Error detail")
