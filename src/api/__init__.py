"""API module for FastAPI REST endpoints."""

from src.api.models import (
    DEFAULT_TONE,
    BlogRequest,
    ErrorResponse,
    Tone,
)

__all__ = [
    "DEFAULT_TONE",
    "BlogRequest",
    "ErrorResponse",
    "Tone",
]
