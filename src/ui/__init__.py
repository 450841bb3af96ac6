"""UI module for the blog generation page."""

from src.ui.api_client import APIClient
from src.ui.controller import BlogPageController, failure_message
from src.ui.state import GenerationState, InvalidTransitionError, PagePhase
from src.ui.utils import (
    TONE_OPTIONS,
    ToneOption,
    clipboard_script,
    format_tone_label,
    print_script,
)

__all__ = [
    "APIClient",
    "BlogPageController",
    "GenerationState",
    "InvalidTransitionError",
    "PagePhase",
    "TONE_OPTIONS",
    "ToneOption",
    "clipboard_script",
    "failure_message",
    "format_tone_label",
    "print_script",
]
