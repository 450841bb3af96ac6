"""Utility functions for the blog generator pages."""

import json
from dataclasses import dataclass

from src.api.models import Tone


@dataclass(frozen=True)
class ToneOption:
    """A selectable writing tone."""

    value: str
    label: str
    emoji: str


TONE_OPTIONS: tuple[ToneOption, ...] = (
    ToneOption(Tone.FRIENDLY.value, "Friendly", "😊"),
    ToneOption(Tone.PROFESSIONAL.value, "Professional", "👔"),
    ToneOption(Tone.FUNNY.value, "Humorous", "😂"),
    ToneOption(Tone.CASUAL.value, "Casual", "👕"),
    ToneOption(Tone.ACADEMIC.value, "Academic", "🎓"),
    ToneOption(Tone.INSPIRATIONAL.value, "Inspirational", "✨"),
)

TONE_LABEL_MAP = {option.value: f"{option.emoji} {option.label}" for option in TONE_OPTIONS}


def format_tone_label(tone: str) -> str:
    """Convert a tone value to its display label.

    Args:
        tone: Tone value, e.g. "funny".

    Returns:
        Label with emoji, or the value itself for free-text tones.
    """
    return TONE_LABEL_MAP.get(tone, tone)


def _js_string(text: str) -> str:
    # "</" would terminate the surrounding <script> block
    return json.dumps(text).replace("</", "<\\/")


def clipboard_script(text: str) -> str:
    """Build an HTML snippet that copies text to the clipboard.

    The snippet runs inside a component iframe, so it targets the parent
    window's clipboard.

    Args:
        text: Text to copy.

    Returns:
        HTML with an inline script.
    """
    return (
        "<script>"
        f"window.parent.navigator.clipboard.writeText({_js_string(text)});"
        "</script>"
    )


def print_script() -> str:
    """Build an HTML snippet that opens the browser print dialog."""
    return "<script>window.parent.print();</script>"
