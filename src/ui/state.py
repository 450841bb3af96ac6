"""State management for the blog generation page."""

from enum import Enum

from pydantic import BaseModel, Field

from src.api.models import DEFAULT_TONE, BlogRequest

TYPING_INTERVAL_SECONDS = 0.5
WRITING_COPY = "AI is writing your blog post..."
THINKING_COPY = "Thinking of the perfect words..."
DEFAULT_ERROR_MESSAGE = "An unknown error occurred"


class PagePhase(str, Enum):
    """Phases of the generation page."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


class InvalidTransitionError(RuntimeError):
    """Raised when an event is not allowed in the current phase."""


class GenerationState(BaseModel):
    """State for blog generation.

    Idle -> Submitting on submit, then Success or Failure when the request
    settles. Success and Failure go back to Submitting on the next submit.
    """

    topic: str = Field(default="", description="Blog topic")
    tone: str = Field(default=DEFAULT_TONE.value, description="Selected tone")
    phase: PagePhase = Field(default=PagePhase.IDLE, description="Current phase")
    blog: str = Field(default="", description="Generated blog text")
    error_message: str | None = Field(default=None, description="Error message")
    is_typing: bool = Field(default=False, description="Alternating loading copy flag")

    @property
    def is_generating(self) -> bool:
        """Whether a request is in flight."""
        return self.phase == PagePhase.SUBMITTING

    @property
    def can_submit(self) -> bool:
        """Whether the submit control should be enabled."""
        return not self.is_generating and bool(self.topic.strip())

    @property
    def loading_copy(self) -> str:
        """Loading text for the current typing flag."""
        return WRITING_COPY if self.is_typing else THINKING_COPY

    def begin_submit(self) -> BlogRequest:
        """Enter Submitting and return the request to send.

        Raises:
            InvalidTransitionError: If a request is already in flight.
            ValueError: If the topic is empty.
        """
        if self.is_generating:
            raise InvalidTransitionError("A blog post is already being generated")
        if not self.topic.strip():
            raise ValueError("Topic is required")

        self.phase = PagePhase.SUBMITTING
        self.blog = ""
        self.error_message = None
        self.is_typing = False
        return BlogRequest(topic=self.topic, tone=self.tone)

    def succeed(self, text: str) -> None:
        self._require_submitting("succeed")
        self.phase = PagePhase.SUCCESS
        self.blog = text
        self.is_typing = False

    def fail(self, message: str | None) -> None:
        self._require_submitting("fail")
        self.phase = PagePhase.FAILURE
        self.error_message = message or DEFAULT_ERROR_MESSAGE
        self.is_typing = False

    def toggle_typing(self) -> None:
        """Flip the loading copy flag. No-op outside Submitting."""
        if self.is_generating:
            self.is_typing = not self.is_typing

    def dismiss_error(self) -> None:
        """Hide the error message without leaving Failure."""
        self.error_message = None

    def _require_submitting(self, event: str) -> None:
        if not self.is_generating:
            raise InvalidTransitionError(f"Cannot {event} while {self.phase.value}")
