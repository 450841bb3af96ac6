"""Submit flow for the blog generation page."""

import concurrent.futures
import logging
from collections.abc import Callable

import httpx

from src.ui.api_client import APIClient
from src.ui.state import (
    DEFAULT_ERROR_MESSAGE,
    TYPING_INTERVAL_SECONDS,
    GenerationState,
    InvalidTransitionError,
)

logger = logging.getLogger(__name__)


def failure_message(error: BaseException) -> str:
    """Derive the message shown to the user for a failed request.

    Args:
        error: Exception raised while calling the API.

    Returns:
        "Server responded with <status>" for HTTP errors, otherwise the
        exception message, or a generic fallback if it has none.
    """
    if isinstance(error, httpx.HTTPStatusError):
        return f"Server responded with {error.response.status_code}"
    return str(error) or DEFAULT_ERROR_MESSAGE


class BlogPageController:
    """Drives GenerationState through one submission at a time.

    The pending request is kept on the controller until its result has been
    applied to the state, so a page that stops waiting (e.g. a rerun) can
    resume with ``wait`` instead of sending a second request.
    """

    def __init__(
        self,
        client: APIClient | None = None,
        state: GenerationState | None = None,
        typing_interval: float = TYPING_INTERVAL_SECONDS,
    ):
        self.client = client or APIClient()
        self.state = state or GenerationState()
        self.typing_interval = typing_interval
        self._executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
        self._pending: concurrent.futures.Future[str] | None = None

    @property
    def is_pending(self) -> bool:
        """Whether a request has been sent and its result not yet applied."""
        return self._pending is not None

    def select_tone(self, tone: str) -> None:
        if self.is_pending:
            raise InvalidTransitionError("Cannot change tone while a blog post is being generated")
        self.state.tone = tone

    def start(self, topic: str | None = None) -> concurrent.futures.Future[str]:
        """Enter Submitting and send the request without waiting for it.

        Args:
            topic: New topic value. Keeps the current one if None.

        Returns:
            Future resolving to the generated text.

        Raises:
            InvalidTransitionError: If a request is already in flight.
            ValueError: If the topic is empty.
        """
        if self.is_pending or self.state.is_generating:
            raise InvalidTransitionError("A blog post is already being generated")
        if topic is not None:
            self.state.topic = topic
        request = self.state.begin_submit()

        self._pending = self._executor.submit(
            self.client.generate_blog, request.topic, request.tone
        )
        return self._pending

    def wait(
        self,
        on_tick: Callable[[GenerationState], None] | None = None,
    ) -> GenerationState:
        """Wait for the pending request to settle and apply its result.

        While the request is in flight the typing flag flips every
        ``typing_interval`` seconds and ``on_tick`` is called so the caller
        can redraw the loading copy. If ``on_tick`` raises, the request stays
        pending and a later ``wait`` picks it up.

        Args:
            on_tick: Called with the state after each flip.

        Returns:
            The state, in Success or Failure once a request has settled.
        """
        future = self._pending
        if future is None:
            return self.state

        while True:
            done, _ = concurrent.futures.wait([future], timeout=self.typing_interval)
            if done:
                break
            self.state.toggle_typing()
            if on_tick is not None:
                on_tick(self.state)

        self._pending = None
        try:
            text = future.result()
        except Exception as e:
            message = failure_message(e)
            logger.error(f"Blog generation failed: {message}")
            self.state.fail(message)
        else:
            logger.info(f"Blog generated: {len(text)} chars")
            self.state.succeed(text)

        return self.state

    def submit(
        self,
        topic: str | None = None,
        on_tick: Callable[[GenerationState], None] | None = None,
    ) -> GenerationState:
        """Send one generation request and wait for it to settle.

        Args:
            topic: New topic value. Keeps the current one if None.
            on_tick: Called with the state after each typing flag flip.

        Returns:
            The state, now in Success or Failure.

        Raises:
            InvalidTransitionError: If a request is already in flight.
            ValueError: If the topic is empty.
        """
        self.start(topic)
        return self.wait(on_tick)
