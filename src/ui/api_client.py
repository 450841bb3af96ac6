"""API client for communicating with the FastAPI backend."""

import logging
import os

import httpx

logger = logging.getLogger(__name__)


class APIClient:
    """Client for the blog generation API."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API server. If not provided, uses API_URL env var
                     or defaults to http://localhost:8000.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url or os.environ.get("API_URL", "http://localhost:8000")
        self.timeout = 120.0  # 2 minutes for LLM operations
        self.transport = transport

    def _client(self, timeout: float) -> httpx.Client:
        return httpx.Client(timeout=timeout, transport=self.transport)

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            with self._client(timeout=5.0) as client:
                response = client.get(f"{self.base_url}/health")
                return response.status_code == 200
        except httpx.RequestError:
            return False

    def generate_blog(self, topic: str, tone: str) -> str:
        """Generate a blog post.

        Args:
            topic: Blog topic.
            tone: Writing tone.

        Returns:
            Generated blog text exactly as returned by the server.

        Raises:
            httpx.HTTPStatusError: If the server responds with a non-2xx status.
            httpx.RequestError: If the request cannot be sent.
        """
        with self._client(timeout=self.timeout) as client:
            try:
                response = client.post(
                    f"{self.base_url}/api/blog",
                    json={"topic": topic, "tone": tone},
                    headers={"Content-Type": "application/json"},
                )
            except httpx.RequestError as e:
                logger.error(f"Request error during blog generation: {e}")
                raise
            response.raise_for_status()
            return response.text
