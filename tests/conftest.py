"""Pytest configuration and fixtures."""

import os

import pytest


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    # Set required environment variables for testing
    os.environ.setdefault("GOOGLE_PROJECT_ID", "test-project")
    os.environ.setdefault("GOOGLE_LOCATION", "us-central1")
    os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from src.config import Settings

    return Settings(
        google_project_id="test-project",
        google_location="us-central1",
        llm_model="gemini-2.0-flash",
    )


@pytest.fixture
def sample_blog() -> str:
    """A plain-text blog post as the model would return it."""
    return (
        "My Great Blog\n\n"
        "Intro paragraph about the topic.\n\n"
        "Section One\n"
        "Some detailed content.\n\n"
        "Conclusion\n"
        "Wrapping it all up."
    )
