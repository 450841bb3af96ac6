"""LLM factory for the blog writer.

Every generation goes to a single flash-tier Gemini model. Decoding
parameters are left at the provider defaults unless explicitly configured.
"""

from typing import Any

from langchain_google_vertexai import ChatVertexAI

from src.config import Settings, get_settings


def get_llm(
    settings: Settings | None = None,
    temperature: float | None = None,
) -> ChatVertexAI:
    """Get the LLM instance used for blog generation.

    Args:
        settings: Settings to read model configuration from. Defaults to
            the cached application settings.
        temperature: Override the configured temperature. If both are None,
            the provider default is used.

    Returns:
        ChatVertexAI instance configured with the blog model.

    Examples:
        >>> llm = get_llm()
        >>> llm.invoke("Write a haiku about the sea").content
    """
    settings = settings or get_settings()

    kwargs: dict[str, Any] = {
        "model_name": settings.llm_model,
        "location": settings.google_location,
        "max_retries": settings.llm_max_retries,
    }
    if settings.google_project_id:
        kwargs["project"] = settings.google_project_id

    # Only forward decoding overrides that were actually set
    temp = temperature if temperature is not None else settings.llm_temperature
    if temp is not None:
        kwargs["temperature"] = temp
    if settings.llm_max_output_tokens is not None:
        kwargs["max_output_tokens"] = settings.llm_max_output_tokens

    return ChatVertexAI(**kwargs)
