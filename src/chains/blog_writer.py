"""Blog writer chain: turns a topic and tone into a plain-text blog post."""

import logging

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate
from langchain_google_vertexai import ChatVertexAI

from src.llm import get_llm

logger = logging.getLogger(__name__)


BLOG_PROMPT = """
You are a professional blog writer.

Write a detailed blog post on the topic: "{topic}" in a "{tone}" tone.

The blog must include:
- A catchy title
- An introduction paragraph
- 3 to 5 clear sections with detailed content
- A strong conclusion

Use only plain text. Do not use Markdown, HTML, or any formatting symbols. Do not explain anything. Return only the blog content.
"""

BLOG_PROMPT_TEMPLATE = PromptTemplate.from_template(BLOG_PROMPT)


def build_blog_prompt(topic: str, tone: str) -> str:
    """Render the instruction sent to the model.

    Both values are embedded verbatim.

    Args:
        topic: Blog topic as typed by the user.
        tone: Writing tone label.

    Returns:
        The full prompt string.
    """
    return BLOG_PROMPT_TEMPLATE.format(topic=topic, tone=tone)


class BlogWriterChain:
    """Chain for generating a complete blog post in one model call."""

    def __init__(self, llm: ChatVertexAI | None = None):
        self.llm = llm or get_llm()
        self.prompt = BLOG_PROMPT_TEMPLATE
        self.chain = self.prompt | self.llm | StrOutputParser()

    def generate(self, topic: str, tone: str) -> str:
        """Generate a blog post.

        Args:
            topic: Blog topic.
            tone: Writing tone.

        Returns:
            The generated text, unmodified.
        """
        logger.info(f"Generating blog post: topic={topic!r} tone={tone!r}")
        return self.chain.invoke({"topic": topic, "tone": tone})

    async def agenerate(self, topic: str, tone: str) -> str:
        """Async version of generate."""
        logger.info(f"Generating blog post: topic={topic!r} tone={tone!r}")
        return await self.chain.ainvoke({"topic": topic, "tone": tone})
