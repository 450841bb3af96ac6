"""LangChain chains for blog generation."""

from src.chains.blog_writer import BlogWriterChain, build_blog_prompt

__all__ = [
    "BlogWriterChain",
    "build_blog_prompt",
]
