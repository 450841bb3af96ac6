"""Command-line entry point for blog generation."""

import argparse
import logging
import sys

from src.api.models import DEFAULT_TONE, Tone
from src.ui.utils import format_tone_label

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def generate(topic: str, tone: str, api_url: str | None = None) -> str:
    """Generate a blog post, either through the API or directly.

    Args:
        topic: Blog topic.
        tone: Writing tone.
        api_url: Base URL of a running API server. Calls the model directly if None.

    Returns:
        Generated blog text.
    """
    if api_url:
        from src.ui.api_client import APIClient

        return APIClient(base_url=api_url).generate_blog(topic, tone)

    from src.chains.blog_writer import BlogWriterChain

    return BlogWriterChain().generate(topic, tone)


def main(argv: list[str] | None = None):
    """Main function for blog generation CLI."""
    parser = argparse.ArgumentParser(description="Generate a plain-text blog post with Gemini")
    parser.add_argument(
        "--topic",
        type=str,
        required=True,
        help="Blog topic, e.g. 'The Future of Renewable Energy'",
    )
    parser.add_argument(
        "--tone",
        type=str,
        default=DEFAULT_TONE.value,
        help=f"Writing tone ({', '.join(t.value for t in Tone)} or free text)",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Send the request to a running API server instead of calling the model directly",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.topic.strip():
        logger.error("Topic must not be empty")
        sys.exit(1)

    try:
        logger.info(f"Writing about {args.topic!r} in a {format_tone_label(args.tone)} tone")
        text = generate(args.topic, args.tone, api_url=args.api_url)
    except Exception as e:
        logger.error(f"Generation failed: {e}")
        sys.exit(1)

    print(text)


if __name__ == "__main__":
    main()
