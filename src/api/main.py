"""FastAPI application for blog generation API."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from src.api.models import DEFAULT_TONE, BlogRequest, ErrorResponse
from src.chains.blog_writer import BlogWriterChain
from src.config import settings
from src.ui.state import THINKING_COPY
from src.ui.utils import TONE_OPTIONS

# Configure logging for Cloud Run
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global instance (initialized on startup)
blog_writer: BlogWriterChain | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and cleanup resources."""
    global blog_writer

    logger.info("Initializing API resources...")
    blog_writer = BlogWriterChain()

    yield

    logger.info("Cleaning up API resources...")


app = FastAPI(
    title="AI Blog Generator API",
    description="Generate ready-to-publish plain-text blog posts from a topic and tone",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure templates and static files
BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
app.state.templates = templates


@app.get("/")
async def index(request: Request):
    """Render the blog generator page."""
    context = {
        "tones": TONE_OPTIONS,
        "default_tone": DEFAULT_TONE.value,
        "loading_copy": THINKING_COPY,
    }
    return templates.TemplateResponse(request, "index.html", context)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post(
    "/api/blog",
    response_class=PlainTextResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_blog(body: BlogRequest) -> PlainTextResponse:
    """Generate a blog post from a topic and tone.

    Args:
        body: Generation request with topic and tone.

    Returns:
        The generated blog post as plain text.
    """
    if blog_writer is None:
        raise HTTPException(status_code=500, detail="Blog writer not initialized")

    try:
        text = await blog_writer.agenerate(body.topic, body.tone)
    except Exception as e:
        logger.exception("Error generating blog post")
        raise HTTPException(status_code=500, detail=str(e)) from e

    logger.info(f"Generated blog post: {len(text)} chars")
    return PlainTextResponse(text)


@app.post("/ui/blog")
async def ui_generate_blog(request: Request):
    """Generate a blog post and return an HTML partial for HTMX.

    A blank topic renders the error partial. Provider failures return
    HTTP 500, which the page script reports as "Server responded with 500".

    Args:
        request: FastAPI request with form data.

    Returns:
        HTML partial with the generated text or an error message.
    """
    if blog_writer is None:
        raise HTTPException(status_code=500, detail="Blog writer not initialized")

    form_data = await request.form()
    topic = str(form_data.get("topic", ""))
    tone = str(form_data.get("tone") or DEFAULT_TONE.value)

    if not topic.strip():
        return templates.TemplateResponse(
            request,
            "partials/error.html",
            {"error": "Please enter a blog topic"},
        )

    try:
        text = await blog_writer.agenerate(topic, tone)
    except Exception as e:
        logger.exception("Error generating blog post via UI")
        raise HTTPException(status_code=500, detail=str(e)) from e

    return templates.TemplateResponse(request, "partials/result.html", {"blog": text})
