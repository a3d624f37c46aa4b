"""
Link Preview API Server

FastAPI application providing endpoints for:
- Fetching a URL and extracting its link preview
- Extracting a link preview from supplied HTML
- Health check

Run with: uvicorn link_preview.server:app --port 5005
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .config import config, state
from .fetcher import Fetcher
from .rate_limit import setup_rate_limiting
from .routes import misc_router, preview_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize application resources."""
    logging.basicConfig(level=config.LOG_LEVEL.upper())

    # Skip if already initialized (e.g., by tests)
    if state.fetcher is None:
        state.fetcher = Fetcher(
            timeout=config.FETCH_TIMEOUT,
            user_agent=config.USER_AGENT,
            max_bytes=config.FETCH_MAX_BYTES,
        )
        logger.info(
            f"Fetcher initialized (timeout: {config.FETCH_TIMEOUT}s, "
            f"max size: {config.FETCH_MAX_BYTES} bytes)"
        )

    if not config.AUTH_API_KEY:
        logger.warning("AUTH_API_KEY not set; the API is open to all clients.")

    yield


app = FastAPI(
    title="Link Preview API",
    version=__version__,
    lifespan=lifespan
)

setup_rate_limiting(app, config.RATE_LIMIT_PER_MINUTE)

# Include routers
app.include_router(misc_router)
app.include_router(preview_router)
