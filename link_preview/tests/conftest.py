"""
Pytest fixtures for link preview tests.
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from link_preview.config import state
from link_preview.fetcher import FetchResult
from link_preview.html import html_from_bytes
from link_preview.rate_limit import limiter
from link_preview.server import app

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    """Read an HTML fixture as raw bytes."""
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture
def full_featured_html() -> bytes:
    return load_fixture("full_featured.html")


@pytest.fixture
def full_featured_document(full_featured_html):
    return html_from_bytes(full_featured_html)


@pytest.fixture
def youtube_html() -> bytes:
    return load_fixture("youtube_video.html")


@pytest.fixture
def fake_fetcher():
    """A fetcher double whose fetch() returns a canned document."""
    fetcher = AsyncMock()
    fetcher.fetch.return_value = FetchResult(
        url="https://example.com/",
        final_url="https://example.com/",
        status=200,
        content=load_fixture("full_featured.html"),
        content_type="text/html; charset=utf-8",
    )
    return fetcher


@pytest.fixture
def client(fake_fetcher):
    """Create a test client with a fake fetcher and a fresh rate limit."""
    original_fetcher = state.fetcher
    state.fetcher = fake_fetcher
    limiter.reset()

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    state.fetcher = original_fetcher
