"""
Configuration and application state management.
"""

import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from .fetcher import Fetcher

# Load environment variables
load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (compatible; LinkPreviewBot/1.0; "
    "+https://github.com/link-preview/link-preview)"
)


class Config:
    """Application configuration from environment."""
    PORT: int = int(os.getenv("PORT", "5005"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Fetching
    FETCH_TIMEOUT: int = int(os.getenv("FETCH_TIMEOUT", "15"))  # seconds
    FETCH_MAX_BYTES: int = int(os.getenv("FETCH_MAX_BYTES", str(5 * 1024 * 1024)))
    USER_AGENT: str = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)

    # API protection
    AUTH_API_KEY: str = os.getenv("AUTH_API_KEY", "")
    RATE_LIMIT_PER_MINUTE: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "60"))


config = Config()


class AppState:
    """Shared application state."""
    fetcher: "Fetcher | None" = None


state = AppState()
