"""
Per-client rate limits on the preview routes.

Each preview request may trigger an outbound fetch, so the preview routes
carry a limit (RATE_LIMIT_PER_MINUTE, 0 disables it). Routes without a
@limiter.limit decorator, such as /status, are not limited.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from .config import config

limiter = Limiter(key_func=get_remote_address, storage_uri="memory://")


def preview_limit() -> str:
    """Current preview limit, read on every request so config changes apply."""
    return f"{max(config.RATE_LIMIT_PER_MINUTE, 1)}/minute"


def _too_many_previews(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={"detail": f"Too many preview requests for {request.url.path} ({exc.detail})"},
        headers={"Retry-After": "60"},
    )


def setup_rate_limiting(app: FastAPI, per_minute: int) -> None:
    """Install the limiter on an app; a non-positive limit turns it off."""
    limiter.enabled = per_minute > 0
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _too_many_previews)
