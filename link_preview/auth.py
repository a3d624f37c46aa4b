"""
Optional API key for the preview routes.

With AUTH_API_KEY unset the preview API is open, which suits running it
next to a chat or feed backend on a private network. Once a key is set,
preview requests must send it in X-API-Key; /status stays public.
"""

import secrets

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from .config import config

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def _reject(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "ApiKey"},
    )


def require_api_key(provided: str | None = Security(api_key_header)) -> None:
    """FastAPI dependency guarding the preview routes."""
    expected = config.AUTH_API_KEY
    if not expected:
        return

    if not provided:
        raise _reject("Preview API requires an X-API-Key header")
    if not secrets.compare_digest(provided.encode(), expected.encode()):
        raise _reject("Invalid API key")
