"""
Miscellaneous routes: health check.
"""

from fastapi import APIRouter

from .. import __version__
from ..profiles import DEFAULT_REGISTRY
from ..schemas import StatusResponse

router = APIRouter(tags=["misc"])


@router.get("/status")
async def health_check() -> StatusResponse:
    """API health check."""
    return StatusResponse(
        status="ok",
        version=__version__,
        profiles=DEFAULT_REGISTRY.names,
    )
