"""
Preview routes: extract link previews from a URL or supplied markup.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..auth import require_api_key
from ..config import state
from ..exceptions import DocumentTooLarge, FetchError, InvalidEncoding, SSRFError
from ..fetcher import preview_url
from ..preview import LinkPreview
from ..rate_limit import limiter, preview_limit
from ..schemas import LinkPreviewResponse, PreviewRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/preview",
    tags=["preview"],
    dependencies=[Depends(require_api_key)]
)


@router.get("")
@limiter.limit(preview_limit)
async def preview_from_url(
    request: Request,
    url: str = Query(..., description="Page to fetch and preview")
) -> LinkPreviewResponse:
    """Fetch a page and extract its link preview."""
    if not state.fetcher:
        raise HTTPException(status_code=503, detail="Fetcher not configured")

    try:
        preview = await preview_url(url, fetcher=state.fetcher)
    except SSRFError as e:
        logger.info(f"Refused to fetch {url}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e))
    except FetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except InvalidEncoding as e:
        raise HTTPException(status_code=422, detail=str(e))

    return LinkPreviewResponse.from_preview(preview)


@router.post("")
@limiter.limit(preview_limit)
async def preview_from_html(request: Request, payload: PreviewRequest) -> LinkPreviewResponse:
    """Extract a link preview from supplied HTML."""
    preview = LinkPreview.from_str(payload.html, url=payload.url)
    return LinkPreviewResponse.from_preview(preview)


@router.post("/raw")
@limiter.limit(preview_limit)
async def preview_from_raw(
    request: Request,
    url: str | None = Query(default=None, description="Source URL of the document")
) -> LinkPreviewResponse:
    """Extract a link preview from a raw document body (must be UTF-8)."""
    body = await request.body()
    try:
        preview = LinkPreview.from_bytes(body, url=url)
    except InvalidEncoding as e:
        raise HTTPException(status_code=422, detail=str(e))
    return LinkPreviewResponse.from_preview(preview)
