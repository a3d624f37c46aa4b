"""
Document Fetcher - retrieve raw HTML bytes for preview extraction.

Handles:
- HTTP fetching with browser-like headers
- SSRF protection: every redirect hop and every resolved address is checked
- Size limits on the downloaded document

Fetching is separate from extraction: the fetcher only returns bytes, and
preview_url() hands them to LinkPreview.from_bytes().
"""

import asyncio
import logging
from dataclasses import dataclass
from urllib.parse import urljoin

import aiohttp

from .config import config
from .exceptions import DocumentTooLarge, FetchError
from .preview import LinkPreview
from .url_validator import GuardedResolver, validate_url

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
MAX_REDIRECTS = 10
REDIRECT_STATUSES = {301, 302, 303, 307, 308}


@dataclass
class FetchResult:
    """Raw result of fetching a document."""
    url: str
    final_url: str
    status: int
    content: bytes
    content_type: str | None = None


class Fetcher:
    """Fetches raw documents from the web."""

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
        max_bytes: int | None = None,
        resolve_dns: bool = True,
    ):
        self.timeout = timeout or config.FETCH_TIMEOUT
        self.user_agent = user_agent or config.USER_AGENT
        self.max_bytes = max_bytes or config.FETCH_MAX_BYTES
        self.resolve_dns = resolve_dns
        self.headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch a document, following redirects one hop at a time.

        Every hop is validated before it is requested, so a public URL
        cannot redirect the fetcher onto an internal address.

        Args:
            url: The URL to fetch

        Returns:
            FetchResult with the raw body bytes

        Raises:
            SSRFError: If the URL or a redirect targets a blocked resource
            DocumentTooLarge: If the body exceeds max_bytes
            FetchError: On connection errors, non-2xx responses or too many redirects
        """
        connector = aiohttp.TCPConnector(resolver=GuardedResolver()) if self.resolve_dns else None
        current = url

        try:
            async with aiohttp.ClientSession(headers=self.headers, connector=connector) as session:
                for _ in range(MAX_REDIRECTS + 1):
                    # DNS lookups in validate_url block, keep them off the event loop
                    await asyncio.to_thread(validate_url, current, self.resolve_dns)

                    async with session.get(
                        current,
                        timeout=aiohttp.ClientTimeout(total=self.timeout),
                        allow_redirects=False
                    ) as resp:
                        location = resp.headers.get("Location")
                        if resp.status in REDIRECT_STATUSES and location:
                            current = urljoin(str(resp.url), location)
                            logger.debug(f"Following redirect to {current}")
                            continue

                        if resp.status >= 400:
                            raise FetchError(
                                f"Fetching {current} failed with HTTP {resp.status}",
                                url=url,
                                status=resp.status,
                            )
                        content = await self._read_limited(current, resp)
                        return FetchResult(
                            url=url,
                            final_url=str(resp.url),
                            status=resp.status,
                            content=content,
                            content_type=resp.headers.get("Content-Type"),
                        )
        except aiohttp.ClientError as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e
        except TimeoutError as e:
            logger.warning(f"Timed out fetching {url}")
            raise FetchError(f"Timed out fetching {url}", url=url) from e

        raise FetchError(f"Too many redirects fetching {url} (limit {MAX_REDIRECTS})", url=url)

    async def _read_limited(self, url: str, resp: aiohttp.ClientResponse) -> bytes:
        """Read the body, refusing anything larger than max_bytes."""
        if resp.content_length is not None and resp.content_length > self.max_bytes:
            raise DocumentTooLarge(
                f"Document at {url} is {resp.content_length} bytes (limit {self.max_bytes})",
                url=url,
                status=resp.status,
            )

        body = bytearray()
        async for chunk in resp.content.iter_chunked(CHUNK_SIZE):
            body.extend(chunk)
            if len(body) > self.max_bytes:
                raise DocumentTooLarge(
                    f"Document at {url} exceeds {self.max_bytes} bytes",
                    url=url,
                    status=resp.status,
                )
        return bytes(body)


async def preview_url(url: str, fetcher: Fetcher | None = None) -> LinkPreview:
    """
    Fetch a URL and extract its link preview.

    Site profiles are matched against the final URL after redirects.

    Raises:
        FetchError: If the document cannot be retrieved
        InvalidEncoding: If the document is not valid UTF-8
    """
    fetcher = fetcher or Fetcher()
    result = await fetcher.fetch(url)
    logger.debug(f"Fetched {len(result.content)} bytes from {result.final_url}")
    return LinkPreview.from_bytes(result.content, url=result.final_url)
