"""
Link preview extraction engine.

Resolves title, description, image and domain for a document. Each field has
its own ordered list of sources, from structured metadata (Open Graph) down
to raw document content; the first source that yields a usable value wins.

Precedence:

- title: og:title, twitter:title, itemprop=name, <title>, <h1>, <h2>
- description: og:description, twitter:description, itemprop=description,
  <meta name="description">, <p>
- image: og:image, <link rel="image_src">, itemprop=image, twitter:image
- domain: <link rel="canonical">, og:url
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import SplitResult

from bs4 import BeautifulSoup

from .html import (
    find_link,
    find_meta_tag,
    first_inner_text,
    html_from_bytes,
    parse_document,
)
from .providers import (
    OpenGraphTag,
    SchemaMetaTag,
    TwitterMetaTag,
    find_og_tag,
    find_schema_tag,
    find_twitter_tag,
)
from .urls import domain_from_string, parse_absolute_url

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_present(candidates: Iterable[Callable[[], T | None]]) -> T | None:
    """Return the first candidate value that is not None or blank."""
    for candidate in candidates:
        value = candidate()
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _parsed(lookup: Callable[[], str | None], parse: Callable[[str | None], T | None]):
    return lambda: parse(lookup())


@dataclass(frozen=True)
class LinkPreview:
    """Metadata about a web page, suitable for rendering a link preview."""
    title: str | None = None
    description: str | None = None
    domain: str | None = None
    image_url: SplitResult | None = None

    @property
    def image_url_str(self) -> str | None:
        """String form of image_url."""
        if self.image_url is None:
            return None
        return self.image_url.geturl()

    def to_dict(self) -> dict[str, str | None]:
        return {
            "title": self.title,
            "description": self.description,
            "domain": self.domain,
            "image_url": self.image_url_str,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinkPreview":
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            domain=data.get("domain"),
            image_url=parse_absolute_url(data.get("image_url")),
        )

    # ─────────────────────────────────────────────────────────────
    # Field resolution
    # ─────────────────────────────────────────────────────────────

    @staticmethod
    def find_first_title(document: BeautifulSoup) -> str | None:
        return first_present((
            lambda: find_og_tag(document, OpenGraphTag.TITLE),
            lambda: find_twitter_tag(document, TwitterMetaTag.TITLE),
            lambda: find_schema_tag(document, SchemaMetaTag.NAME),
            lambda: first_inner_text(document, "title"),
            lambda: first_inner_text(document, "h1"),
            lambda: first_inner_text(document, "h2"),
        ))

    @staticmethod
    def find_first_description(document: BeautifulSoup) -> str | None:
        return first_present((
            lambda: find_og_tag(document, OpenGraphTag.DESCRIPTION),
            lambda: find_twitter_tag(document, TwitterMetaTag.DESCRIPTION),
            lambda: find_schema_tag(document, SchemaMetaTag.DESCRIPTION),
            lambda: find_meta_tag(document, "description"),
            lambda: first_inner_text(document, "p"),
        ))

    @staticmethod
    def find_first_image_url(document: BeautifulSoup) -> SplitResult | None:
        """
        Find the preview image URL.

        Each candidate must parse as an absolute URL; a malformed value is
        skipped and the next source is tried.
        """
        return first_present((
            _parsed(lambda: find_og_tag(document, OpenGraphTag.IMAGE), parse_absolute_url),
            _parsed(lambda: find_link(document, "image_src"), parse_absolute_url),
            _parsed(lambda: find_schema_tag(document, SchemaMetaTag.IMAGE), parse_absolute_url),
            _parsed(lambda: find_twitter_tag(document, TwitterMetaTag.IMAGE), parse_absolute_url),
        ))

    @staticmethod
    def find_first_domain(document: BeautifulSoup) -> str | None:
        """
        Find the page's domain from its canonical link or og:url.

        Sources whose URL has no domain (unparseable, path-only, IP host)
        are skipped.
        """
        return first_present((
            _parsed(lambda: find_link(document, "canonical"), domain_from_string),
            _parsed(lambda: find_og_tag(document, OpenGraphTag.URL), domain_from_string),
        ))

    # ─────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────

    @classmethod
    def from_document(cls, document: BeautifulSoup, url: str | None = None) -> "LinkPreview":
        """
        Build a preview from a parsed document.

        When the source URL is known, a matching site profile may replace
        or post-process the generic result.
        """
        if url is None:
            return extract_generic(document)

        from .profiles import DEFAULT_REGISTRY
        return DEFAULT_REGISTRY.extract(document, url)

    @classmethod
    def from_str(cls, html: str, url: str | None = None) -> "LinkPreview":
        return cls.from_document(parse_document(html), url=url)

    @classmethod
    def from_bytes(cls, value: bytes, url: str | None = None) -> "LinkPreview":
        """
        Build a preview from raw document bytes.

        Raises:
            InvalidEncoding: If the bytes are not valid UTF-8
        """
        return cls.from_document(html_from_bytes(value), url=url)


def extract_generic(document: BeautifulSoup) -> LinkPreview:
    """Run the generic extraction engine, without consulting site profiles."""
    preview = LinkPreview(
        title=LinkPreview.find_first_title(document),
        description=LinkPreview.find_first_description(document),
        domain=LinkPreview.find_first_domain(document),
        image_url=LinkPreview.find_first_image_url(document),
    )
    logger.debug(
        f"Extracted preview: title={preview.title!r}, domain={preview.domain!r}, "
        f"image_url={preview.image_url_str!r}"
    )
    return preview
