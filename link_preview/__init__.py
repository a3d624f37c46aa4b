"""
Link Preview - extract title, description, image and domain from HTML pages.

Metadata is resolved from Open Graph, Twitter Card, Schema.org microdata and
plain HTML, in that order of trust. Site profiles can override the generic
result for known domains.

    from link_preview import LinkPreview

    preview = LinkPreview.from_str(html, url="https://www.youtube.com/watch?v=...")
    preview.title, preview.image_url_str
"""

__version__ = "0.2.0"

from .exceptions import (
    DocumentTooLarge,
    FetchError,
    InvalidEncoding,
    LinkPreviewError,
    SSRFError,
)
from .html import html_from_bytes, parse_document
from .preview import LinkPreview, extract_generic
from .profiles import DEFAULT_REGISTRY, Profile, ProfileRegistry, domain_matcher

__all__ = [
    "__version__",
    "LinkPreview",
    "extract_generic",
    "html_from_bytes",
    "parse_document",
    "Profile",
    "ProfileRegistry",
    "DEFAULT_REGISTRY",
    "domain_matcher",
    "LinkPreviewError",
    "InvalidEncoding",
    "FetchError",
    "SSRFError",
    "DocumentTooLarge",
]
