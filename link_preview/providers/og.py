"""
Open Graph protocol tags (https://ogp.me).
"""

from enum import Enum

from bs4 import BeautifulSoup

from ..html import find_meta_tag


class OpenGraphTag(str, Enum):
    TITLE = "og:title"
    DESCRIPTION = "og:description"
    IMAGE = "og:image"
    URL = "og:url"


def find_og_tag(document: BeautifulSoup, tag: OpenGraphTag) -> str | None:
    """Find an Open Graph value, matched on the meta name or property."""
    return find_meta_tag(document, tag.value)
