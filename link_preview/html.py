"""
Document query layer - primitive, read-only lookups over a parsed HTML tree.

Every lookup is first-match-wins in document order; later duplicate
declarations are ignored. Values are returned as found, validation is left
to the extraction engine.
"""

import re

from bs4 import BeautifulSoup, Tag

from .exceptions import InvalidEncoding

PARSER = "html.parser"

_WHITESPACE = re.compile(r"\s+")


def parse_document(html: str) -> BeautifulSoup:
    """Parse an HTML string into a queryable document."""
    return BeautifulSoup(html, PARSER)


def html_from_bytes(value: bytes) -> BeautifulSoup:
    """
    Decode a byte buffer as UTF-8 and parse it into a document.

    Raises:
        InvalidEncoding: If the buffer is not valid UTF-8
    """
    try:
        html = value.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncoding(e) from e
    return parse_document(html)


def _attr_equals(tag: Tag, attr: str, key: str) -> bool:
    value = tag.get(attr)
    if value is None:
        return False
    # Multi-valued attributes (rel) come back as lists
    if isinstance(value, list):
        return " ".join(value) == key
    return value == key


def find_meta_tag(document: BeautifulSoup, key: str) -> str | None:
    """
    Find the content of the first <meta> whose name or property equals key.

    Returns None if no element matches or the first match has no content.
    """
    tag = document.find(
        lambda t: t.name == "meta"
        and (_attr_equals(t, "name", key) or _attr_equals(t, "property", key))
    )
    if tag is None:
        return None
    return tag.get("content")


def find_meta_tag_by_attr(document: BeautifulSoup, attr: str, key: str) -> str | None:
    """Like find_meta_tag, but matches on an arbitrary attribute (e.g. itemprop)."""
    tag = document.find(lambda t: t.name == "meta" and _attr_equals(t, attr, key))
    if tag is None:
        return None
    return tag.get("content")


def find_link(document: BeautifulSoup, rel: str) -> str | None:
    """Find the href of the first <link> whose rel equals rel."""
    tag = document.find(lambda t: t.name == "link" and _attr_equals(t, "rel", rel))
    if tag is None:
        return None
    return tag.get("href")


def first_inner_html(document: BeautifulSoup, selector: str) -> str | None:
    """Inner markup of the first element matching a CSS selector."""
    element = document.select_one(selector)
    if element is None:
        return None
    return element.decode_contents()


def first_inner_text(document: BeautifulSoup, selector: str) -> str | None:
    """Whitespace-collapsed text of the first element matching a CSS selector."""
    element = document.select_one(selector)
    if element is None:
        return None
    return _WHITESPACE.sub(" ", element.get_text()).strip()
