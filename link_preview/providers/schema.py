"""
Schema.org microdata tags.

Schema.org properties are declared with the itemprop attribute rather than
name/property, e.g. <meta itemprop="name" content="...">.
"""

from enum import Enum

from bs4 import BeautifulSoup

from ..html import find_meta_tag_by_attr

SCHEMA_ATTR = "itemprop"


class SchemaMetaTag(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"
    IMAGE = "image"


def find_schema_tag(document: BeautifulSoup, tag: SchemaMetaTag) -> str | None:
    """Find a Schema.org value declared on a <meta itemprop=...> element."""
    return find_meta_tag_by_attr(document, SCHEMA_ATTR, tag.value)
