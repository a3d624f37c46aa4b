"""
Twitter Card tags.
"""

from enum import Enum

from bs4 import BeautifulSoup

from ..html import find_meta_tag


class TwitterMetaTag(str, Enum):
    TITLE = "twitter:title"
    DESCRIPTION = "twitter:description"
    IMAGE = "twitter:image"


def find_twitter_tag(document: BeautifulSoup, tag: TwitterMetaTag) -> str | None:
    return find_meta_tag(document, tag.value)
