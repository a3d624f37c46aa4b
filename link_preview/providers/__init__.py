"""
Metadata providers - the naming conventions a page can use to describe itself.

Each provider is a fixed table translating a semantic field into the
attribute key that provider uses, plus a lookup function over the document
query layer.
"""

from .og import OpenGraphTag, find_og_tag
from .schema import SchemaMetaTag, find_schema_tag
from .twitter import TwitterMetaTag, find_twitter_tag

__all__ = [
    "OpenGraphTag",
    "find_og_tag",
    "SchemaMetaTag",
    "find_schema_tag",
    "TwitterMetaTag",
    "find_twitter_tag",
]
