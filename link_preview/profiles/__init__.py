"""
Site profiles - per-site overrides of generic extraction.

A profile pairs a URL predicate with an extractor. Profiles are consulted
only when the source URL of a document is known; the first profile whose
predicate matches produces the preview.

Adding a site is a data change: build a Profile and add it to PROFILES (or
register it on a ProfileRegistry at runtime).
"""

from .base import Profile, ProfileRegistry, domain_matcher, url_host
from .youtube import YOUTUBE_PROFILE

# Registry of built-in profiles, in priority order
PROFILES: list[Profile] = [
    YOUTUBE_PROFILE,
]

DEFAULT_REGISTRY = ProfileRegistry(PROFILES)


def get_profile_for_url(url: str) -> Profile | None:
    """Get the built-in profile for a URL, if available."""
    return DEFAULT_REGISTRY.select(url)


__all__ = [
    "Profile",
    "ProfileRegistry",
    "PROFILES",
    "DEFAULT_REGISTRY",
    "YOUTUBE_PROFILE",
    "domain_matcher",
    "url_host",
    "get_profile_for_url",
]
