"""
Base types for site-specific profiles.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from ..preview import LinkPreview, extract_generic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Profile:
    """
    A site-specific override of generic extraction.

    Attributes:
        name: Identifier used in logs and the API status
        fits: Predicate deciding whether the profile handles a source URL
        extract: Builds the preview for a document; may return None to
            defer to generic extraction
    """
    name: str
    fits: Callable[[str], bool]
    extract: Callable[[BeautifulSoup], LinkPreview | None]


def url_host(url: str) -> str | None:
    """Lowercased host of a URL string, or None if it has none."""
    try:
        return urlsplit(url.strip()).hostname
    except ValueError:
        return None


def domain_matcher(*domains: str) -> Callable[[str], bool]:
    """Build a predicate matching URLs whose host contains any of the domains."""
    needles = tuple(d.lower() for d in domains)

    def fits(url: str) -> bool:
        host = url_host(url)
        if not host:
            return False
        return any(domain in host for domain in needles)

    return fits


class ProfileRegistry:
    """Ordered collection of profiles; the first fitting profile wins."""

    def __init__(self, profiles: list[Profile] | None = None):
        self._profiles: list[Profile] = list(profiles or [])

    def register(self, profile: Profile) -> None:
        """Append a profile at the lowest priority."""
        self._profiles.append(profile)

    @property
    def names(self) -> list[str]:
        return [profile.name for profile in self._profiles]

    def select(self, url: str) -> Profile | None:
        """Get the first profile that fits the URL, if any."""
        for profile in self._profiles:
            if profile.fits(url):
                return profile
        return None

    def extract(self, document: BeautifulSoup, url: str) -> LinkPreview:
        """
        Extract a preview, letting a matching profile take over.

        Falls back to generic extraction when no profile fits, or when the
        selected profile returns None or fails.
        """
        profile = self.select(url)
        if profile is None:
            return extract_generic(document)

        logger.debug(f"Using profile '{profile.name}' for {url}")
        try:
            preview = profile.extract(document)
        except Exception as e:
            logger.warning(f"Profile '{profile.name}' failed for {url}: {e}")
            return extract_generic(document)

        if preview is None:
            logger.debug(f"Profile '{profile.name}' deferred to generic extraction for {url}")
            return extract_generic(document)
        return preview
