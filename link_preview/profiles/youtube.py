"""
YouTube profile.

YouTube pages advertise thumbnails on hosts that vary by page; the
canonical image store is i.ytimg.com, which serves the same paths.
"""

from dataclasses import replace
from urllib.parse import urlunsplit

from bs4 import BeautifulSoup

from ..preview import LinkPreview, extract_generic
from ..urls import parse_absolute_url
from .base import Profile, domain_matcher

YOUTUBE_DOMAINS = ("youtube.com", "youtu.be")
YOUTUBE_IMAGE_STORAGE_DOMAIN = "i.ytimg.com"


def extract(document: BeautifulSoup) -> LinkPreview | None:
    preview = extract_generic(document)
    if preview.image_url is None:
        return preview

    # Keep only the path; query and fragment are dropped
    path = preview.image_url.path or "/"
    image_url = urlunsplit(("https", YOUTUBE_IMAGE_STORAGE_DOMAIN, path, "", ""))
    return replace(preview, image_url=parse_absolute_url(image_url))


YOUTUBE_PROFILE = Profile(
    name="youtube",
    fits=domain_matcher(*YOUTUBE_DOMAINS),
    extract=extract,
)
