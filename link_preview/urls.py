"""
URL helpers for the extraction engine.

Candidate values pulled out of a document are treated as absolute URLs.
Anything that cannot be read as one (relative paths, bare words, broken
authorities) comes back as None so the caller can move on to its next source.
"""

import ipaddress
import re
from urllib.parse import SplitResult, urlsplit

# Schemes that must carry a host to be meaningful
HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

_INVALID_NETLOC_CHARS = re.compile(r"[\s\x00-\x1f\x7f<>\\^`{|}]")


def parse_absolute_url(value: str | None) -> SplitResult | None:
    """
    Parse a string as an absolute URL.

    Returns None for relative references, strings without a scheme,
    host-based schemes without a host, and authorities with invalid
    characters or ports.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None

    try:
        parsed = urlsplit(value)
        # Accessing port validates it (raises ValueError when out of range)
        parsed.port
    except ValueError:
        return None

    if not parsed.scheme:
        return None
    if _INVALID_NETLOC_CHARS.search(parsed.netloc):
        return None

    scheme = parsed.scheme.lower()
    if scheme in HOST_SCHEMES:
        if not parsed.hostname:
            return None
        return parsed._replace(scheme=scheme, path=parsed.path or "/")

    return parsed._replace(scheme=scheme)


_NUMERIC_LABEL = re.compile(r"(?:\d+|0[xX][0-9a-fA-F]*)")


def looks_like_ipv4(host: str) -> bool:
    """
    True when a host is written as an IPv4 address in any form URL parsers
    accept: dotted quad, shortened (127.1), hex (0x7f.1) or a bare integer.

    Browsers treat any host whose last label is numeric as IPv4.
    """
    labels = host.rstrip(".").split(".")
    return bool(labels[-1]) and _NUMERIC_LABEL.fullmatch(labels[-1]) is not None


def is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return looks_like_ipv4(host)
    return True


def domain_from_string(value: str | None) -> str | None:
    """
    Extract the domain of a URL string.

    Returns None when the value is not an absolute URL, has no host, or its
    host is an IP address rather than a domain name.
    """
    parsed = parse_absolute_url(value)
    if parsed is None:
        return None

    host = parsed.hostname
    if not host or is_ip_address(host):
        return None
    return host
