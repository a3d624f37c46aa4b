"""
URL Validator - keep the fetcher away from internal network resources.

Documents are only fetched from public http(s) hosts. Loopback, private,
link-local and cloud metadata addresses are refused, both when written
literally in the URL and when a hostname resolves to them.
"""

import ipaddress
import logging
import socket
from urllib.parse import urlsplit

from aiohttp.resolver import ThreadedResolver

from .exceptions import SSRFError
from .urls import looks_like_ipv4

logger = logging.getLogger(__name__)

# Private, loopback, link-local, reserved and documentation networks
BLOCKED_IP_RANGES = [
    ipaddress.ip_network(cidr)
    for cidr in (
        "0.0.0.0/8",
        "10.0.0.0/8",
        "127.0.0.0/8",
        "169.254.0.0/16",
        "172.16.0.0/12",
        "192.0.2.0/24",
        "192.168.0.0/16",
        "198.51.100.0/24",
        "203.0.113.0/24",
        "255.255.255.255/32",
        "::1/128",
        "fc00::/7",
        "fe80::/10",
    )
]

BLOCKED_HOSTNAMES = {
    "localhost",
    "localhost.localdomain",
    "ip6-localhost",
    "ip6-loopback",
    "metadata",
    "metadata.google.internal",
}

BLOCKED_SUFFIXES = (".local", ".internal", ".localhost")

ALLOWED_SCHEMES = {"http", "https"}


def is_ip_blocked(ip_str: str) -> bool:
    """Check if an IP address falls in a blocked range."""
    try:
        ip = ipaddress.ip_address(ip_str)
    except ValueError:
        return False
    return any(ip in network for network in BLOCKED_IP_RANGES)


def _check_resolved(hostname: str, port: int) -> None:
    try:
        addrinfo = socket.getaddrinfo(hostname, port, proto=socket.IPPROTO_TCP)
    except socket.gaierror:
        # Unresolvable hosts fail at fetch time
        logger.debug(f"Could not resolve {hostname}")
        return

    for _, _, _, _, sockaddr in addrinfo:
        if is_ip_blocked(sockaddr[0]):
            raise SSRFError(
                f"Hostname '{hostname}' resolves to blocked IP address '{sockaddr[0]}'",
                url=hostname,
            )


def validate_url(url: str, resolve_dns: bool = True) -> str:
    """
    Validate a URL before fetching it.

    Args:
        url: The URL to validate
        resolve_dns: Whether to resolve the hostname and check its addresses

    Returns:
        The validated URL

    Raises:
        SSRFError: If the URL fails validation
    """
    try:
        parsed = urlsplit(url)
        port = parsed.port
    except ValueError as e:
        raise SSRFError(f"Invalid URL format: {e}", url=url) from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise SSRFError(f"URL scheme '{parsed.scheme}' is not allowed. Use http or https.", url=url)

    if not parsed.hostname:
        raise SSRFError("URL must include a hostname", url=url)

    hostname = parsed.hostname.lower()

    if hostname in BLOCKED_HOSTNAMES:
        raise SSRFError(f"Access to '{hostname}' is not allowed", url=url)

    try:
        ip = ipaddress.ip_address(hostname)
    except ValueError:
        if looks_like_ipv4(hostname):
            raise SSRFError(f"IP address '{hostname}' in non-standard form is not allowed", url=url)
        if hostname.endswith(BLOCKED_SUFFIXES):
            raise SSRFError(f"Access to '{hostname}' is not allowed", url=url)
    else:
        if is_ip_blocked(str(ip)):
            raise SSRFError(f"Access to IP address '{ip}' is not allowed", url=url)
        return url

    if resolve_dns:
        default_port = 443 if parsed.scheme.lower() == "https" else 80
        _check_resolved(hostname, port or default_port)

    return url


class GuardedResolver(ThreadedResolver):
    """
    aiohttp resolver that refuses blocked addresses at connect time.

    The connector resolves a hostname again after validate_url() has seen
    it; every address it would connect to must also pass is_ip_blocked().
    """

    async def resolve(self, host: str, port: int = 0, family: int = socket.AF_INET):
        addresses = await super().resolve(host, port, family)
        for address in addresses:
            if is_ip_blocked(address["host"]):
                raise SSRFError(
                    f"Hostname '{host}' resolves to blocked IP address '{address['host']}'",
                    url=host,
                )
        return addresses
