"""
Error hierarchy for link preview extraction and fetching.

Only InvalidEncoding can fail extraction itself. Missing metadata is never
an error; resolvers return None instead.
"""


class LinkPreviewError(Exception):
    """Base class for all link-preview errors."""

    pass


class InvalidEncoding(LinkPreviewError):
    """Raised when a document byte buffer is not valid UTF-8."""

    def __init__(self, reason: UnicodeDecodeError):
        self.reason = reason
        super().__init__(
            f"The provided bytes contain invalid UTF-8 characters "
            f"(position {reason.start}: {reason.reason})"
        )


class FetchError(LinkPreviewError):
    """Raised when a document cannot be retrieved."""

    def __init__(self, message: str, url: str | None = None, status: int | None = None):
        self.url = url
        self.status = status
        super().__init__(message)


class SSRFError(FetchError):
    """Raised when a URL fails SSRF validation."""

    pass


class DocumentTooLarge(FetchError):
    """Raised when a fetched document exceeds the configured size limit."""

    pass
