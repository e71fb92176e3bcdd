# exceptions.py
from typing import Optional


class TransportError(Exception):
    """Raised when a results page cannot be fetched.

    Covers connection errors, timeouts, malformed proxy URIs and any response
    whose status is outside the 2xx range. Redirects are never followed, so a
    3xx answer from the search engine also ends up here. One failed page fails
    the whole search; no partial results are returned.
    """

    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class CaptchaException(TransportError):
    """Raised when the search engine answers with a CAPTCHA or "unusual traffic" page.

    The response was technically successful but carries no results, which usually
    means the client IP (or proxy) has been flagged for bot-like behavior.
    """

    pass


class ParseError(Exception):
    """Raised when a response body cannot be parsed as HTML markup."""

    pass


class ConfigurationError(Exception):
    """Raised when a SearchClient is constructed with inconsistent options.

    Triggered by a non-positive default ``limit`` or by ``proxied=True`` without
    a ``proxy`` URI. A proxy URI that is present but malformed is not checked up
    front and surfaces as a TransportError when the first request goes out.
    """

    pass
