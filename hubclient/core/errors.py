"""Exception hierarchy for hubclient.

Absence of a remote resource (HTTP 404 or an empty body) is not an error:
lookups return ``None`` in that case. Everything below propagates to the
caller unchanged.
"""

from typing import Optional


class HubClientError(Exception):
    """Base class for all hubclient errors."""


class TransportError(HubClientError):
    """The HTTP round trip itself failed (connection, TLS, timeout)."""


class DecodeError(HubClientError):
    """A response body arrived but could not be decoded into the expected shape."""


class ApiError(HubClientError):
    """GitHub answered with an error status other than 404."""

    def __init__(self, status_code: int, message: str, url: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(f"GitHub API error {status_code} for {url}: {message}")


class UnsupportedOnSummary(HubClientError):
    """A detail-only attribute was read on a repository fetched from a list endpoint."""


class NotWired(HubClientError):
    """A network method was called on a resource that no client handle adopted."""


class UrlTemplateError(HubClientError):
    """A path template was expanded without a value for one of its placeholders."""
