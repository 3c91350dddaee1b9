"""
Error types for the contributor feed.

Request failures abort a refresh; parse failures are tolerated by the
paging layer and count as empty pages.
"""

from typing import Optional


class ContributorFeedError(Exception):
    """Base class for all contributor feed errors."""


class RequestError(ContributorFeedError):
    """An upstream request failed or returned a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class AuthExpiredError(RequestError):
    """The access token was rejected (HTTP 401)."""


class RateLimitedError(RequestError):
    """Access forbidden, usually because the API quota is exhausted (HTTP 403/429)."""


class PaginationError(RequestError):
    """Continuation links looped or exceeded the page bound."""


class ParseError(ContributorFeedError):
    """A response body did not match the expected schema."""


class RefreshFailure(ContributorFeedError):
    """A refresh was aborted; wraps the underlying request error."""

    def __init__(self, cause: Exception):
        super().__init__(f"Unable to load contributors from GitHub: {cause}")
        self.cause = cause
