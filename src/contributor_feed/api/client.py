"""
Base API client for the GitHub REST API.

Handles HTTP requests, session management, paging and error mapping.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Set, TypeVar

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants
from ..core.errors import (
    RequestError,
    AuthExpiredError,
    RateLimitedError,
    PaginationError,
    ParseError,
)
from . import helpers

T = TypeVar("T")


class APIClient:
    """Base client for interacting with the GitHub API."""

    def __init__(
        self,
        access_token: str,
        base_url: str = constants.DEFAULT_API_BASE_URL,
        timeout: int = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        per_page: int = constants.DEFAULT_PER_PAGE,
        max_pages: int = constants.DEFAULT_MAX_PAGES,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            access_token: Token sent with every request
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts for transient server errors
            per_page: Records requested per page for paged listings
            max_pages: Upper bound on pages followed for a single listing
            logger: Logger instance
        """
        if not access_token:
            raise ValueError("An access token is required")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.per_page = per_page
        self.max_pages = max_pages
        self.logger = logger or logging.getLogger(__name__)

        # Setup session with retry strategy; the final response is returned
        # rather than raised so its status can be mapped below
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "User-Agent": constants.DEFAULT_USER_AGENT,
            "Authorization": f"token {access_token}",
        })

    def _request(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Issue an authenticated GET and check its status.

        Raises:
            RequestError: On transport failure or any status >= 300
        """
        self.logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: GET {url} - {e}")
            raise RequestError(f"Request to {url} failed: {e}", url=url) from e

        if response.status_code >= 300:
            raise self._response_failure(response, url)
        return response

    @staticmethod
    def _response_failure(response: requests.Response, url: str) -> RequestError:
        """Map a non-success response to the matching error type."""
        status = response.status_code
        if status in (403, 429):
            return RateLimitedError(
                f"Request forbidden, GitHub quota rate limit is probably exceeded: {response.text}",
                status_code=status,
                url=url
            )
        if status == 401:
            return AuthExpiredError(
                f"Request unauthorized, the access token was rejected: {url}",
                status_code=status,
                url=url
            )
        return RequestError(
            f"Request failed with {status} {response.reason}: {url}",
            status_code=status,
            url=url
        )

    def get_json(self, path: str) -> Any:
        """
        Make a single GET request.

        Args:
            path: API path or absolute URL

        Returns:
            Parsed JSON body

        Raises:
            RequestError: On failure
            ParseError: If the body is not JSON
        """
        url = helpers.resolve_url(self.base_url, path)
        response = self._request(url)
        return helpers.decode_json(response)

    def get_paged(
        self,
        path: str,
        parser: Callable[[Any], List[T]],
        per_page: Optional[int] = None
    ) -> List[T]:
        """
        Load all pages from an endpoint that uses Link headers for paging.

        Pages are requested in sequence, following each response's
        rel="next" link until none is present. Records from all pages are
        returned in request order; a failure on any page fails the whole call.

        Args:
            path: API path or absolute URL of the first page
            parser: Turns one decoded page body into records; raises ParseError
                    when the body does not have the expected shape
            per_page: Page size for the first request (defaults to client setting)

        Returns:
            All parsed records

        Raises:
            RequestError: On any failed page
            PaginationError: If a next link repeats or the page bound is hit
        """
        url: Optional[str] = helpers.resolve_url(self.base_url, path)
        params: Optional[Dict[str, Any]] = {"per_page": per_page or self.per_page}
        visited: Set[str] = set()
        results: List[T] = []

        while url is not None:
            if url in visited:
                raise PaginationError(f"Pagination loop detected at {url}", url=url)
            if len(visited) >= self.max_pages:
                raise PaginationError(
                    f"Pagination exceeded {self.max_pages} pages for {path}", url=url
                )
            visited.add(url)

            response = self._request(url, params=params)
            # Continuation links already carry their query string
            params = None

            try:
                records = parser(helpers.decode_json(response))
            except ParseError as e:
                self.logger.warning(f"Unexpected response body from {url}, treating page as empty: {e}")
                records = []

            results.extend(records)
            url = helpers.next_link(response)

        self.logger.debug(f"Loaded {len(results)} records from {path} in {len(visited)} page(s)")
        return results

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
