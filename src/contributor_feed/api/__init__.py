"""
API layer for the GitHub REST API.

Provides the low-level client plus repository, organisation and user operations.
"""

import logging
from typing import Optional

from ..core import constants
from .client import APIClient
from .repositories import RepositoriesAPI
from .organizations import OrganizationsAPI
from .users import UsersAPI
from . import helpers


class GitHubAPI(APIClient, RepositoriesAPI, OrganizationsAPI, UsersAPI):
    """
    Unified API client for GitHub.

    Combines repository, organisation, and user operations.
    """

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
        Initialize unified API client.

        Args:
            access_token: GitHub access token
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            per_page: Records requested per page
            max_pages: Upper bound on pages per listing
            logger: Logger instance
        """
        super().__init__(
            access_token=access_token,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            per_page=per_page,
            max_pages=max_pages,
            logger=logger
        )


__all__ = [
    "APIClient",
    "RepositoriesAPI",
    "OrganizationsAPI",
    "UsersAPI",
    "GitHubAPI",
    "helpers",
]
