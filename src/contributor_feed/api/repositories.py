"""
Repository operations for the GitHub API.

Handles the contributor listings of the polled repositories.
"""

import logging
from functools import partial
from typing import Any, Callable, List

from ..models import Contributor
from .helpers import parse_contributors


class RepositoriesAPI:
    """Mixin for repository-related API operations."""

    logger: logging.Logger

    # Provided by APIClient
    get_paged: Callable[..., List[Any]]

    def get_contributors(self, repository: str, is_primary: bool = False) -> List[Contributor]:
        """
        Get every contributor of a repository.

        Args:
            repository: Repository as 'owner/name'
            is_primary: Mark the returned contributors as coming from the primary source

        Returns:
            Contributors in the order the API lists them
        """
        self.logger.info(f"Fetching contributors of {repository}")
        return self.get_paged(
            f"repos/{repository}/contributors",
            partial(parse_contributors, is_primary=is_primary)
        )
