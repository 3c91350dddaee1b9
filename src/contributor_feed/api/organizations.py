"""
Organisation operations for the GitHub API.

Handles retrieval of organisation membership.
"""

import logging
from typing import Any, Callable, FrozenSet, List

from .helpers import parse_members


class OrganizationsAPI:
    """Mixin for organisation-related API operations."""

    logger: logging.Logger

    # Provided by APIClient
    get_paged: Callable[..., List[Any]]

    def get_organization_members(self, organization_id: str) -> FrozenSet[str]:
        """
        Get the members of an organisation.

        Args:
            organization_id: Organisation login, e.g. 'playframework'

        Returns:
            Set of member API URLs
        """
        self.logger.info(f"Fetching members of organisation {organization_id}")
        return frozenset(self.get_paged(f"orgs/{organization_id}/members", parse_members))
