"""
Organisation membership service.

Fetches the member sets of all configured organisations concurrently.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, FrozenSet, Optional, Sequence, TYPE_CHECKING

from ..core import constants
from ..models import Organisation

if TYPE_CHECKING:
    from ..api import GitHubAPI


class MembershipFetcher:
    """Fetch organisation member sets."""

    def __init__(
        self,
        api_client: "GitHubAPI",
        max_workers: int = constants.DEFAULT_MAX_WORKERS,
        logger: Optional[logging.Logger] = None
    ):
        self.api_client = api_client
        self.max_workers = max_workers
        self.logger = logger or logging.getLogger(__name__)

    def fetch(self, organisations: Sequence[Organisation]) -> Dict[Organisation, FrozenSet[str]]:
        """
        Fetch the members of every organisation.

        Requests for different organisations run in parallel. If any of them
        fails, its RequestError propagates and no memberships are returned.

        Args:
            organisations: Organisations to look up

        Returns:
            Member URLs per organisation
        """
        if not organisations:
            return {}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                org: executor.submit(self.api_client.get_organization_members, org.id)
                for org in organisations
            }
            memberships = {org: future.result() for org, future in futures.items()}

        for org, members in memberships.items():
            self.logger.debug(f"Organisation {org.id} has {len(members)} members")
        return memberships
