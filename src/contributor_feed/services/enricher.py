"""
Core contributor enrichment service.

Adds profile details to the contributors of the privileged organisation.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, TYPE_CHECKING

from ..core import constants
from ..models import Contributor, CoreContributor

if TYPE_CHECKING:
    from ..api import GitHubAPI


def core_sort_key(contributor: CoreContributor) -> str:
    """
    Sort key for core contributors.

    Uses the second word of the full name as a surname. Contributors
    without one sort last.
    """
    if contributor.name:
        words = contributor.name.split()
        if len(words) > 1:
            return words[1]
    return constants.NO_SURNAME_SORT_KEY


class CoreProfileEnricher:
    """Fetch profile details for core contributors."""

    def __init__(
        self,
        api_client: "GitHubAPI",
        max_workers: int = constants.DEFAULT_MAX_WORKERS,
        logger: Optional[logging.Logger] = None
    ):
        self.api_client = api_client
        self.max_workers = max_workers
        self.logger = logger or logging.getLogger(__name__)

    def enrich_one(self, contributor: Contributor) -> CoreContributor:
        """Fetch one contributor's profile and build the enriched record."""
        profile = self.api_client.get_user(contributor.url)
        return CoreContributor(
            url=contributor.url,
            login=contributor.login,
            name=profile.get("name"),
            link=profile.get("html_url") or contributor.link,
            avatar=contributor.avatar,
            bio=profile.get("bio"),
        )

    def enrich(self, contributors: Sequence[Contributor]) -> List[CoreContributor]:
        """
        Enrich contributors with their profiles.

        Profiles are fetched in parallel. A failure for any contributor
        fails the whole batch.

        Args:
            contributors: Contributors of the privileged organisation

        Returns:
            Enriched contributors ordered by surname
        """
        if not contributors:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            enriched = list(executor.map(self.enrich_one, contributors))

        self.logger.info(f"Enriched {len(enriched)} core contributors")
        return sorted(enriched, key=core_sort_key)
