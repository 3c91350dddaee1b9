"""
Contributor merging module.

Combines the contributor listings of the polled repositories into one
record per login.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from ..models import Contributor


class ContributorMerger:
    """Merge per-repository contributor records by login."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def merge(
        self,
        primary: Iterable[Contributor],
        secondary: Iterable[Contributor]
    ) -> List[Contributor]:
        """
        Merge two contributor listings.

        Records sharing a login are combined: contribution counts are summed
        and the primary-source flag is set if any record carries it. Identity,
        link and avatar come from the first record seen for the login.

        Args:
            primary: Contributors of the primary repository
            secondary: Contributors of the secondary repository

        Returns:
            One contributor per login, by total contributions descending.
            Ties keep first-seen order.
        """
        merged: Dict[str, Contributor] = {}
        records = 0

        for source in (primary, secondary):
            for contributor in source:
                records += 1
                existing = merged.get(contributor.login)
                if existing is None:
                    merged[contributor.login] = contributor
                    continue
                merged[contributor.login] = replace(
                    existing,
                    avatar=existing.avatar or contributor.avatar,
                    contributions=existing.contributions + contributor.contributions,
                    is_primary=existing.is_primary or contributor.is_primary,
                )

        result = sorted(merged.values(), key=lambda c: c.contributions, reverse=True)
        self.logger.info(f"Merged {records} contributor records into {len(result)} contributors")
        return result
