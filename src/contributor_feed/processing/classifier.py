"""
Organisation classification module.

Assigns each contributor to at most one organisation, scanning the
configured organisations in priority order.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence

from ..models import Contributor, Organisation
from ..models.organisation import display_order


@dataclass
class Classification:
    """Partition of contributors produced by OrganisationClassifier."""

    privileged: List[Contributor] = field(default_factory=list)
    organisation_based: Dict[Organisation, List[Contributor]] = field(default_factory=dict)
    others: List[Contributor] = field(default_factory=list)

    @property
    def count(self) -> int:
        return (
            len(self.privileged)
            + sum(len(members) for members in self.organisation_based.values())
            + len(self.others)
        )


class OrganisationClassifier:
    """Group contributors by organisation membership."""

    def __init__(
        self,
        organisations: Sequence[Organisation],
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize classifier.

        Args:
            organisations: Organisations in priority order; the first
                           matching organisation wins
            logger: Logger instance
        """
        self.organisations = list(organisations)
        self.logger = logger or logging.getLogger(__name__)

    def find_organisation(
        self,
        contributor: Contributor,
        memberships: Mapping[Organisation, FrozenSet[str]]
    ) -> Optional[Organisation]:
        """
        Find the first organisation the contributor belongs to and is eligible for.

        Returns:
            The organisation, or None if the contributor is unaffiliated
        """
        for organisation in self.organisations:
            members = memberships.get(organisation, frozenset())
            if contributor.url in members and organisation.can_be_member(contributor):
                return organisation
        return None

    def classify(
        self,
        contributors: Sequence[Contributor],
        memberships: Mapping[Organisation, FrozenSet[str]]
    ) -> Classification:
        """
        Partition contributors into privileged, per-organisation and unaffiliated groups.

        Args:
            contributors: Merged contributors
            memberships: Member URLs per organisation

        Returns:
            Classification where every contributor appears exactly once.
            Organisation buckets are sorted by contributions descending and
            only non-empty buckets are kept; the unaffiliated group keeps the
            input order.
        """
        result = Classification()
        buckets: Dict[Organisation, List[Contributor]] = {}

        for contributor in contributors:
            organisation = self.find_organisation(contributor, memberships)
            if organisation is None:
                result.others.append(contributor)
            elif organisation.privileged:
                result.privileged.append(contributor)
            else:
                buckets.setdefault(organisation, []).append(contributor)

        for organisation in display_order(list(buckets)):
            result.organisation_based[organisation] = sorted(
                buckets[organisation], key=lambda c: c.contributions, reverse=True
            )

        self.logger.info(
            f"Classified {len(contributors)} contributors: "
            f"{len(result.privileged)} privileged, "
            f"{sum(len(m) for m in result.organisation_based.values())} in organisations, "
            f"{len(result.others)} unaffiliated"
        )
        return result
