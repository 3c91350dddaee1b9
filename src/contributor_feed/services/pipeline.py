"""
Contributor refresh pipeline.

Fetches both contributor sources, merges and classifies them, enriches
the privileged organisation, and publishes the resulting snapshot.
"""

import logging
from typing import List, Optional, Sequence, TYPE_CHECKING

from ..core import LoggerContext, DateUtils, constants
from ..core.errors import RequestError, RefreshFailure
from ..models import Contributor, Contributors, Organisation
from ..processing import ContributorMerger, OrganisationClassifier
from .membership import MembershipFetcher
from .enricher import CoreProfileEnricher
from .publisher import SnapshotPublisher

if TYPE_CHECKING:
    from ..api import GitHubAPI


class ContributorPipeline:
    """Build and publish contributor snapshots."""

    def __init__(
        self,
        api_client: "GitHubAPI",
        publisher: SnapshotPublisher,
        organisations: Sequence[Organisation],
        primary_source: str = constants.DEFAULT_PRIMARY_SOURCE,
        secondary_source: str = constants.DEFAULT_SECONDARY_SOURCE,
        max_workers: int = constants.DEFAULT_MAX_WORKERS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize pipeline.

        Args:
            api_client: GitHub API client
            publisher: Receives each completed snapshot
            organisations: Organisations in priority order
            primary_source: Repository ('owner/name') whose contributors get the primary flag
            secondary_source: Second repository polled
            max_workers: Parallel requests for memberships and profiles
            logger: Logger instance
        """
        self.api_client = api_client
        self.publisher = publisher
        self.organisations = list(organisations)
        self.primary_source = primary_source
        self.secondary_source = secondary_source
        self.logger = logger or logging.getLogger(__name__)

        self.merger = ContributorMerger(self.logger)
        self.classifier = OrganisationClassifier(self.organisations, self.logger)
        self.membership_fetcher = MembershipFetcher(api_client, max_workers, self.logger)
        self.enricher = CoreProfileEnricher(api_client, max_workers, self.logger)

    def fetch_contributors(self) -> List[Contributor]:
        """Fetch both sources and merge them."""
        primary = self.api_client.get_contributors(self.primary_source, is_primary=True)
        secondary = self.api_client.get_contributors(self.secondary_source, is_primary=False)
        return self.merger.merge(primary, secondary)

    def build(self) -> Contributors:
        """
        Run every stage and assemble a snapshot.

        Raises:
            RequestError: If any request fails; nothing is returned in that case
        """
        with LoggerContext(self.logger, "contributor fetch"):
            contributors = self.fetch_contributors()

        with LoggerContext(self.logger, "organisation membership fetch"):
            memberships = self.membership_fetcher.fetch(self.organisations)

        classification = self.classifier.classify(contributors, memberships)

        with LoggerContext(self.logger, "core contributor enrichment"):
            core = self.enricher.enrich(classification.privileged)

        return Contributors.build(
            core=core,
            organisation_based=classification.organisation_based.items(),
            others=classification.others,
            refreshed_at=DateUtils.now_utc(),
        )

    def refresh(self) -> Contributors:
        """
        Build a new snapshot and publish it.

        On failure the previously published snapshot stays in place.

        Raises:
            RefreshFailure: If any stage failed
        """
        self.logger.info("Fetching GitHub contributors...")
        try:
            snapshot = self.build()
        except RequestError as e:
            raise RefreshFailure(e) from e

        self.publisher.publish(snapshot)
        self.logger.info(f"Loaded {snapshot.count} contributors from GitHub")
        return snapshot
