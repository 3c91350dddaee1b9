"""
Business logic services for the contributor feed.

Services orchestrate API operations and manage the published snapshot.
"""

from .membership import MembershipFetcher
from .enricher import CoreProfileEnricher, core_sort_key
from .publisher import SnapshotPublisher
from .scheduler import RefreshScheduler, RefreshState, RefreshOutcome
from .pipeline import ContributorPipeline

__all__ = [
    "MembershipFetcher",
    "CoreProfileEnricher",
    "core_sort_key",
    "SnapshotPublisher",
    "RefreshScheduler",
    "RefreshState",
    "RefreshOutcome",
    "ContributorPipeline",
]
