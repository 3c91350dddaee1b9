"""
Aggregated contributor snapshot.

A snapshot is built once per refresh and never modified after publication.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .contributor import Contributor, CoreContributor
from .organisation import Organisation


@dataclass(frozen=True)
class Contributors:
    """Immutable view of all contributors, grouped for display."""

    core: Tuple[CoreContributor, ...]
    organisation_based: Mapping[Organisation, Tuple[Contributor, ...]]
    others: Tuple[Contributor, ...]
    refreshed_at: Optional[datetime] = field(default=None, compare=False)

    @classmethod
    def build(
        cls,
        core: Iterable[CoreContributor],
        organisation_based: Iterable[Tuple[Organisation, Sequence[Contributor]]],
        others: Iterable[Contributor],
        refreshed_at: Optional[datetime] = None
    ) -> "Contributors":
        """
        Assemble a snapshot, freezing every collection.

        Organisation buckets are ordered by organisation id, descending.
        """
        ordered = sorted(organisation_based, key=lambda item: item[0].id, reverse=True)
        return cls(
            core=tuple(core),
            organisation_based=MappingProxyType(
                {org: tuple(members) for org, members in ordered}
            ),
            others=tuple(others),
            refreshed_at=refreshed_at,
        )

    @property
    def count(self) -> int:
        """Total number of contributors across all groups."""
        return (
            len(self.core)
            + sum(len(members) for members in self.organisation_based.values())
            + len(self.others)
        )

    def logins(self) -> Tuple[str, ...]:
        """Logins of every contributor in display order."""
        grouped = [c.login for members in self.organisation_based.values() for c in members]
        return (
            tuple(c.login for c in self.core)
            + tuple(grouped)
            + tuple(c.login for c in self.others)
        )
