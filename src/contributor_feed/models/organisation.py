"""
Organisation data models.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, TYPE_CHECKING

from ..core.constants import PRIVILEGED_MIN_CONTRIBUTIONS

if TYPE_CHECKING:
    from .contributor import Contributor


@dataclass(frozen=True)
class Organisation:
    """GitHub organisation contributors can be grouped under."""

    id: str
    name: str
    url: str
    privileged: bool = False

    def can_be_member(self, contributor: "Contributor") -> bool:
        """
        Check the eligibility predicate for this organisation.

        Membership of the privileged organisation additionally requires the
        contributor to appear in the primary source with more than
        PRIVILEGED_MIN_CONTRIBUTIONS contributions.
        """
        if self.privileged:
            return (
                contributor.is_primary
                and contributor.contributions > PRIVILEGED_MIN_CONTRIBUTIONS
            )
        return True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Organisation":
        return cls(
            id=data["id"],
            name=data.get("name") or data["id"],
            url=data.get("url") or "",
            privileged=bool(data.get("privileged", False)),
        )


def organisations_from_config(entries: List[Dict[str, Any]]) -> List[Organisation]:
    """Build organisations from configuration entries, keeping their order."""
    return [Organisation.from_dict(entry) for entry in entries]


def display_order(organisations: List[Organisation]) -> List[Organisation]:
    """Organisations sorted for display: by id, descending."""
    return sorted(organisations, key=lambda org: org.id, reverse=True)
