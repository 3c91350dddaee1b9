"""
Contributor data models.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Contributor:
    """A contributor merged across the polled repositories."""

    url: str  # API profile URL, the identity key
    login: str
    link: str  # Public profile page
    avatar: Optional[str]
    contributions: int
    is_primary: bool  # Contributed to the primary repository


@dataclass(frozen=True)
class CoreContributor:
    """A privileged-organisation contributor enriched with profile detail."""

    url: str
    login: str
    name: Optional[str]
    link: str
    avatar: Optional[str]
    bio: Optional[str]
