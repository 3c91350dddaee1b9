"""
Data models for the contributor feed.

Contains DTOs for organisations, contributors, and the published snapshot.
"""

from .organisation import Organisation
from .contributor import Contributor, CoreContributor
from .snapshot import Contributors

__all__ = [
    "Organisation",
    "Contributor",
    "CoreContributor",
    "Contributors",
]
