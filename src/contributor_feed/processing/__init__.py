"""
Data processing module for the contributor feed.

Provides merging of contributor listings and organisation classification.
"""

from .merger import ContributorMerger
from .classifier import OrganisationClassifier, Classification

__all__ = [
    "ContributorMerger",
    "OrganisationClassifier",
    "Classification",
]
