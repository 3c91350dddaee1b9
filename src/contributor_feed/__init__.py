"""
Contributor Feed

Periodically pulls repository contributors from GitHub, groups them by
organisation, and publishes an immutable snapshot for display.
"""

__version__ = "0.1.0"
__description__ = "Periodically refreshed GitHub contributor listing"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "ContributorFeedApp":
        from .main import ContributorFeedApp
        return ContributorFeedApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ContributorFeedApp",
]
