"""
Core utilities for the contributor feed.

Provides configuration management, error types, and logging functionality.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .errors import (
    ContributorFeedError,
    RequestError,
    AuthExpiredError,
    RateLimitedError,
    PaginationError,
    ParseError,
    RefreshFailure,
)

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "ContributorFeedError",
    "RequestError",
    "AuthExpiredError",
    "RateLimitedError",
    "PaginationError",
    "ParseError",
    "RefreshFailure",
]
