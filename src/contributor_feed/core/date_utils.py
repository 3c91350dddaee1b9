"""
Date and timezone utilities.

Snapshots are stamped in UTC and converted for display on demand.
"""

import logging
from datetime import datetime
from typing import Optional

import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/Berlin', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def now_utc() -> datetime:
        """Current time as a timezone-aware UTC datetime."""
        return datetime.now(pytz.UTC)

    def to_timezone(self, dt: datetime, timezone_str: str) -> datetime:
        """
        Convert a datetime to the given timezone.

        Naive datetimes are assumed to be UTC.
        """
        if dt.tzinfo is None:
            dt = pytz.UTC.localize(dt)
        local = dt.astimezone(self.parse_timezone(timezone_str))
        self.logger.debug(f"Converted {dt.isoformat()} -> {local.isoformat()}")
        return local

    def format_timestamp(self, dt: Optional[datetime], timezone_str: str = "UTC") -> str:
        """Human readable timestamp, or 'never' for missing values."""
        if dt is None:
            return "never"
        return self.to_timezone(dt, timezone_str).strftime("%Y-%m-%d %H:%M:%S %Z")
