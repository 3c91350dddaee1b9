"""
User operations for the GitHub API.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..core.errors import ParseError
from .helpers import parse_profile


class UsersAPI:
    """Mixin for user profile API operations."""

    logger: logging.Logger

    # Provided by APIClient
    get_json: Callable[[str], Any]

    def get_user(self, url: str) -> Dict[str, Optional[str]]:
        """
        Get the display fields of a user profile.

        An unexpected body yields empty fields rather than an error.

        Args:
            url: Profile API URL (Contributor.url) or 'users/<login>' path

        Returns:
            Dictionary with 'name', 'bio' and 'html_url'
        """
        self.logger.debug(f"Fetching profile {url}")
        try:
            return parse_profile(self.get_json(url))
        except ParseError as e:
            self.logger.warning(f"Unexpected profile body for {url}: {e}")
            return {"name": None, "bio": None, "html_url": None}
