"""
Helper functions for API operations.

URL resolution, continuation-link extraction, and parsers that turn
decoded response bodies into model objects.
"""

import re
from typing import Any, Dict, List, Optional

import requests  # type: ignore

from ..core.constants import PROFILE_LINK_BASE
from ..core.errors import ParseError
from ..models import Contributor

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


def resolve_url(base_url: str, path: str) -> str:
    """
    Resolve an API path against the base URL.

    Absolute http(s) URLs, such as continuation links and profile URLs
    returned by the API itself, are used unchanged.
    """
    if _ABSOLUTE_URL.match(path):
        return path
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def next_link(response: requests.Response) -> Optional[str]:
    """
    Get the rel="next" URL from a response's Link header.

    Returns:
        The next page URL, or None when this is the last page
    """
    link = response.links.get("next")
    if not link:
        return None
    return link.get("url") or None


def decode_json(response: requests.Response) -> Any:
    """
    Decode a JSON response body.

    Raises:
        ParseError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"Response body is not valid JSON: {e}") from e


def _require_list(body: Any, what: str) -> List[Any]:
    if not isinstance(body, list):
        raise ParseError(f"Expected a list of {what}, got {type(body).__name__}")
    return body


def _require_dict(item: Any, what: str) -> Dict[str, Any]:
    if not isinstance(item, dict):
        raise ParseError(f"Expected {what} object, got {type(item).__name__}")
    return item


def parse_contributor(item: Any, is_primary: bool) -> Contributor:
    """
    Parse a single record of the repository contributors listing.

    Args:
        item: Decoded contributor record
        is_primary: Whether the record comes from the primary repository

    Raises:
        ParseError: If a required field is missing or has the wrong type
    """
    data = _require_dict(item, "contributor")
    login = data.get("login")
    url = data.get("url")
    contributions = data.get("contributions")

    if not isinstance(login, str) or not isinstance(url, str):
        raise ParseError(f"Contributor record without login or url: {data!r}")
    if isinstance(contributions, bool) or not isinstance(contributions, int) or contributions < 0:
        raise ParseError(f"Invalid contribution count for {login}: {contributions!r}")

    avatar = data.get("avatar_url") or data.get("gravatar_id") or None

    return Contributor(
        url=url,
        login=login,
        link=PROFILE_LINK_BASE + login,
        avatar=avatar,
        contributions=contributions,
        is_primary=is_primary,
    )


def parse_contributors(body: Any, is_primary: bool) -> List[Contributor]:
    """Parse one page of the repository contributors listing."""
    return [parse_contributor(item, is_primary) for item in _require_list(body, "contributors")]


def parse_members(body: Any) -> List[str]:
    """
    Parse one page of an organisation member listing.

    Returns:
        Member API URLs, comparable with Contributor.url
    """
    members = []
    for item in _require_list(body, "members"):
        url = _require_dict(item, "member").get("url")
        if not isinstance(url, str):
            raise ParseError(f"Member record without url: {item!r}")
        members.append(url)
    return members


def parse_profile(body: Any) -> Dict[str, Optional[str]]:
    """
    Extract the optional display fields from a user profile.

    Returns:
        Dictionary with 'name', 'bio' and 'html_url', each possibly None
    """
    data = _require_dict(body, "user profile")

    def optional_str(key: str) -> Optional[str]:
        value = data.get(key)
        return value if isinstance(value, str) and value else None

    return {
        "name": optional_str("name"),
        "bio": optional_str("bio"),
        "html_url": optional_str("html_url"),
    }
