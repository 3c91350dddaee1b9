"""
Bundled contributor data.

Served until the first refresh succeeds, and indefinitely when no access
token is configured.
"""

from typing import Any, Dict, List

from .core import constants
from .models import Contributor, Contributors, CoreContributor, Organisation
from .models.organisation import organisations_from_config
from .services.enricher import core_sort_key

_API_USERS = "https://api.github.com/users/"

_CORE: List[Dict[str, Any]] = [
    {"login": "jroper", "name": "James Roper"},
    {"login": "gmethvin", "name": "Greg Methvin"},
    {"login": "marcospereira", "name": "Marcos Pereira"},
    {"login": "wsargent", "name": "Will Sargent"},
    {"login": "mkurz", "name": "Matthias Kurz"},
    {"login": "guillaumebort", "name": "Guillaume Bort"},
]

_ORGANISATION_BASED: Dict[str, List[Dict[str, Any]]] = {
    "typesafehub": [
        {"login": "richdougherty", "contributions": 180},
        {"login": "huntc", "contributions": 52},
    ],
    "zenexity": [
        {"login": "sadache", "contributions": 410},
        {"login": "mandubian", "contributions": 60},
    ],
    "lunatech-labs": [
        {"login": "eamelink", "contributions": 25},
    ],
}

_OTHERS: List[Dict[str, Any]] = [
    {"login": "pvlugter", "contributions": 96},
    {"login": "julienrf", "contributions": 38},
    {"login": "ignasi35", "contributions": 21},
]


def _contributor(entry: Dict[str, Any]) -> Contributor:
    login = entry["login"]
    return Contributor(
        url=_API_USERS + login,
        login=login,
        link=constants.PROFILE_LINK_BASE + login,
        avatar=None,
        contributions=entry["contributions"],
        is_primary=True,
    )


def _core_contributor(entry: Dict[str, Any]) -> CoreContributor:
    login = entry["login"]
    return CoreContributor(
        url=_API_USERS + login,
        login=login,
        name=entry.get("name"),
        link=constants.PROFILE_LINK_BASE + login,
        avatar=None,
        bio=entry.get("bio"),
    )


def build_fallback_contributors() -> Contributors:
    """Build the fallback snapshot from the bundled data."""
    organisations: Dict[str, Organisation] = {
        org.id: org for org in organisations_from_config(constants.DEFAULT_ORGANISATIONS)
    }
    core = sorted((_core_contributor(entry) for entry in _CORE), key=core_sort_key)
    grouped = [
        (organisations[org_id], [_contributor(entry) for entry in entries])
        for org_id, entries in _ORGANISATION_BASED.items()
    ]
    return Contributors.build(
        core=core,
        organisation_based=grouped,
        others=[_contributor(entry) for entry in _OTHERS],
    )


FALLBACK_CONTRIBUTORS = build_fallback_contributors()
