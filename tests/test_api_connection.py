"""
API connection integration tests.

Tests basic operations against the live GitHub API.
These tests require GITHUB_ACCESS_TOKEN in the environment or config.json.
"""

import pytest  # type: ignore

from src.contributor_feed.core import Config
from src.contributor_feed.api import GitHubAPI


pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def config():
    """Load configuration for API tests."""
    cfg = Config()
    if not cfg.access_token:
        pytest.skip("No GitHub access token configured. Set GITHUB_ACCESS_TOKEN to run.")
    return cfg


@pytest.fixture(scope="module")
def api_client(config):
    """Create authenticated API client."""
    client = GitHubAPI(
        access_token=config.access_token,
        base_url=config.api_base_url,
        timeout=config.api_timeout,
        max_retries=config.api_max_retries,
    )
    yield client
    client.close()


class TestAPIConnection:
    """Test API connectivity and basic operations."""

    def test_get_contributors(self, api_client, config):
        contributors = api_client.get_contributors(config.secondary_source)

        assert isinstance(contributors, list)
        assert len(contributors) > 0
        assert len({c.login for c in contributors}) == len(contributors)

    def test_get_organization_members(self, api_client, config):
        first_org = config.organisations[0]["id"]
        members = api_client.get_organization_members(first_org)

        assert isinstance(members, frozenset)

    def test_get_user(self, api_client, config):
        contributors = api_client.get_contributors(config.secondary_source)
        profile = api_client.get_user(contributors[0].url)

        assert set(profile) == {"name", "bio", "html_url"}
