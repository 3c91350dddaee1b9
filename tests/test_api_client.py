"""
Tests for the GitHub API client.

Covers paging over Link headers, status mapping, and the endpoint mixins.
"""

from unittest.mock import Mock

import pytest  # type: ignore
import requests  # type: ignore

from src.contributor_feed.api import GitHubAPI, helpers
from src.contributor_feed.core.errors import (
    RequestError,
    AuthExpiredError,
    RateLimitedError,
    PaginationError,
    ParseError,
)


BASE = "https://api.github.com"


@pytest.fixture
def api():
    """API client whose session is replaced by a mock."""
    client = GitHubAPI(access_token="secret-token", logger=Mock())
    client.session = Mock()
    return client


def page_responses(pages, make_response):
    return [
        make_response(body=page["body"], next_url=page["next"], url=page["url"])
        for page in pages
    ]


class TestPagedFetcher:
    """Test get_paged."""

    def test_follows_next_links_across_three_pages(self, api, contributor_pages, make_response):
        api.session.get.side_effect = page_responses(contributor_pages, make_response)

        records = api.get_paged("repos/playframework/playframework/contributors", lambda body: body)

        assert [r["login"] for r in records] == [
            "jroper", "gmethvin", "sadache", "richdougherty", "eamelink"
        ]
        assert api.session.get.call_count == 3

    def test_first_request_sets_page_size_and_next_requests_use_link(
        self, api, contributor_pages, make_response
    ):
        api.session.get.side_effect = page_responses(contributor_pages, make_response)

        api.get_paged("repos/playframework/playframework/contributors", lambda body: body)

        calls = api.session.get.call_args_list
        assert calls[0].args[0] == f"{BASE}/repos/playframework/playframework/contributors"
        assert calls[0].kwargs["params"] == {"per_page": 100}
        assert calls[1].args[0] == contributor_pages[0]["next"]
        assert calls[1].kwargs["params"] is None
        assert calls[2].args[0] == contributor_pages[1]["next"]

    def test_absolute_url_is_used_unchanged(self, api, make_response):
        api.session.get.return_value = make_response(body=[])

        api.get_paged("https://example.org/custom/list", lambda body: body)

        assert api.session.get.call_args.args[0] == "https://example.org/custom/list"

    def test_error_on_second_page_returns_nothing(self, api, contributor_pages, make_response):
        api.session.get.side_effect = [
            make_response(body=contributor_pages[0]["body"], next_url=contributor_pages[0]["next"]),
            make_response(status=500, body={"message": "boom"}, reason="Internal Server Error"),
        ]
        parsed = []

        def parser(body):
            parsed.extend(body)
            return body

        with pytest.raises(RequestError) as excinfo:
            api.get_paged("repos/playframework/playframework/contributors", parser)

        assert excinfo.value.status_code == 500
        assert api.session.get.call_count == 2
        # Only the first page was ever parsed; the failing page never was
        assert len(parsed) == 2

    def test_forbidden_is_rate_limited(self, api, make_response):
        api.session.get.return_value = make_response(
            status=403, body={"message": "API rate limit exceeded"}, reason="Forbidden"
        )

        with pytest.raises(RateLimitedError) as excinfo:
            api.get_paged("orgs/playframework/members", lambda body: body)

        assert excinfo.value.status_code == 403
        assert "rate limit" in str(excinfo.value)

    def test_too_many_requests_is_rate_limited(self, api, make_response):
        api.session.get.return_value = make_response(status=429, body={}, reason="Too Many Requests")

        with pytest.raises(RateLimitedError):
            api.get_paged("orgs/playframework/members", lambda body: body)

    def test_unauthorized_is_auth_expired(self, api, make_response):
        api.session.get.return_value = make_response(status=401, body={}, reason="Unauthorized")

        with pytest.raises(AuthExpiredError):
            api.get_json("users/jroper")

    def test_rate_limited_is_a_request_error(self):
        assert issubclass(RateLimitedError, RequestError)
        assert issubclass(AuthExpiredError, RequestError)
        assert issubclass(PaginationError, RequestError)

    def test_redirect_status_is_a_failure(self, api, make_response):
        api.session.get.return_value = make_response(status=304, body={}, reason="Not Modified")

        with pytest.raises(RequestError):
            api.get_json("users/jroper")

    def test_cyclic_next_link_raises(self, api, make_response):
        loop = f"{BASE}/repositories/1/contributors?page=2"
        api.session.get.side_effect = [
            make_response(body=[1], next_url=loop),
            make_response(body=[2], next_url=loop),
        ]

        with pytest.raises(PaginationError):
            api.get_paged("repos/a/b/contributors", lambda body: body)

        assert api.session.get.call_count == 2

    def test_page_bound_raises(self, api, make_response):
        api.max_pages = 2
        api.session.get.side_effect = [
            make_response(body=[1], next_url=f"{BASE}/x?page=2"),
            make_response(body=[2], next_url=f"{BASE}/x?page=3"),
            make_response(body=[3]),
        ]

        with pytest.raises(PaginationError):
            api.get_paged("x", lambda body: body)

        assert api.session.get.call_count == 2

    def test_unparseable_page_counts_as_empty(self, api, make_response):
        api.session.get.side_effect = [
            make_response(raw=b"<html>oops</html>", next_url=f"{BASE}/x?page=2"),
            make_response(body=[{"login": "a", "url": "u/a", "contributions": 1}]),
        ]

        records = api.get_paged("x", lambda body: helpers.parse_contributors(body, True))

        assert [r.login for r in records] == ["a"]

    def test_transport_error_is_wrapped(self, api):
        api.session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(RequestError) as excinfo:
            api.get_paged("x", lambda body: body)

        assert excinfo.value.status_code is None
        assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)


class TestClientSetup:
    """Test session configuration."""

    def test_token_header(self):
        client = GitHubAPI(access_token="abc123")
        try:
            assert client.session.headers["Authorization"] == "token abc123"
            assert client.session.headers["Accept"] == "application/vnd.github+json"
        finally:
            client.close()

    def test_missing_token_rejected(self):
        with pytest.raises(ValueError):
            GitHubAPI(access_token="")

    def test_base_url_trailing_slash(self):
        client = GitHubAPI(access_token="t", base_url="https://ghe.example.com/api/v3/")
        try:
            assert client.base_url == "https://ghe.example.com/api/v3"
        finally:
            client.close()


class TestEndpoints:
    """Test the repository, organisation and user operations."""

    def test_get_contributors_marks_source(self, api, make_response):
        api.session.get.return_value = make_response(body=[
            {"login": "jroper", "url": f"{BASE}/users/jroper", "avatar_url": "av", "contributions": 12},
        ])

        contributors = api.get_contributors("playframework/playframework", is_primary=True)

        assert api.session.get.call_args.args[0] == f"{BASE}/repos/playframework/playframework/contributors"
        assert len(contributors) == 1
        contributor = contributors[0]
        assert contributor.login == "jroper"
        assert contributor.url == f"{BASE}/users/jroper"
        assert contributor.link == "https://github.com/jroper"
        assert contributor.avatar == "av"
        assert contributor.contributions == 12
        assert contributor.is_primary is True

    def test_get_organization_members(self, api, make_response):
        api.session.get.side_effect = [
            make_response(body=[{"url": f"{BASE}/users/a"}], next_url=f"{BASE}/orgs/o/members?page=2"),
            make_response(body=[{"url": f"{BASE}/users/b"}]),
        ]

        members = api.get_organization_members("o")

        assert members == frozenset({f"{BASE}/users/a", f"{BASE}/users/b"})
        assert api.session.get.call_args_list[0].args[0] == f"{BASE}/orgs/o/members"

    def test_get_user(self, api, make_response):
        api.session.get.return_value = make_response(body={
            "login": "jroper",
            "name": "James Roper",
            "bio": "Play",
            "html_url": "https://github.com/jroper",
        })

        profile = api.get_user(f"{BASE}/users/jroper")

        assert profile == {
            "name": "James Roper",
            "bio": "Play",
            "html_url": "https://github.com/jroper",
        }

    def test_get_user_with_unexpected_body(self, api, make_response):
        api.session.get.return_value = make_response(body=["not", "a", "profile"])

        profile = api.get_user(f"{BASE}/users/jroper")

        assert profile == {"name": None, "bio": None, "html_url": None}

    def test_get_user_failure_propagates(self, api, make_response):
        api.session.get.return_value = make_response(status=404, body={}, reason="Not Found")

        with pytest.raises(RequestError):
            api.get_user(f"{BASE}/users/ghost")


class TestHelpers:
    """Test parsing helpers."""

    def test_resolve_url(self):
        assert helpers.resolve_url(BASE, "orgs/x/members") == f"{BASE}/orgs/x/members"
        assert helpers.resolve_url(BASE + "/", "/orgs/x") == f"{BASE}/orgs/x"
        assert helpers.resolve_url(BASE, "http://other/y") == "http://other/y"

    def test_next_link_absent(self, make_response):
        assert helpers.next_link(make_response(body=[])) is None

    def test_next_link_present(self, make_response):
        response = make_response(body=[], next_url=f"{BASE}/x?page=2")
        assert helpers.next_link(response) == f"{BASE}/x?page=2"

    def test_parse_contributors_rejects_non_list(self):
        with pytest.raises(ParseError):
            helpers.parse_contributors({"message": "Not Found"}, True)

    def test_parse_contributor_rejects_missing_login(self):
        with pytest.raises(ParseError):
            helpers.parse_contributor({"url": "u", "contributions": 1}, False)

    def test_parse_contributor_rejects_negative_count(self):
        with pytest.raises(ParseError):
            helpers.parse_contributor({"login": "a", "url": "u", "contributions": -1}, False)

    def test_parse_contributor_falls_back_to_gravatar(self):
        contributor = helpers.parse_contributor(
            {"login": "a", "url": "u", "gravatar_id": "g", "contributions": 1}, False
        )
        assert contributor.avatar == "g"

    def test_parse_profile_blank_fields(self):
        assert helpers.parse_profile({"name": "", "bio": None}) == {
            "name": None, "bio": None, "html_url": None
        }
