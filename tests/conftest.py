"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
import json
from pathlib import Path
from typing import Any, Optional

import pytest
import requests  # type: ignore

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def build_response(
    status: int = 200,
    body: Any = None,
    next_url: Optional[str] = None,
    url: str = "https://api.github.com/",
    reason: str = "OK",
    raw: Optional[bytes] = None
) -> requests.Response:
    """Build a real requests.Response so Link and JSON handling run unmocked."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.url = url
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body).encode("utf-8")
    if next_url:
        response.headers["Link"] = (
            f'<{next_url}>; rel="next", <{next_url}&last=1>; rel="last"'
        )
    return response


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def contributor_pages(fixtures_dir):
    """Load the three linked contributor pages."""
    with open(fixtures_dir / "contributors_pages.json") as f:
        return json.load(f)["pages"]


@pytest.fixture
def make_response():
    """Factory for requests.Response objects."""
    return build_response


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
