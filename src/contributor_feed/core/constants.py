"""
Application-wide constants for the contributor feed.

This module defines default values used throughout the application.
Values that can be overridden live in the configuration file.
"""

# GitHub API
DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "contributor-feed"
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_MAX_RETRIES = 3
DEFAULT_PER_PAGE = 100
# Upper bound on pages followed for a single listing
DEFAULT_MAX_PAGES = 100

# Profile links are built from the login
PROFILE_LINK_BASE = "https://github.com/"

# Repositories polled for contributors
DEFAULT_PRIMARY_SOURCE = "playframework/playframework"
DEFAULT_SECONDARY_SOURCE = "playframework/play1"

# Refresh scheduling
DEFAULT_REFRESH_INTERVAL_HOURS = 24
DEFAULT_INITIAL_DELAY_SECONDS = 0
DEFAULT_MAX_WORKERS = 4

# Privileged organisation membership requires more than this many contributions
PRIVILEGED_MIN_CONTRIBUTIONS = 10

# Sort key for core contributors without a surname; sorts after any real text
NO_SURNAME_SORT_KEY = "\U0010ffff"

DEFAULT_DISPLAY_TIMEZONE = "UTC"

DEFAULT_ORGANISATIONS = [
    {
        "id": "playframework",
        "name": "Play framework",
        "url": "https://www.playframework.org",
        "privileged": True,
    },
    {
        "id": "zenexity",
        "name": "Zengularity",
        "url": "http://www.zengularity.com",
        "privileged": False,
    },
    {
        "id": "typesafehub",
        "name": "Typesafe",
        "url": "https://www.typesafe.com",
        "privileged": False,
    },
    {
        "id": "lunatech-labs",
        "name": "Lunatech Labs",
        "url": "http://www.lunatech.com",
        "privileged": False,
    },
]
