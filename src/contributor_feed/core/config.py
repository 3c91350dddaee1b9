"""
Configuration module for the contributor feed.

Loads configuration from an optional JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, List, Optional
from pathlib import Path

from . import constants


DEFAULT_CONFIG: Dict[str, Any] = {
    "github": {
        "base_url": constants.DEFAULT_API_BASE_URL,
        "timeout": constants.DEFAULT_TIMEOUT,
        "max_retries": constants.DEFAULT_MAX_RETRIES,
        "per_page": constants.DEFAULT_PER_PAGE,
        "max_pages": constants.DEFAULT_MAX_PAGES,
    },
    "sources": {
        "primary": constants.DEFAULT_PRIMARY_SOURCE,
        "secondary": constants.DEFAULT_SECONDARY_SOURCE,
    },
    "refresh": {
        "interval_hours": constants.DEFAULT_REFRESH_INTERVAL_HOURS,
        "initial_delay_seconds": constants.DEFAULT_INITIAL_DELAY_SECONDS,
        "max_workers": constants.DEFAULT_MAX_WORKERS,
    },
    "display": {
        "timezone": constants.DEFAULT_DISPLAY_TIMEZONE,
    },
    "organisations": constants.DEFAULT_ORGANISATIONS,
}


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'. Only an explicitly named file
                        has to exist; otherwise built-in defaults apply.
        """
        self._explicit = config_file is not None or os.getenv("CONFIG_FILE") is not None
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file, merging it over the defaults."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {self.config_file}")

        for section, value in loaded.items():
            if isinstance(value, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(value)
            else:
                self.config[section] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("GITHUB_ACCESS_TOKEN"):
            self.config["github"]["access_token"] = os.getenv("GITHUB_ACCESS_TOKEN")

        if os.getenv("GITHUB_API_BASE_URL"):
            self.config["github"]["base_url"] = os.getenv("GITHUB_API_BASE_URL")

        interval = os.getenv("REFRESH_INTERVAL_HOURS")
        if interval:
            try:
                self.config["refresh"]["interval_hours"] = float(interval)
            except ValueError:
                raise ValueError(f"REFRESH_INTERVAL_HOURS must be a number, got {interval!r}")

    def _validate_config(self) -> None:
        """Validate configuration values."""
        if self.refresh_interval_hours <= 0:
            raise ValueError("refresh.interval_hours must be positive")

        if self.initial_delay_seconds < 0:
            raise ValueError("refresh.initial_delay_seconds must not be negative")

        if self.max_workers < 1:
            raise ValueError("refresh.max_workers must be at least 1")

        if self.max_pages < 1:
            raise ValueError("github.max_pages must be at least 1")

        organisations = self.organisations
        if not isinstance(organisations, list):
            raise ValueError("organisations must be a list")

        not_objects = [i for i, org in enumerate(organisations) if not isinstance(org, dict)]
        if not_objects:
            raise ValueError(
                f"Organisation entries must be objects: {', '.join(str(i) for i in not_objects)}"
            )

        missing_ids = [i for i, org in enumerate(organisations) if not org.get("id")]
        if missing_ids:
            raise ValueError(
                f"Organisation entries missing 'id': {', '.join(str(i) for i in missing_ids)}"
            )

        privileged = [org["id"] for org in organisations if org.get("privileged")]
        if len(privileged) > 1:
            raise ValueError(
                f"At most one privileged organisation is allowed, got: {', '.join(privileged)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'github.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def access_token(self) -> Optional[str]:
        """Get the GitHub access token; None disables refreshing."""
        return self.get("github.access_token") or None

    @property
    def api_base_url(self) -> str:
        return self.get("github.base_url", constants.DEFAULT_API_BASE_URL)

    @property
    def api_timeout(self) -> int:
        return self.get("github.timeout", constants.DEFAULT_TIMEOUT)

    @property
    def api_max_retries(self) -> int:
        return self.get("github.max_retries", constants.DEFAULT_MAX_RETRIES)

    @property
    def per_page(self) -> int:
        return self.get("github.per_page", constants.DEFAULT_PER_PAGE)

    @property
    def max_pages(self) -> int:
        return self.get("github.max_pages", constants.DEFAULT_MAX_PAGES)

    @property
    def primary_source(self) -> str:
        """Repository ('owner/name') whose contributors carry the primary flag."""
        return self.get("sources.primary", constants.DEFAULT_PRIMARY_SOURCE)

    @property
    def secondary_source(self) -> str:
        return self.get("sources.secondary", constants.DEFAULT_SECONDARY_SOURCE)

    @property
    def refresh_interval_hours(self) -> float:
        return self.get("refresh.interval_hours", constants.DEFAULT_REFRESH_INTERVAL_HOURS)

    @property
    def initial_delay_seconds(self) -> float:
        return self.get("refresh.initial_delay_seconds", constants.DEFAULT_INITIAL_DELAY_SECONDS)

    @property
    def max_workers(self) -> int:
        return self.get("refresh.max_workers", constants.DEFAULT_MAX_WORKERS)

    @property
    def display_timezone(self) -> str:
        return self.get("display.timezone", constants.DEFAULT_DISPLAY_TIMEZONE)

    @property
    def organisations(self) -> List[Dict[str, Any]]:
        """Get the raw organisation entries in priority order."""
        return self.get("organisations", [])

    def __repr__(self) -> str:
        """String representation of config; never includes the token."""
        token_state = "set" if self.access_token else "unset"
        return f"Config(file={self.config_file}, token={token_state})"
