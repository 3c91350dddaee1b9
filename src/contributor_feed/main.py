"""
Application wiring for the contributor feed.

The web layer creates one ContributorFeedApp, starts it, and reads the
current snapshot through contributors().
"""

from typing import Optional

from .core import Config, DateUtils, setup_logger
from .api import GitHubAPI
from .fallback import FALLBACK_CONTRIBUTORS
from .models import Contributors
from .models.organisation import organisations_from_config
from .services import ContributorPipeline, RefreshScheduler, SnapshotPublisher


class ContributorFeedApp:
    """Periodically refreshed contributor listing."""

    def __init__(self, config_file: Optional[str] = None, config: Optional[Config] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            config: Already loaded configuration; takes precedence over config_file
        """
        self.config = config or Config(config_file)

        self.logger = setup_logger()
        self.logger.info(f"Configuration: {self.config}")

        self.date_utils = DateUtils(self.logger)
        self.publisher = SnapshotPublisher(FALLBACK_CONTRIBUTORS, self.logger)

        # Only set when an access token is configured
        self.api_client: Optional[GitHubAPI] = None
        self.pipeline: Optional[ContributorPipeline] = None
        self.scheduler: Optional[RefreshScheduler] = None

    @property
    def refresh_enabled(self) -> bool:
        return self.config.access_token is not None

    def initialize_components(self) -> None:
        """Create the API client, pipeline and scheduler."""
        self.logger.info("Initializing components...")

        self.api_client = GitHubAPI(
            access_token=self.config.access_token,
            base_url=self.config.api_base_url,
            timeout=self.config.api_timeout,
            max_retries=self.config.api_max_retries,
            per_page=self.config.per_page,
            max_pages=self.config.max_pages,
            logger=self.logger
        )

        self.pipeline = ContributorPipeline(
            api_client=self.api_client,
            publisher=self.publisher,
            organisations=organisations_from_config(self.config.organisations),
            primary_source=self.config.primary_source,
            secondary_source=self.config.secondary_source,
            max_workers=self.config.max_workers,
            logger=self.logger
        )

        self.scheduler = RefreshScheduler(
            refresh=self.pipeline.refresh,
            interval_seconds=self.config.refresh_interval_hours * 3600,
            initial_delay_seconds=self.config.initial_delay_seconds,
            logger=self.logger
        )

        self.logger.info("All components initialized successfully")

    def start(self) -> None:
        """Start periodic refreshing, if an access token is configured."""
        if not self.refresh_enabled:
            self.logger.info("Not fetching GitHub contributors because no access token is set.")
            return

        if self.scheduler is None:
            self.initialize_components()
        self.scheduler.start()

    def stop(self) -> None:
        """Stop refreshing and release the HTTP session."""
        if self.scheduler is not None:
            self.scheduler.stop()
        if self.api_client is not None:
            self.api_client.close()

    def contributors(self) -> Contributors:
        """Get the current snapshot for display."""
        return self.publisher.current()

    def last_refreshed(self) -> str:
        """When the current snapshot was fetched, in the display timezone."""
        return self.date_utils.format_timestamp(
            self.contributors().refreshed_at,
            self.config.display_timezone
        )

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
