"""Python SDK for dashboard ingestion.

This module exposes the high-level client used by the CLI and by
callers embedding devboard.
"""

from __future__ import annotations

from core.config import DevboardConfig
from core.feed_spec import load_feed_spec
from core.types import DashboardData, FeedSources
from ingest.pipeline import run_ingestion


class DevboardClient:
    """Primary SDK entry point for loading dashboard data."""

    def __init__(self, config: DevboardConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or DevboardConfig.from_env()

    @property
    def config(self) -> DevboardConfig:
        """Return the runtime configuration used by this client."""
        return self._config

    def load(self, sources: FeedSources | None = None) -> DashboardData:
        """Run one ingestion cycle.

        Every call fetches and decodes the feeds again; no result is cached.

        Args:
            sources: Feed locations, defaults to the configured ones.

        Returns:
            Complete dashboard data.

        Raises:
            DevboardConfigError: If no sources are given or configured.
            DevboardIngestError: If the ingestion cycle fails.
        """
        return run_ingestion(sources or self._config.feed_sources(), self._config)

    def load_from_spec(self, spec_path: str) -> DashboardData:
        """Run one ingestion cycle for the feeds named in a YAML spec.

        Raises:
            DevboardFeedSpecError: If the spec file is invalid.
            DevboardIngestError: If the ingestion cycle fails.
        """
        return self.load(load_feed_spec(spec_path))
