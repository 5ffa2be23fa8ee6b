"""Unit tests for the dashboard SDK client."""

from __future__ import annotations

import pytest

from core.config import DevboardConfig
from core.errors import DevboardConfigError
from store.dashboard_sdk import DevboardClient
from tests.fixture_paths import fixture_path


def _config_without_feeds() -> DevboardConfig:
    return DevboardConfig(
        phases_uri=None,
        modules_uri=None,
        logs_uri=None,
        http_timeout_seconds=5.0,
        s3_region=None,
        s3_profile=None,
    )


def test_load_from_spec_reads_local_feeds() -> None:
    """Client should ingest the feeds named in a YAML spec."""
    client = DevboardClient(_config_without_feeds())

    data = client.load_from_spec(str(fixture_path("feed_spec/valid_feeds.yaml")))

    assert [module.name for module in data.modules] == ["Auth", "Bugfix Pool", "Reports"]


def test_load_without_sources_requires_configuration() -> None:
    """Loading without explicit or configured sources should fail fast."""
    client = DevboardClient(_config_without_feeds())

    with pytest.raises(DevboardConfigError):
        client.load()


def test_public_surface_reexports_client() -> None:
    """The devboard module should expose the SDK client and pipeline stages."""
    import devboard

    assert devboard.DevboardClient is DevboardClient
    assert callable(devboard.build_dashboard) and "aggregate_hours" in devboard.__all__


def test_public_surface_reexports_dashboard_views() -> None:
    """Derived views used by dashboard consumers should be importable from devboard."""
    import devboard
    from transforms import dashboard_views

    for name in ["action_icon", "distinct_log_modules", "logs_for_module", "phase_color"]:
        assert getattr(devboard, name) is getattr(dashboard_views, name) and name in devboard.__all__


def test_client_exposes_its_config() -> None:
    """The client should keep the configuration it was created with."""
    config = _config_without_feeds()

    assert DevboardClient(config).config is config
