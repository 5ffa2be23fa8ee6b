"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import DevboardConfig
from core.errors import DevboardConfigError
from core.types import FeedSources


def test_from_env_reads_feed_locations(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should expose feed locations from environment."""
    monkeypatch.setenv("DEVBOARD_PHASES_URI", "https://example.org/phases.csv")
    monkeypatch.setenv("DEVBOARD_MODULES_URI", "s3://bucket/modules.csv")
    monkeypatch.setenv("DEVBOARD_LOGS_URI", " ./logs.csv ")

    sources = DevboardConfig.from_env().feed_sources()

    assert sources == FeedSources(
        phases_uri="https://example.org/phases.csv",
        modules_uri="s3://bucket/modules.csv",
        logs_uri="./logs.csv",
    )


def test_feed_sources_raises_when_locations_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Missing feed variables should be reported by name."""
    monkeypatch.setenv("DEVBOARD_PHASES_URI", "phases.csv")
    monkeypatch.delenv("DEVBOARD_MODULES_URI", raising=False)
    monkeypatch.delenv("DEVBOARD_LOGS_URI", raising=False)

    with pytest.raises(DevboardConfigError, match="DEVBOARD_MODULES_URI, DEVBOARD_LOGS_URI"):
        DevboardConfig.from_env().feed_sources()


def test_from_env_uses_default_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Timeout should default when unset."""
    monkeypatch.delenv("DEVBOARD_HTTP_TIMEOUT", raising=False)

    assert DevboardConfig.from_env().http_timeout_seconds == 30.0


@pytest.mark.parametrize("raw_timeout", ["not-a-number", "0", "-5"])
def test_from_env_raises_for_invalid_timeout(
    monkeypatch: pytest.MonkeyPatch,
    raw_timeout: str,
) -> None:
    """Config should fail for non-numeric or non-positive timeouts."""
    monkeypatch.setenv("DEVBOARD_HTTP_TIMEOUT", raw_timeout)

    with pytest.raises(DevboardConfigError):
        DevboardConfig.from_env()
