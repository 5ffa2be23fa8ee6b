"""Unit tests for dashboard payload serialization."""

from __future__ import annotations

import json

from ingest.pipeline import build_dashboard
from store.dashboard_payload import dashboard_to_json, dashboard_to_payload
from tests.fixture_paths import feed_text


def test_dashboard_to_payload_serializes_timestamps() -> None:
    """Valid timestamps become ISO strings and invalid ones become null."""
    data = build_dashboard(feed_text("phases"), feed_text("modules"), feed_text("logs"))

    payload = dashboard_to_payload(data)
    timestamps = [row["timestamp"] for row in payload["logs"]]  # type: ignore[index]

    assert timestamps == ["2024-01-03T09:00:00", "2024-01-03T00:00:00", "2023-12-25T14:30:00", None]


def test_dashboard_to_json_round_trips_module_hours() -> None:
    """JSON output should carry aggregated hours and non-ASCII text."""
    data = build_dashboard(feed_text("phases"), feed_text("modules"), feed_text("logs"))

    parsed = json.loads(dashboard_to_json(data))

    assert [module["total_hours"] for module in parsed["modules"]] == [3.5, 2.5, 1.5]
    assert parsed["modules"][0]["status_icon"] == "✅"
