"""Timestamp parsing for daily log rows.

Log dates arrive either as ISO-8601 text or as ``dd/mm/yyyy`` with an
optional ``hh:mm[:ss]`` time. Slash dates are always read day first.
"""

from __future__ import annotations

from datetime import datetime, timezone

from core.constants import DEFAULT_LOG_TIME


def parse_log_timestamp(raw_value: str) -> datetime | None:
    """Parse a log date cell.

    Args:
        raw_value: Raw date cell, e.g. ``"25/12/2023 14:30:00"``.

    Returns:
        Naive datetime, or None when the cell is not a valid date.
    """
    value = raw_value.strip()
    direct = _parse_iso(value)
    if direct is not None:
        return direct
    tokens = value.split()
    if not tokens or "/" not in tokens[0]:
        return None
    date_parts = tokens[0].split("/")
    if len(date_parts) != 3:
        return None
    day, month, year = date_parts
    time_token = tokens[1] if len(tokens) > 1 else DEFAULT_LOG_TIME
    return _parse_iso(f"{year}-{month.zfill(2)}-{day.zfill(2)}T{_pad_time(time_token)}")


def _parse_iso(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed
    # Aware values are compared against naive ones when sorting.
    try:
        return parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (OverflowError, ValueError):
        return None


def _pad_time(time_token: str) -> str:
    return ":".join(part.zfill(2) for part in time_token.split(":"))
