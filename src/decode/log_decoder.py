"""Daily logs feed decoder.

Column layout: ``[date(+time), developer, moduleName, actionType,
message, workingTime]``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from core.constants import (
    DEFAULT_LOG_ACTION_TYPE,
    DEFAULT_LOG_DEVELOPER,
    DEFAULT_LOG_MESSAGE,
    DEFAULT_LOG_MODULE,
    MIN_LOG_FIELD_COUNT,
)
from core.types import WorkLogEntry
from decode.coercion import cell, normalize_decimal_comma, parse_float_or_default
from decode.log_timestamp import parse_log_timestamp
from ingest.record_reader import read_records


def decode_log_row(fields: Sequence[str]) -> WorkLogEntry | None:
    """Decode one daily log row.

    Args:
        fields: Tokenized row values.

    Returns:
        Log entry, or None when the row has too few columns.
    """
    if len(fields) < MIN_LOG_FIELD_COUNT:
        return None
    working_time = parse_float_or_default(normalize_decimal_comma(cell(fields, 5, "0")))
    return WorkLogEntry(
        timestamp=parse_log_timestamp(fields[0]),
        developer=cell(fields, 1, DEFAULT_LOG_DEVELOPER),
        module_name=cell(fields, 2, DEFAULT_LOG_MODULE),
        action_type=cell(fields, 3, DEFAULT_LOG_ACTION_TYPE),
        message=cell(fields, 4, DEFAULT_LOG_MESSAGE),
        working_time=max(float(working_time.value), 0.0),
    )


def decode_logs(text: str) -> list[WorkLogEntry]:
    """Decode a daily logs payload, newest entries first.

    Args:
        text: Raw feed payload including the header line.

    Returns:
        Log entries sorted by timestamp descending.
    """
    rows = (decode_log_row(fields) for fields in read_records(text))
    return sort_logs_newest_first(entry for entry in rows if entry is not None)


def sort_logs_newest_first(entries: Iterable[WorkLogEntry]) -> list[WorkLogEntry]:
    """Sort entries by timestamp descending.

    Entries without a timestamp come last. Equal timestamps keep their
    input order.
    """
    return sorted(entries, key=_timestamp_sort_key, reverse=True)


def _timestamp_sort_key(entry: WorkLogEntry) -> tuple[bool, datetime]:
    if entry.timestamp is None:
        return (False, datetime.min)
    return (True, entry.timestamp)
