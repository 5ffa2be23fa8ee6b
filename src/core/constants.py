"""Core constants used across devboard modules.

This module centralizes feed layouts, defaults and rule keywords.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from datetime import date

FEED_NAMES = ("phases", "modules", "logs")
CSV_DELIMITER = ","
CSV_QUOTE = '"'

MIN_LOG_FIELD_COUNT = 5
DEFAULT_LOG_DEVELOPER = "Desconocido"
DEFAULT_LOG_MODULE = "-"
DEFAULT_LOG_ACTION_TYPE = "Info"
DEFAULT_LOG_MESSAGE = ""
DEFAULT_LOG_TIME = "00:00:00"

BUGFIX_ACTION_TYPE = "bugfix"
BUGFIX_MODULE_MARKER = "bugfix"

MIN_PERCENT_COMPLETE = 0
MAX_PERCENT_COMPLETE = 100

DEFAULT_PHASE_COLOR = "grey"
LAST_UPDATE_BASELINE = date(2020, 1, 1)
HOURS_DISPLAY_DIGITS = 1

ACTION_ICONS = {
    "Bugfix": "🐞",
    "Testing": "🧪",
    "Investigación": "🔍",
    "Documentación": "📄",
}
DEFAULT_ACTION_ICON = "🔧"

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
FEED_TEXT_ENCODING = "utf-8"
FEED_SPEC_VERSION = 1
