"""Parse-or-default coercions for feed cells.

Feed cells are loosely typed. These helpers never raise: a cell that
cannot be parsed yields the default, and the result records whether
the default was used so callers can tell a real zero from a failure.
"""

from __future__ import annotations

import math
import re
from typing import Sequence

from core.types import ParsedNumber

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int_or_default(raw_value: str, default: int = 0) -> ParsedNumber:
    """Parse the leading integer of a cell.

    Trailing text is ignored, so ``"12abc"`` and ``"3.9"`` parse to 12 and 3.

    Args:
        raw_value: Raw cell text.
        default: Value substituted when no integer prefix exists.

    Returns:
        Tagged parse result.
    """
    match = _LEADING_INT.match(raw_value)
    if match is None:
        return ParsedNumber(value=default, used_default=True)
    return ParsedNumber(value=int(match.group(1)), used_default=False)


def parse_float_or_default(raw_value: str, default: float = 0.0) -> ParsedNumber:
    """Parse the leading decimal number of a cell.

    Args:
        raw_value: Raw cell text using a decimal point.
        default: Value substituted when no finite number prefix exists.

    Returns:
        Tagged parse result.
    """
    match = _LEADING_FLOAT.match(raw_value)
    if match is None:
        return ParsedNumber(value=default, used_default=True)
    value = float(match.group(1))
    if not math.isfinite(value):
        return ParsedNumber(value=default, used_default=True)
    return ParsedNumber(value=value, used_default=False)


def normalize_decimal_comma(raw_value: str) -> str:
    """Replace the first decimal comma with a decimal point."""
    return raw_value.replace(",", ".", 1)


def cell(fields: Sequence[str], index: int, default: str = "") -> str:
    """Return a field value, or the default when missing or empty."""
    if index >= len(fields):
        return default
    return fields[index] or default
