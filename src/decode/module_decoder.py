"""Modules feed decoder.

Column layout: ``[id, name, percentComplete, lastModifiedDate, phaseId,
startDate, endDate, statusLabel, statusIcon, statusStyleClass, comment]``.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import MAX_PERCENT_COMPLETE, MIN_PERCENT_COMPLETE
from core.types import Module
from decode.coercion import cell, parse_int_or_default
from ingest.record_reader import read_records


def decode_module_row(fields: Sequence[str]) -> Module | None:
    """Decode one modules row.

    Args:
        fields: Tokenized row values.

    Returns:
        Module with zero hours, or None when the id is not a positive integer.
    """
    module_id = int(parse_int_or_default(cell(fields, 0)).value)
    if module_id <= 0:
        return None
    percent = int(parse_int_or_default(cell(fields, 2)).value)
    return Module(
        id=module_id,
        name=cell(fields, 1),
        percent_complete=min(max(percent, MIN_PERCENT_COMPLETE), MAX_PERCENT_COMPLETE),
        last_modified_date=cell(fields, 3),
        phase_id=cell(fields, 4),
        start_date=cell(fields, 5),
        end_date=cell(fields, 6),
        status_label=cell(fields, 7),
        status_icon=cell(fields, 8),
        status_style_class=cell(fields, 9),
        comment=cell(fields, 10),
    )


def decode_modules(text: str) -> list[Module]:
    """Decode a modules feed payload into fresh module instances.

    Args:
        text: Raw feed payload including the header line.

    Returns:
        Modules in feed order.
    """
    rows = (decode_module_row(fields) for fields in read_records(text))
    return [module for module in rows if module is not None]
