"""Phases feed decoder.

Column layout: ``[id, name, colorTag]``.
"""

from __future__ import annotations

from typing import Sequence

from core.types import Phase
from decode.coercion import cell
from ingest.record_reader import read_records


def decode_phase_row(fields: Sequence[str]) -> Phase | None:
    """Decode one phases row, or None when the id is empty."""
    phase_id = cell(fields, 0)
    if not phase_id:
        return None
    return Phase(id=phase_id, name=cell(fields, 1), color_tag=cell(fields, 2))


def decode_phases(text: str) -> list[Phase]:
    """Decode a phases feed payload.

    Args:
        text: Raw feed payload including the header line.

    Returns:
        Phases in feed order.
    """
    rows = (decode_phase_row(fields) for fields in read_records(text))
    return [phase for phase in rows if phase is not None]
