"""Record reader for raw feed payloads.

This module turns a full feed payload into tokenized data rows.
"""

from __future__ import annotations

import re

from ingest.csv_tokenizer import parse_line

_LINE_BREAK = re.compile(r"\r?\n")


def read_records(text: str) -> list[list[str]]:
    """Split a payload into rows of field values.

    The first line is the header and is always skipped. Lines that are
    blank after trimming are skipped too.

    Args:
        text: Raw feed payload.

    Returns:
        Tokenized data rows in payload order.
    """
    lines = _LINE_BREAK.split(text)
    return [parse_line(line) for line in lines[1:] if line.strip()]
