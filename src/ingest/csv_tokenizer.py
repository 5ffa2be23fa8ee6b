"""Delimited-line tokenizer.

This module splits one line of quoted, comma-delimited text into
field values. Unbalanced quotes are tolerated: whatever has been
accumulated at end of line becomes the last field.
"""

from __future__ import annotations

from core.constants import CSV_DELIMITER, CSV_QUOTE


def parse_line(line: str, delimiter: str = CSV_DELIMITER, quote: str = CSV_QUOTE) -> list[str]:
    """Split a delimited line into field values.

    A quote toggles quoted state, except that two consecutive quotes
    inside a quoted value emit one literal quote. Delimiters inside
    quotes belong to the value.

    Args:
        line: Raw line without its line terminator.
        delimiter: Field separator character.
        quote: Quote character.

    Returns:
        Ordered field values, always at least one.
    """
    values: list[str] = []
    current_chars: list[str] = []
    in_quotes = False
    index = 0
    line_length = len(line)
    while index < line_length:
        char = line[index]
        if char == quote:
            if in_quotes and index + 1 < line_length and line[index + 1] == quote:
                current_chars.append(quote)
                index += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            values.append("".join(current_chars))
            current_chars = []
        else:
            current_chars.append(char)
        index += 1
    values.append("".join(current_chars))
    return values
