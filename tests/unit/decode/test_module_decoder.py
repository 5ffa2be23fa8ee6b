"""Unit tests for the modules feed decoder."""

from __future__ import annotations

from decode.module_decoder import decode_module_row, decode_modules
from tests.fixture_paths import feed_text


def test_decode_module_row_drops_zero_id() -> None:
    """An id coercing to zero should drop the row."""
    row = ["0", "X", "50", "01/01/2024", "P1", "", "", "", "", "", ""]

    assert decode_module_row(row) is None


def test_decode_module_row_drops_negative_and_non_numeric_ids() -> None:
    """Ids must be positive integers."""
    assert decode_module_row(["-4", "X"]) is None
    assert decode_module_row(["abc", "X"]) is None


def test_decode_module_row_defaults_unparseable_percent() -> None:
    """A non-numeric percent should become zero."""
    module = decode_module_row(["7", "X", "abc", "", "P1", "", "", "", "", "", ""])

    assert module is not None and module.percent_complete == 0


def test_decode_module_row_clamps_percent_and_tolerates_short_rows() -> None:
    """Percent should stay in range and missing columns default to empty."""
    module = decode_module_row(["8", "Y", "140"])

    assert module is not None
    assert (module.percent_complete, module.phase_id, module.comment) == (100, "", "")
    assert module.total_hours == 0.0


def test_decode_modules_reads_fixture_feed() -> None:
    """Fixture feed should keep quoted commas and escaped quotes."""
    modules = decode_modules(feed_text("modules"))

    assert [module.id for module in modules] == [1, 2, 3]
    assert modules[0].comment == "Login, logout and tokens"
    assert modules[2].comment == 'Uses "pivot" tables'
