"""Unit tests for derived dashboard views."""

from __future__ import annotations

from dataclasses import replace
from datetime import date

from core.types import DashboardData, Module, Phase, WorkLogEntry
from transforms.dashboard_views import (
    action_icon,
    build_roadmap,
    distinct_log_modules,
    latest_module_update,
    logs_for_module,
    modules_by_progress,
    parse_day_month_year,
    phase_color,
    rounded_hours,
)

_BASE_MODULE = Module(
    id=1,
    name="Auth",
    percent_complete=0,
    last_modified_date="",
    phase_id="F1",
    start_date="",
    end_date="",
    status_label="",
    status_icon="",
    status_style_class="",
    comment="",
)


def test_parse_day_month_year_is_strict() -> None:
    """Only complete, valid dd/mm/yyyy dates should parse."""
    assert parse_day_month_year("05/02/2024") == date(2024, 2, 5)
    assert [parse_day_month_year(value) for value in ["", "2024-02-05", "31/02/2024"]] == [
        None,
        None,
        None,
    ]


def test_phase_color_defaults_to_grey_for_unknown_phase() -> None:
    """Dangling phase ids should resolve to the default color."""
    phases = [Phase(id="F1", name="One", color_tag="blue"), Phase(id="F1", name="Dup", color_tag="red")]

    assert (phase_color(phases, "F1"), phase_color(phases, "F9")) == ("red", "grey")


def test_rounded_hours_uses_one_decimal() -> None:
    """Hours should be rounded to one decimal for display."""
    assert rounded_hours(replace(_BASE_MODULE, total_hours=3.46)) == 3.5


def test_modules_by_progress_is_stable_and_descending() -> None:
    """Higher progress first, ties keep feed order."""
    modules = [
        replace(_BASE_MODULE, id=1, percent_complete=10),
        replace(_BASE_MODULE, id=2, percent_complete=90),
        replace(_BASE_MODULE, id=3, percent_complete=10),
    ]

    assert [module.id for module in modules_by_progress(modules)] == [2, 1, 3]


def test_latest_module_update_ignores_dates_before_baseline() -> None:
    """Only dates after 2020-01-01 should count as updates."""
    old_only = [replace(_BASE_MODULE, last_modified_date="01/01/2019")]
    mixed = old_only + [
        replace(_BASE_MODULE, last_modified_date="10/01/2024"),
        replace(_BASE_MODULE, last_modified_date="bad"),
    ]

    assert (latest_module_update(old_only), latest_module_update(mixed)) == (None, date(2024, 1, 10))


def test_build_roadmap_orders_modules_by_end_date() -> None:
    """Scheduled modules should be grouped per phase with unknown end dates last."""
    phases = (Phase(id="F1", name="One", color_tag="blue"), Phase(id="F2", name="Two", color_tag="red"))
    modules = (
        replace(_BASE_MODULE, id=1, start_date="01/01/2024", end_date=""),
        replace(_BASE_MODULE, id=2, start_date="01/01/2024", end_date="20/03/2024"),
        replace(_BASE_MODULE, id=3, start_date="01/01/2024", end_date="10/02/2024"),
        replace(_BASE_MODULE, id=4, start_date=""),
    )

    roadmap = build_roadmap(DashboardData(phases=phases, modules=modules, logs=()))

    assert [entry.phase.id for entry in roadmap] == ["F1"]
    assert [module.id for module in roadmap[0].modules] == [3, 2, 1]


def test_distinct_log_modules_keeps_first_seen_order() -> None:
    """Module names should be unique and ordered by first appearance."""
    logs = [
        WorkLogEntry(None, "Ana", name, "Info", "", 0.0) for name in ["Auth", "Reports", "Auth", "-"]
    ]

    assert distinct_log_modules(logs) == ["Auth", "Reports", "-"]


def test_action_icon_uses_exact_lookup_with_default() -> None:
    """Known action types get their icon, anything else the default wrench."""
    assert [action_icon(kind) for kind in ["Bugfix", "Investigación", "bugfix", "Info"]] == [
        "🐞",
        "🔍",
        "🔧",
        "🔧",
    ]


def test_logs_for_module_matches_exact_name_and_keeps_order() -> None:
    """Filtering should keep log order, and an empty name should keep every log."""
    logs = [
        WorkLogEntry(None, dev, name, "Info", "", 1.0)
        for dev, name in [("Ana", "Auth"), ("Luis", "auth"), ("Eva", "Auth")]
    ]

    assert [log.developer for log in logs_for_module(logs, "Auth")] == ["Ana", "Eva"]
    assert logs_for_module(logs, "") == logs
