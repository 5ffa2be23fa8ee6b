"""Derived dashboard views.

These queries turn an ingestion result into the orderings and lookups
the dashboard displays: progress ranking, roadmap per phase, phase
colors, action icons, log filters and the last update date. They never
mutate their inputs.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from core.constants import (
    ACTION_ICONS,
    DEFAULT_ACTION_ICON,
    DEFAULT_PHASE_COLOR,
    HOURS_DISPLAY_DIGITS,
    LAST_UPDATE_BASELINE,
)
from core.types import DashboardData, Module, Phase, RoadmapPhase, WorkLogEntry


def parse_day_month_year(value: str) -> date | None:
    """Parse a strict ``dd/mm/yyyy`` module date.

    Args:
        value: Raw date text.

    Returns:
        Parsed date, or None when empty or malformed.
    """
    parts = value.strip().split("/")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        return None
    day, month, year = (int(part) for part in parts)
    try:
        return date(year, month, day)
    except ValueError:
        return None


def find_phase(phases: Sequence[Phase], phase_id: str) -> Phase | None:
    """Return the phase with the given id, last match wins."""
    found: Phase | None = None
    for phase in phases:
        if phase.id == phase_id:
            found = phase
    return found


def phase_color(phases: Sequence[Phase], phase_id: str) -> str:
    """Return the color tag of a phase, or the default for unknown ids."""
    phase = find_phase(phases, phase_id)
    return phase.color_tag if phase is not None else DEFAULT_PHASE_COLOR


def rounded_hours(module: Module) -> float:
    """Return module hours rounded for display."""
    return round(module.total_hours, HOURS_DISPLAY_DIGITS)


def modules_by_progress(modules: Iterable[Module]) -> list[Module]:
    """Order modules by percent complete, highest first."""
    return sorted(modules, key=lambda module: module.percent_complete, reverse=True)


def latest_module_update(modules: Iterable[Module]) -> date | None:
    """Return the most recent module modification date.

    Dates on or before the baseline are ignored.

    Args:
        modules: Decoded modules.

    Returns:
        Latest modification date, or None when no module has one.
    """
    latest = LAST_UPDATE_BASELINE
    for module in modules:
        modified = parse_day_month_year(module.last_modified_date)
        if modified is not None and modified > latest:
            latest = modified
    return latest if latest > LAST_UPDATE_BASELINE else None


def build_roadmap(data: DashboardData) -> list[RoadmapPhase]:
    """Group scheduled modules under their phase.

    Args:
        data: Ingestion result.

    Returns:
        Phases in feed order with their modules ordered by end date.
        Phases without scheduled modules are omitted.
    """
    roadmap: list[RoadmapPhase] = []
    for phase in data.phases:
        scheduled = [
            module for module in data.modules if module.phase_id == phase.id and module.start_date
        ]
        if not scheduled:
            continue
        ordered = sorted(scheduled, key=_end_date_sort_key)
        roadmap.append(RoadmapPhase(phase=phase, modules=tuple(ordered)))
    return roadmap


def distinct_log_modules(logs: Iterable[WorkLogEntry]) -> list[str]:
    """Return module names referenced by logs in first-seen order."""
    return list(dict.fromkeys(log.module_name for log in logs))


def action_icon(action_type: str) -> str:
    """Return the feed icon for a log action type.

    Lookup is exact, so unknown or differently cased types get the
    default icon.
    """
    return ACTION_ICONS.get(action_type, DEFAULT_ACTION_ICON)


def logs_for_module(logs: Iterable[WorkLogEntry], module_name: str) -> list[WorkLogEntry]:
    """Return logs recorded against one module name, keeping log order.

    Args:
        logs: Decoded logs.
        module_name: Exact module name as listed by ``distinct_log_modules``.
            An empty name selects every log.

    Returns:
        Matching logs.
    """
    if not module_name:
        return list(logs)
    return [log for log in logs if log.module_name == module_name]


def _end_date_sort_key(module: Module) -> tuple[bool, date]:
    end_date = parse_day_month_year(module.end_date)
    if end_date is None:
        return (True, date.max)
    return (False, end_date)
