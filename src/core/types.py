"""Shared typed models.

This module defines the records produced by the decoders and the
aggregate value returned by every ingestion cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Phase:
    """Project stage decoded from the phases feed.

    Attributes:
        id: Non-empty phase key referenced by modules.
        name: Display name.
        color_tag: Opaque theme label.
    """

    id: str
    name: str
    color_tag: str


@dataclass
class Module:
    """Project module decoded from the modules feed.

    Only ``total_hours`` changes after decoding; the aggregation engine
    owns that write.

    Attributes:
        id: Positive module key.
        name: Module name matched against work logs.
        percent_complete: Progress in [0, 100].
        last_modified_date: Raw ``dd/mm/yyyy`` modification date.
        phase_id: Phase key, may not resolve to a decoded phase.
        start_date: Raw planned start date.
        end_date: Raw planned end date.
        status_label: Status text.
        status_icon: Status icon text.
        status_style_class: Opaque style label for the status.
        comment: Free-form description.
        total_hours: Derived hours from work logs.
    """

    id: int
    name: str
    percent_complete: int
    last_modified_date: str
    phase_id: str
    start_date: str
    end_date: str
    status_label: str
    status_icon: str
    status_style_class: str
    comment: str
    total_hours: float = 0.0


@dataclass(frozen=True)
class WorkLogEntry:
    """One developer daily log row.

    Attributes:
        timestamp: Parsed log time, None when unparseable.
        developer: Developer name.
        module_name: Referenced module name.
        action_type: Work category such as ``Bugfix``.
        message: Free-form message.
        working_time: Hours worked, never negative.
    """

    timestamp: datetime | None
    developer: str
    module_name: str
    action_type: str
    message: str
    working_time: float


@dataclass(frozen=True)
class ParsedNumber:
    """Result of a parse-or-default numeric coercion.

    Attributes:
        value: Parsed value, or the default when parsing failed.
        used_default: Whether the default was substituted.
    """

    value: int | float
    used_default: bool


@dataclass(frozen=True)
class FeedSources:
    """Locations of the three raw feeds.

    Attributes:
        phases_uri: Phases feed URL, ``s3://`` URI or local path.
        modules_uri: Modules feed location.
        logs_uri: Daily logs feed location.
    """

    phases_uri: str
    modules_uri: str
    logs_uri: str


@dataclass(frozen=True)
class DashboardData:
    """Output of one ingestion cycle.

    Attributes:
        phases: Decoded phases in feed order.
        modules: Decoded modules in feed order with aggregated hours.
        logs: Decoded logs, newest first.
    """

    phases: tuple[Phase, ...]
    modules: tuple[Module, ...]
    logs: tuple[WorkLogEntry, ...]


@dataclass(frozen=True)
class RoadmapPhase:
    """One phase of the roadmap with its scheduled modules.

    Attributes:
        phase: Phase record.
        modules: Modules with a start date, ordered by end date.
    """

    phase: Phase
    modules: tuple[Module, ...]
