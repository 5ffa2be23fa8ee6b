"""Public SDK surface for devboard.

This module provides a stable import path for dashboard consumers.
It re-exports the client, typed models, the pure pipeline stages and
the derived dashboard views.
"""

from __future__ import annotations

from core.config import DevboardConfig
from core.errors import DevboardError, DevboardIngestError
from core.types import DashboardData, FeedSources, Module, Phase, RoadmapPhase, WorkLogEntry
from ingest.pipeline import build_dashboard, ingest_dashboard
from store.dashboard_sdk import DevboardClient
from transforms.dashboard_views import (
    action_icon,
    build_roadmap,
    distinct_log_modules,
    logs_for_module,
    modules_by_progress,
    phase_color,
)
from transforms.hours_aggregation import aggregate_hours

__all__ = [
    "DashboardData",
    "DevboardClient",
    "DevboardConfig",
    "DevboardError",
    "DevboardIngestError",
    "FeedSources",
    "Module",
    "Phase",
    "RoadmapPhase",
    "WorkLogEntry",
    "action_icon",
    "aggregate_hours",
    "build_dashboard",
    "build_roadmap",
    "distinct_log_modules",
    "ingest_dashboard",
    "logs_for_module",
    "modules_by_progress",
    "phase_color",
]
