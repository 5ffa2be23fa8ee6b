"""JSON serialization for dashboard results.

This module centralizes the JSON-safe shape of an ingestion result.
"""

from __future__ import annotations

import json

from core.types import DashboardData, Module, Phase, WorkLogEntry


def phase_to_payload(phase: Phase) -> dict[str, object]:
    return {"id": phase.id, "name": phase.name, "color_tag": phase.color_tag}


def module_to_payload(module: Module) -> dict[str, object]:
    return {
        "id": module.id,
        "name": module.name,
        "percent_complete": module.percent_complete,
        "last_modified_date": module.last_modified_date,
        "phase_id": module.phase_id,
        "start_date": module.start_date,
        "end_date": module.end_date,
        "status_label": module.status_label,
        "status_icon": module.status_icon,
        "status_style_class": module.status_style_class,
        "comment": module.comment,
        "total_hours": module.total_hours,
    }


def log_to_payload(entry: WorkLogEntry) -> dict[str, object]:
    return {
        "timestamp": entry.timestamp.isoformat() if entry.timestamp is not None else None,
        "developer": entry.developer,
        "module_name": entry.module_name,
        "action_type": entry.action_type,
        "message": entry.message,
        "working_time": entry.working_time,
    }


def dashboard_to_payload(data: DashboardData) -> dict[str, object]:
    """Serialize dashboard data into a JSON-safe payload.

    Args:
        data: Ingestion result.

    Returns:
        Dictionary with ``phases``, ``modules`` and ``logs`` lists.
    """
    return {
        "phases": [phase_to_payload(phase) for phase in data.phases],
        "modules": [module_to_payload(module) for module in data.modules],
        "logs": [log_to_payload(entry) for entry in data.logs],
    }


def dashboard_to_json(data: DashboardData) -> str:
    """Render dashboard data as indented JSON text."""
    return json.dumps(dashboard_to_payload(data), indent=2, ensure_ascii=False)
