"""Devboard CLI entry points.
This module exposes commands that ingest the dashboard feeds.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import Any, Sequence

from core.config import DevboardConfig
from core.errors import DevboardError
from core.feed_spec import load_feed_spec
from core.types import DashboardData, FeedSources
from store.dashboard_payload import dashboard_to_json
from store.dashboard_sdk import DevboardClient
from transforms.dashboard_views import (
    action_icon,
    build_roadmap,
    distinct_log_modules,
    find_phase,
    latest_module_update,
    logs_for_module,
    modules_by_progress,
    phase_color,
    rounded_hours,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="devboard", description="Devboard feed ingestion CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_ingest_command(subparsers)
    _add_summary_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the devboard CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = DevboardClient(DevboardConfig.from_env())
        data = client.load(_resolve_sources(client.config, args))
    except DevboardError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if args.command == "ingest":
        return _run_ingest_command(data)
    if args.command == "summary":
        return _run_summary_command(data, args.log_module)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _resolve_sources(config: DevboardConfig, args: argparse.Namespace) -> FeedSources:
    """Resolve feed locations from a spec file, flags and environment.

    Args:
        config: Runtime configuration holding environment defaults.
        args: Parsed CLI args.

    Returns:
        Feed locations for this run.
    """
    if args.feeds:
        return load_feed_spec(args.feeds)
    overridden = replace(
        config,
        phases_uri=args.phases or config.phases_uri,
        modules_uri=args.modules or config.modules_uri,
        logs_uri=args.logs or config.logs_uri,
    )
    return overridden.feed_sources()


def _run_ingest_command(data: DashboardData) -> int:
    """Print the ingestion result as JSON."""
    print(dashboard_to_json(data))
    return 0


def _run_summary_command(data: DashboardData, log_module: str | None) -> int:
    """Print progress, roadmap and activity rows as tab-separated text."""
    last_update = latest_module_update(data.modules)
    print(f"last_update\t{last_update.strftime('%d/%m/%Y') if last_update else '-'}")
    for module in modules_by_progress(data.modules):
        phase = find_phase(data.phases, module.phase_id)
        print(
            f"module\t{module.name}\t"
            f"{phase.name if phase is not None else '-'}\t"
            f"{rounded_hours(module)}\t"
            f"{module.percent_complete}\t"
            f"{phase_color(data.phases, module.phase_id)}"
        )
    for roadmap_phase in build_roadmap(data):
        for module in roadmap_phase.modules:
            print(
                f"roadmap\t{roadmap_phase.phase.name}\t{module.name}\t"
                f"{module.start_date}\t{module.end_date or '-'}"
            )
    for module_name in distinct_log_modules(data.logs):
        print(f"log_module\t{module_name}")
    for log in logs_for_module(data.logs, log_module or ""):
        print(
            f"log\t{action_icon(log.action_type)}\t"
            f"{log.timestamp.isoformat() if log.timestamp else '-'}\t"
            f"{log.developer}\t{log.module_name}\t{log.action_type}\t{log.working_time}"
        )
    return 0


def _add_feed_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--feeds", help="YAML feed spec naming phases, modules and logs")
    parser.add_argument("--phases", help="Override DEVBOARD_PHASES_URI")
    parser.add_argument("--modules", help="Override DEVBOARD_MODULES_URI")
    parser.add_argument("--logs", help="Override DEVBOARD_LOGS_URI")


def _add_ingest_command(subparsers: Any) -> None:
    """Register ingest subcommand."""
    parser = subparsers.add_parser("ingest", help="Ingest feeds and print the result as JSON")
    _add_feed_arguments(parser)


def _add_summary_command(subparsers: Any) -> None:
    """Register summary subcommand."""
    parser = subparsers.add_parser(
        "summary",
        help="Ingest feeds and print progress, roadmap and work logs",
    )
    _add_feed_arguments(parser)
    parser.add_argument("--log-module", help="Only print work logs recorded against this module")
