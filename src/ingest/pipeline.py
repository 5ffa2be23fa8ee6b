"""Ingestion orchestration for dashboard feeds.

This module fetches the three feeds concurrently, decodes them and
aggregates work-log hours onto modules. A cycle either returns a
complete result or fails as a whole.
"""

from __future__ import annotations

import asyncio

from core.config import DevboardConfig
from core.errors import DevboardIngestError
from core.logging_config import get_logger
from core.types import DashboardData, FeedSources
from decode.log_decoder import decode_logs
from decode.module_decoder import decode_modules
from decode.phase_decoder import decode_phases
from ingest.feed_reader import FeedFetcher, open_feed_fetcher
from transforms.hours_aggregation import aggregate_hours

_LOGGER = get_logger(__name__)


def build_dashboard(phases_text: str, modules_text: str, logs_text: str) -> DashboardData:
    """Decode three raw payloads and aggregate module hours.

    Args:
        phases_text: Raw phases feed.
        modules_text: Raw modules feed.
        logs_text: Raw daily logs feed.

    Returns:
        Dashboard data built from fresh module instances.
    """
    phases = decode_phases(phases_text)
    modules = decode_modules(modules_text)
    logs = decode_logs(logs_text)
    aggregate_hours(modules, logs)
    return DashboardData(phases=tuple(phases), modules=tuple(modules), logs=tuple(logs))


async def ingest_dashboard(sources: FeedSources, fetcher: FeedFetcher) -> DashboardData:
    """Run one ingestion cycle.

    Args:
        sources: Feed locations.
        fetcher: Retrieval collaborator for raw payloads.

    Returns:
        Complete dashboard data.

    Raises:
        DevboardIngestError: If any retrieval or processing stage fails.
    """
    try:
        phases_text, modules_text, logs_text = await _fetch_all(sources, fetcher)
        data = build_dashboard(phases_text, modules_text, logs_text)
    except Exception as error:
        _LOGGER.error("ingest_failed", error=str(error))
        raise DevboardIngestError(
            f"Dashboard ingestion failed: {error}. No data was loaded for this cycle."
        ) from error
    _log_ingest_completion(data)
    return data


def run_ingestion(sources: FeedSources, config: DevboardConfig) -> DashboardData:
    """Run one ingestion cycle with the default feed fetcher.

    Args:
        sources: Feed locations.
        config: Runtime configuration.

    Returns:
        Complete dashboard data.

    Raises:
        DevboardIngestError: If the cycle fails.
    """
    return asyncio.run(_run_with_default_fetcher(sources, config))


async def _run_with_default_fetcher(
    sources: FeedSources,
    config: DevboardConfig,
) -> DashboardData:
    async with open_feed_fetcher(config) as fetcher:
        return await ingest_dashboard(sources, fetcher)


async def _fetch_all(sources: FeedSources, fetcher: FeedFetcher) -> tuple[str, str, str]:
    """Fetch all feeds concurrently and fail if any retrieval failed."""
    results = await asyncio.gather(
        fetcher.fetch_text(sources.phases_uri),
        fetcher.fetch_text(sources.modules_uri),
        fetcher.fetch_text(sources.logs_uri),
        return_exceptions=True,
    )
    texts: list[str] = []
    for result in results:
        if isinstance(result, BaseException):
            raise result
        texts.append(result)
    return texts[0], texts[1], texts[2]


def _log_ingest_completion(data: DashboardData) -> None:
    _LOGGER.info(
        "ingest_completed",
        phase_count=len(data.phases),
        module_count=len(data.modules),
        log_count=len(data.logs),
        total_hours=sum(module.total_hours for module in data.modules),
    )
