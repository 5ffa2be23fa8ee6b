"""Raw feed readers for ingestion.

This module retrieves feed payloads from HTTP(S) URLs, S3 objects or
local files. It is the only transport-aware part of ingestion.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Protocol

import httpx

from core.config import DevboardConfig
from core.constants import FEED_TEXT_ENCODING
from core.errors import DevboardDependencyError, DevboardFetchError
from core.logging_config import get_logger
from core.s3_uri import parse_s3_uri

_LOGGER = get_logger(__name__)


class FeedFetcher(Protocol):
    """Anything that can retrieve one raw feed payload."""

    async def fetch_text(self, source_uri: str) -> str:
        """Return the raw text stored at ``source_uri``."""
        ...


class LocationFeedFetcher:
    """Feed fetcher dispatching on the location scheme."""

    def __init__(self, config: DevboardConfig, http_client: httpx.AsyncClient) -> None:
        self._config = config
        self._http_client = http_client

    async def fetch_text(self, source_uri: str) -> str:
        """Retrieve a feed payload.

        Args:
            source_uri: ``http(s)://`` URL, ``s3://bucket/key`` URI or local path.

        Returns:
            Decoded feed text.

        Raises:
            DevboardFetchError: If the feed cannot be retrieved.
        """
        if source_uri.startswith(("http://", "https://")):
            text = await self._fetch_http_text(source_uri)
        elif source_uri.startswith("s3://"):
            text = await asyncio.to_thread(_read_s3_text, source_uri, self._config)
        else:
            text = await asyncio.to_thread(_read_local_text, Path(source_uri).expanduser())
        _LOGGER.info("feed_fetched", source_uri=source_uri, char_count=len(text))
        return text

    async def _fetch_http_text(self, url: str) -> str:
        try:
            response = await self._http_client.get(url)
        except httpx.HTTPError as error:
            raise DevboardFetchError(
                f"Failed to fetch feed at {url}: {error}. Check the URL and network access."
            ) from error
        if not response.is_success:
            raise DevboardFetchError(
                f"Failed to fetch feed at {url}: HTTP {response.status_code}. "
                "Check that the feed is published and reachable."
            )
        return response.text


@asynccontextmanager
async def open_feed_fetcher(config: DevboardConfig) -> AsyncIterator[LocationFeedFetcher]:
    """Yield a fetcher backed by a shared HTTP client.

    Args:
        config: Runtime configuration for timeouts and S3 sessions.

    Yields:
        Fetcher valid until the context exits.
    """
    async with httpx.AsyncClient(
        timeout=config.http_timeout_seconds,
        follow_redirects=True,
    ) as http_client:
        yield LocationFeedFetcher(config, http_client)


def _read_local_text(source_path: Path) -> str:
    """Read a feed from the local file system.

    Raises:
        DevboardFetchError: If path is missing or unreadable.
    """
    if not source_path.is_file():
        raise DevboardFetchError(
            f"Failed to read feed at {source_path}: file does not exist. "
            "Provide an existing feed file."
        )
    try:
        return source_path.read_text(encoding=FEED_TEXT_ENCODING)
    except (OSError, UnicodeDecodeError) as error:
        raise DevboardFetchError(
            f"Failed to read feed at {source_path}: {error}. "
            "Check file permissions and UTF-8 encoding."
        ) from error


def _read_s3_text(source_uri: str, config: DevboardConfig) -> str:
    """Download one feed object from S3.

    Args:
        source_uri: S3 object URI.
        config: Runtime configuration for region/profile.

    Returns:
        Decoded object body.

    Raises:
        DevboardFetchError: If the object cannot be read.
    """
    location = parse_s3_uri(source_uri)
    s3_client = _create_s3_client(config)
    try:
        body = s3_client.get_object(Bucket=location.bucket, Key=location.key)["Body"].read()
        return body.decode(FEED_TEXT_ENCODING)
    except Exception as error:
        raise DevboardFetchError(
            f"Failed to read feed at {source_uri}: {error}. "
            "Check the object key and AWS credentials."
        ) from error


def _create_s3_client(config: DevboardConfig) -> Any:
    """Create a boto3 S3 client.

    Raises:
        DevboardDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise DevboardDependencyError(
            "S3 feeds require boto3, but it is not installed. "
            "Install boto3 to read s3:// feeds."
        ) from error
    session = boto3.session.Session(**_build_boto3_session_kwargs(config))
    return session.client("s3")


def _build_boto3_session_kwargs(config: DevboardConfig) -> dict[str, str]:
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
