"""Runtime configuration model for devboard.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from core.errors import DevboardConfigError
from core.types import FeedSources


@dataclass(frozen=True)
class DevboardConfig:
    """Validated runtime configuration.

    Attributes:
        phases_uri: Optional location of the phases feed.
        modules_uri: Optional location of the modules feed.
        logs_uri: Optional location of the daily logs feed.
        http_timeout_seconds: Per-request timeout for HTTP feeds.
        s3_region: Optional default AWS region for S3 feeds.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    phases_uri: str | None
    modules_uri: str | None
    logs_uri: str | None
    http_timeout_seconds: float
    s3_region: str | None
    s3_profile: str | None

    @classmethod
    def from_env(cls) -> "DevboardConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            DevboardConfigError: If environment values are invalid.
        """
        timeout_value = os.getenv("DEVBOARD_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        return cls(
            phases_uri=_optional_env("DEVBOARD_PHASES_URI"),
            modules_uri=_optional_env("DEVBOARD_MODULES_URI"),
            logs_uri=_optional_env("DEVBOARD_LOGS_URI"),
            http_timeout_seconds=_parse_timeout(timeout_value),
            s3_region=_optional_env("DEVBOARD_S3_REGION"),
            s3_profile=_optional_env("DEVBOARD_S3_PROFILE"),
        )

    def feed_sources(self) -> FeedSources:
        """Return configured feed locations.

        Raises:
            DevboardConfigError: If any feed location is unset.
        """
        missing = [
            name
            for name, value in (
                ("DEVBOARD_PHASES_URI", self.phases_uri),
                ("DEVBOARD_MODULES_URI", self.modules_uri),
                ("DEVBOARD_LOGS_URI", self.logs_uri),
            )
            if not value
        ]
        if missing:
            raise DevboardConfigError(
                f"Missing feed locations: {', '.join(missing)}. "
                "Set the variables or pass a feed spec file."
            )
        return FeedSources(
            phases_uri=str(self.phases_uri),
            modules_uri=str(self.modules_uri),
            logs_uri=str(self.logs_uri),
        )


def _optional_env(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


def _parse_timeout(raw_value: str) -> float:
    """Parse the HTTP timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        DevboardConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise DevboardConfigError(
            "Invalid DEVBOARD_HTTP_TIMEOUT value: "
            f"expected number, got '{raw_value}'. "
            "Set DEVBOARD_HTTP_TIMEOUT to a positive number of seconds."
        ) from error
    if timeout <= 0:
        raise DevboardConfigError(
            f"Invalid DEVBOARD_HTTP_TIMEOUT value: expected > 0, got {timeout}. "
            "Set DEVBOARD_HTTP_TIMEOUT to a positive number of seconds."
        )
    return timeout
