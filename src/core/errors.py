"""Devboard exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class DevboardError(Exception):
    """Base exception for all devboard failures."""


class DevboardConfigError(DevboardError):
    """Raised for invalid runtime configuration."""


class DevboardFetchError(DevboardError):
    """Raised when a single feed cannot be retrieved."""


class DevboardIngestError(DevboardError):
    """Raised when an ingestion cycle fails as a whole."""


class DevboardFeedSpecError(DevboardError):
    """Raised for invalid or unsupported feed spec files."""


class DevboardDependencyError(DevboardError):
    """Raised when an optional runtime dependency is missing."""
