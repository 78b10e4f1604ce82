"""Advisor exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class AdvisorError(Exception):
    """Base exception for all advisor failures."""


class AdvisorConfigError(AdvisorError):
    """Raised for invalid configuration files or values."""


class AdvisorLoadError(AdvisorError):
    """Raised when a course file cannot be opened, read, or decoded."""


class AdvisorStoreError(AdvisorError):
    """Raised for invalid course table construction."""


class AdvisorNotLoadedError(AdvisorError):
    """Raised when a catalog is queried before any successful load."""
