"""Shared typed models.

This module defines immutable data models used by ingest, store,
query, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CourseRecord:
    """One course definition as loaded from a catalog file.

    Attributes:
        identifier: Course number as written in the source, e.g. ``CSCI200``.
        title: Display title.
        prerequisites: Ordered prerequisite identifiers, possibly empty.
    """

    identifier: str
    title: str
    prerequisites: tuple[str, ...] = ()


@dataclass(frozen=True)
class CourseSummary:
    """Identifier and title pair used by course listings."""

    identifier: str
    title: str


@dataclass(frozen=True)
class CourseDetail:
    """Single-course view with prerequisites rendered for display.

    Attributes:
        identifier: Course number as stored.
        title: Display title.
        prerequisites: Comma-joined prerequisite identifiers or ``None`` marker.
    """

    identifier: str
    title: str
    prerequisites: str


@dataclass(frozen=True)
class LoadWarning:
    """Non-fatal problem recorded while loading a course file.

    Attributes:
        kind: Warning category, malformed line or duplicate course.
        message: Human-readable description.
        line_number: One-based source line when known.
        identifier: Offending course identifier when known.
    """

    kind: str
    message: str
    line_number: int | None = None
    identifier: str | None = None


@dataclass(frozen=True)
class LoadReport:
    """Outcome of a successful course file load.

    Attributes:
        source_path: File the courses were read from.
        loaded_count: Number of records held by the table after the load.
        warnings: Non-fatal warnings in source order.
    """

    source_path: str
    loaded_count: int
    warnings: tuple[LoadWarning, ...] = field(default_factory=tuple)
