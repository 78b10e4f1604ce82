"""Read-only queries over a course table.

This module produces the sorted course listing and single-course
details consumed by the menu and CLI commands.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import NO_PREREQUISITES_MARKER, PREREQUISITE_SEPARATOR
from core.normalization import normalize_identifier
from core.types import CourseDetail, CourseSummary
from store.course_table import CourseTable


def list_courses(table: CourseTable) -> tuple[CourseSummary, ...]:
    """Return all courses sorted by normalized identifier.

    Args:
        table: Course table to read.

    Returns:
        Ascending course summaries, empty when the table holds no records.
    """
    records = sorted(table.all_records(), key=lambda record: normalize_identifier(record.identifier))
    return tuple(CourseSummary(identifier=record.identifier, title=record.title) for record in records)


def describe_course(table: CourseTable, query: str) -> CourseDetail | None:
    """Look up one course and render its prerequisites.

    Args:
        table: Course table to read.
        query: Identifier to look up, case and outer whitespace ignored.

    Returns:
        Course detail, or None when no course matches.
    """
    record = table.find(query)
    if record is None:
        return None
    return CourseDetail(
        identifier=record.identifier,
        title=record.title,
        prerequisites=format_prerequisites(record.prerequisites),
    )


def format_prerequisites(prerequisites: Sequence[str]) -> str:
    """Join prerequisite identifiers for display, or return the ``None`` marker."""
    if not prerequisites:
        return NO_PREREQUISITES_MARKER
    return PREREQUISITE_SEPARATOR.join(prerequisites)
