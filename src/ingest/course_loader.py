"""Bulk course loading into a course table.

This module reads a whole course file before touching the table,
so a file that cannot be opened leaves previously loaded data intact.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import WARNING_KIND_DUPLICATE_COURSE
from core.errors import AdvisorLoadError
from core.logging_config import get_logger
from core.types import LoadReport, LoadWarning
from ingest.course_file_reader import read_course_file
from store.course_table import CourseTable

_LOGGER = get_logger(__name__)


def load_courses(source_path: str | Path, table: CourseTable) -> LoadReport:
    """Replace table contents with the courses from a file.

    Args:
        source_path: Path to a comma-delimited course file.
        table: Table to clear and repopulate.

    Returns:
        Load report with the final record count and all warnings.

    Raises:
        AdvisorLoadError: If the file cannot be read. The table is unchanged.
    """
    try:
        parsed = read_course_file(source_path)
    except AdvisorLoadError as error:
        _LOGGER.error("course_file_unreadable", source_path=str(source_path), error=str(error))
        raise
    for warning in parsed.warnings:
        _LOGGER.debug(
            "course_line_skipped",
            source_path=parsed.source_path,
            line_number=warning.line_number,
            kind=warning.kind,
        )
    table.clear()
    warnings = list(parsed.warnings)
    for record in parsed.records:
        if table.insert(record):
            continue
        warnings.append(
            LoadWarning(
                kind=WARNING_KIND_DUPLICATE_COURSE,
                message=f"Duplicate course '{record.identifier}' found. Skipping duplicate.",
                identifier=record.identifier,
            )
        )
    report = LoadReport(
        source_path=parsed.source_path,
        loaded_count=len(table),
        warnings=tuple(warnings),
    )
    _LOGGER.info(
        "courses_loaded",
        source_path=report.source_path,
        loaded_count=report.loaded_count,
        warning_count=len(report.warnings),
    )
    return report
