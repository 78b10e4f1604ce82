"""Python SDK for course catalog sessions.

This module exposes a high-level catalog object that loads course
files and answers listing and lookup queries backed by a course table.
"""

from __future__ import annotations

from pathlib import Path

from core.config import AdvisorConfig
from core.errors import AdvisorNotLoadedError
from core.types import CourseDetail, CourseSummary, LoadReport
from ingest.course_loader import load_courses
from query.course_queries import describe_course, list_courses
from store.course_table import CourseTable


class CourseCatalog:
    """Primary SDK entry point for advising workflows."""

    def __init__(self, config: AdvisorConfig | None = None) -> None:
        """Create an empty, not-yet-loaded catalog.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or AdvisorConfig.default()
        self._table = CourseTable(self._config.bucket_count)
        self._loaded = False

    @property
    def config(self) -> AdvisorConfig:
        """Configuration the catalog was built with."""
        return self._config

    @property
    def table(self) -> CourseTable:
        """Underlying course table."""
        return self._table

    @property
    def is_loaded(self) -> bool:
        """Whether at least one load has succeeded."""
        return self._loaded

    @property
    def course_count(self) -> int:
        return len(self._table)

    def load(self, source_path: str | Path) -> LoadReport:
        """Replace catalog contents with courses from a file.

        Args:
            source_path: Path to a comma-delimited course file.

        Returns:
            Load report with record count and warnings.

        Raises:
            AdvisorLoadError: If the file cannot be read. Previously
                loaded courses and the loaded state are kept.
        """
        report = load_courses(source_path, self._table)
        self._loaded = True
        return report

    def list_courses(self) -> tuple[CourseSummary, ...]:
        """Return all courses sorted by identifier.

        Raises:
            AdvisorNotLoadedError: If no course file has been loaded.
        """
        self._require_loaded()
        return list_courses(self._table)

    def describe(self, query: str) -> CourseDetail | None:
        """Return details for one course, or None when absent.

        Raises:
            AdvisorNotLoadedError: If no course file has been loaded.
        """
        self._require_loaded()
        return describe_course(self._table, query)

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise AdvisorNotLoadedError(
                "No course data loaded. Load a course file before querying the catalog."
            )
