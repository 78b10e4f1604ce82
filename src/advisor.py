"""Public SDK surface for the course advisor.

This module provides a stable import path for library users.
It re-exports the catalog client, the course table, and typed models.
"""

from __future__ import annotations

from core.config import AdvisorConfig
from core.errors import (
    AdvisorConfigError,
    AdvisorError,
    AdvisorLoadError,
    AdvisorNotLoadedError,
    AdvisorStoreError,
)
from core.normalization import normalize_identifier
from core.types import CourseDetail, CourseRecord, CourseSummary, LoadReport, LoadWarning
from ingest.course_loader import load_courses
from query.course_queries import describe_course, format_prerequisites, list_courses
from store.catalog_sdk import CourseCatalog
from store.course_table import CourseTable

__all__ = [
    "AdvisorConfig",
    "AdvisorConfigError",
    "AdvisorError",
    "AdvisorLoadError",
    "AdvisorNotLoadedError",
    "AdvisorStoreError",
    "CourseCatalog",
    "CourseDetail",
    "CourseRecord",
    "CourseSummary",
    "CourseTable",
    "LoadReport",
    "LoadWarning",
    "describe_course",
    "format_prerequisites",
    "list_courses",
    "load_courses",
    "normalize_identifier",
]
