"""Unit tests for the course catalog SDK."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import AdvisorConfig
from core.errors import AdvisorLoadError, AdvisorNotLoadedError
from store.catalog_sdk import CourseCatalog
from tests.fixture_paths import fixture_path


def test_queries_before_load_raise_not_loaded() -> None:
    """Listing or describing before a load should raise."""
    catalog = CourseCatalog()

    with pytest.raises(AdvisorNotLoadedError):
        catalog.list_courses()
    with pytest.raises(AdvisorNotLoadedError):
        catalog.describe("CSCI101")

    assert catalog.is_loaded is False


def test_load_marks_catalog_loaded_and_serves_queries() -> None:
    """A successful load should enable listing and lookup."""
    catalog = CourseCatalog()

    report = catalog.load(fixture_path("catalog/example_courses.csv"))
    detail = catalog.describe("csci200")

    assert catalog.is_loaded is True
    assert report.loaded_count == catalog.course_count == 3
    assert [course.identifier for course in catalog.list_courses()] == [
        "CSCI101",
        "CSCI200",
        "MATH201",
    ]
    assert detail is not None and detail.prerequisites == "CSCI101"


def test_failed_reload_keeps_previous_courses(tmp_path: Path) -> None:
    """A reload from a missing file should leave earlier data queryable."""
    catalog = CourseCatalog()
    catalog.load(fixture_path("catalog/example_courses.csv"))

    with pytest.raises(AdvisorLoadError):
        catalog.load(tmp_path / "missing.csv")

    assert catalog.is_loaded is True
    assert catalog.course_count == 3


def test_failed_first_load_stays_not_loaded(tmp_path: Path) -> None:
    """A failed first load should not mark the catalog loaded."""
    catalog = CourseCatalog()

    with pytest.raises(AdvisorLoadError):
        catalog.load(tmp_path / "missing.csv")

    assert catalog.is_loaded is False


def test_empty_file_load_yields_empty_listing(tmp_path: Path) -> None:
    """Loading a blank file should succeed with no courses."""
    course_file = tmp_path / "blank.csv"
    course_file.write_text("\n  \n", encoding="utf-8")
    catalog = CourseCatalog()

    catalog.load(course_file)

    assert catalog.list_courses() == ()


def test_catalog_uses_configured_bucket_count() -> None:
    """Catalog should size its table from config."""
    catalog = CourseCatalog(AdvisorConfig(bucket_count=3))

    assert catalog.table.bucket_count == 3


def test_load_skips_non_utf8_line_and_keeps_the_rest(tmp_path: Path) -> None:
    """A single cp1252 byte should cost one line, not the whole load."""
    course_file = tmp_path / "exported.csv"
    course_file.write_bytes(b"CSCI101,Intro\nCSCI200,Caf\xe9 Studies\nMATH201,Discrete\n")
    catalog = CourseCatalog()

    report = catalog.load(course_file)

    assert catalog.is_loaded is True
    assert report.loaded_count == 2
    assert [warning.line_number for warning in report.warnings] == [2]
    assert catalog.describe("CSCI200") is None
