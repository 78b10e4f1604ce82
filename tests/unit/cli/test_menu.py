"""Unit tests for the interactive menu."""

from __future__ import annotations

import io

from cli.menu import run_menu
from core.logging_config import configure_logging
from store.catalog_sdk import CourseCatalog
from tests.fixture_paths import fixture_path


def _run(*lines: str) -> tuple[int, str]:
    input_stream = io.StringIO("".join(f"{line}\n" for line in lines))
    output_stream = io.StringIO()
    exit_code = run_menu(CourseCatalog(), input_stream, output_stream)
    return exit_code, output_stream.getvalue()


def test_menu_requires_load_before_queries() -> None:
    """Options 2 and 3 should prompt for a load first."""
    exit_code, output = _run("2", "3", "9")

    assert exit_code == 0
    assert output.count("Please load data first using option 1.") == 2
    assert output.rstrip().endswith("Thank you for using the course planner!")


def test_menu_loads_lists_and_shows_course() -> None:
    """Load, list, and show should print the sorted schedule and detail."""
    course_file = str(fixture_path("catalog/example_courses.csv"))

    _, output = _run("1", course_file, "2", "3", "csci200", "9")

    assert "Courses loaded successfully." in output
    schedule = output.split("Here is a sample schedule:")[1]
    assert schedule.index("CSCI101, Introduction to Programming") < schedule.index(
        "CSCI200, Data Structures"
    ) < schedule.index("MATH201, Discrete Mathematics")
    assert "CSCI200, Data Structures\nPrerequisites: CSCI101" in output


def test_menu_reports_missing_course_and_invalid_option() -> None:
    """Unknown courses and options should be reported without exiting."""
    course_file = str(fixture_path("catalog/example_courses.csv"))

    _, output = _run("1", course_file, "3", "ZZZ999", "7", "9")

    assert "Course not found." in output
    assert "7 is not a valid option." in output


def test_menu_prints_load_warnings_and_errors(tmp_path) -> None:
    """Malformed lines and missing files should be reported in the menu."""
    malformed_file = str(fixture_path("catalog/one_malformed.csv"))

    _, output = _run("1", str(tmp_path / "missing.csv"), "2", "1", malformed_file, "9")

    assert "Error: Cannot open course file" in output
    assert "Please load data first using option 1." in output
    assert "Warning: Skipping invalid line 2" in output
    assert "Courses loaded successfully." in output


def test_menu_exits_cleanly_at_end_of_input() -> None:
    """Running out of input should end the loop with success."""
    exit_code, output = _run()

    assert exit_code == 0
    assert "Welcome to the course planner." in output


def test_menu_reports_each_load_warning_once(capsys) -> None:
    """Load warnings should appear in menu output only, not again as log lines."""
    configure_logging("warning")
    mixed_file = str(fixture_path("catalog/mixed_courses.csv"))

    _, output = _run("1", mixed_file, "9")
    captured = capsys.readouterr()

    assert output.count("Warning: Skipping invalid line 8") == 1
    assert output.count("Warning: Duplicate course 'CSCI101'") == 1
    assert captured.err == ""
    assert captured.out == ""
