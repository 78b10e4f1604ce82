"""Interactive advising menu.

This module runs the numbered text menu over arbitrary text streams
so it can be driven from a terminal or from tests.
"""

from __future__ import annotations

import sys
from typing import TextIO

from core.errors import AdvisorLoadError
from core.types import LoadReport
from store.catalog_sdk import CourseCatalog

MENU_LINES = (
    "1. Load Data Structure.",
    "2. Print Course List.",
    "3. Print Course.",
    "9. Exit",
)
NOT_LOADED_MESSAGE = "Please load data first using option 1."


def run_menu(
    catalog: CourseCatalog,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> int:
    """Run the menu loop until the user exits or input ends.

    Args:
        catalog: Catalog to load into and query.
        input_stream: Source of user input, stdin by default.
        output_stream: Destination for menu output, stdout by default.

    Returns:
        Process exit code.
    """
    stdin = input_stream or sys.stdin
    out = output_stream or sys.stdout
    print("Welcome to the course planner.\n", file=out)
    while True:
        for line in MENU_LINES[:-1]:
            print(line, file=out)
        print(f"{MENU_LINES[-1]}\n", file=out)
        print("What would you like to do? ", file=out)
        choice = _read_line(stdin)
        if choice is None or choice == "9":
            print("Thank you for using the course planner!", file=out)
            return 0
        if choice == "1":
            print("Enter the file name to load: \n", file=out)
            file_name = _read_line(stdin)
            if file_name is None:
                continue
            load_into(catalog, file_name, out)
        elif choice == "2":
            if not catalog.is_loaded:
                print(f"{NOT_LOADED_MESSAGE}\n", file=out)
            else:
                print_course_list(catalog, out)
        elif choice == "3":
            if not catalog.is_loaded:
                print(f"{NOT_LOADED_MESSAGE}\n", file=out)
                continue
            print("\nWhat course do you want to know about? ", file=out)
            query = _read_line(stdin)
            if query is None:
                continue
            print_course(catalog, query, out)
        else:
            print(f"{choice} is not a valid option.\n", file=out)


def load_into(catalog: CourseCatalog, file_name: str, out: TextIO) -> LoadReport | None:
    """Load a course file and print its warnings and outcome.

    Returns:
        Load report, or None when the file could not be read.
    """
    try:
        report = catalog.load(file_name)
    except AdvisorLoadError as error:
        print(f"Error: {error}\n", file=out)
        return None
    for warning in report.warnings:
        print(f"Warning: {warning.message}", file=out)
    print("Courses loaded successfully.\n", file=out)
    return report


def print_course_list(catalog: CourseCatalog, out: TextIO) -> None:
    """Print every course sorted by identifier."""
    courses = catalog.list_courses()
    if not courses:
        print("No courses loaded. Please load data first.\n", file=out)
        return
    print("\nHere is a sample schedule:", file=out)
    for course in courses:
        print(f"{course.identifier}, {course.title}", file=out)
    print("", file=out)


def print_course(catalog: CourseCatalog, query: str, out: TextIO) -> bool:
    """Print one course with its prerequisites.

    Returns:
        True when the course was found.
    """
    detail = catalog.describe(query)
    if detail is None:
        print("Course not found.\n", file=out)
        return False
    print(f"\n{detail.identifier}, {detail.title}", file=out)
    print(f"Prerequisites: {detail.prerequisites}\n", file=out)
    return True


def _read_line(stdin: TextIO) -> str | None:
    """Read one trimmed line, or None at end of input."""
    line = stdin.readline()
    if not line:
        return None
    return line.strip()
