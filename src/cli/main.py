"""Course advisor CLI entry points.
This module exposes the interactive menu and one-shot catalog commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Any, Sequence

from cli.menu import load_into, print_course, print_course_list, run_menu
from core.config import AdvisorConfig, parse_bucket_count
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import AdvisorConfigError, AdvisorLoadError
from core.logging_config import configure_logging
from store.catalog_sdk import CourseCatalog


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="advisor", description="Course advising assistant")
    parser.add_argument("--config", help="Optional YAML config file")
    parser.add_argument("--bucket-count", type=int, help="Override course table bucket count")
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override structured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_menu_command(subparsers)
    _add_list_command(subparsers)
    _add_show_command(subparsers)
    _add_stats_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the advisor CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args)
    except AdvisorConfigError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 2
    configure_logging(config.log_level)
    catalog = CourseCatalog(config)
    if args.command == "menu":
        return _run_menu_command(catalog, args)
    if args.command == "list":
        return _run_list_command(catalog, args)
    if args.command == "show":
        return _run_show_command(catalog, args)
    if args.command == "stats":
        return _run_stats_command(catalog, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> AdvisorConfig:
    """Build config from an optional file plus CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated configuration.

    Raises:
        AdvisorConfigError: If the config file or overrides are invalid.
    """
    config = AdvisorConfig.from_file(args.config) if args.config else AdvisorConfig.default()
    if args.bucket_count is not None:
        config = replace(config, bucket_count=parse_bucket_count(args.bucket_count))
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    return config


def _run_menu_command(catalog: CourseCatalog, args: argparse.Namespace) -> int:
    """Handle menu command.

    Args:
        catalog: Empty catalog.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    preload_path = args.file or catalog.config.default_catalog_path
    if preload_path:
        load_into(catalog, str(preload_path), sys.stdout)
    return run_menu(catalog)


def _run_list_command(catalog: CourseCatalog, args: argparse.Namespace) -> int:
    """Handle list command.

    Args:
        catalog: Empty catalog.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if not _load_or_report(catalog, args.file):
        return 1
    print_course_list(catalog, sys.stdout)
    return 0


def _run_show_command(catalog: CourseCatalog, args: argparse.Namespace) -> int:
    """Handle show command.

    Args:
        catalog: Empty catalog.
        args: Parsed CLI args.

    Returns:
        Exit code, 1 when the course is missing.
    """
    if not _load_or_report(catalog, args.file):
        return 1
    return 0 if print_course(catalog, args.course, sys.stdout) else 1


def _run_stats_command(catalog: CourseCatalog, args: argparse.Namespace) -> int:
    """Handle stats command.

    Args:
        catalog: Empty catalog.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if not _load_or_report(catalog, args.file):
        return 1
    sizes = catalog.table.bucket_sizes()
    print(f"courses={catalog.course_count}")
    print(f"buckets={len(sizes)}")
    print(f"empty_buckets={sizes.count(0)}")
    print(f"longest_chain={max(sizes)}")
    for index, size in enumerate(sizes):
        print(f"{index}\t{size}")
    return 0


def _load_or_report(catalog: CourseCatalog, file_path: str) -> bool:
    """Load a file, writing warnings and errors to stderr."""
    try:
        report = catalog.load(file_path)
    except AdvisorLoadError as error:
        print(f"Error: {error}", file=sys.stderr)
        return False
    for warning in report.warnings:
        print(f"Warning: {warning.message}", file=sys.stderr)
    return True


def _add_menu_command(subparsers: Any) -> None:
    """Register menu subcommand."""
    parser = subparsers.add_parser("menu", help="Run the interactive advising menu")
    parser.add_argument("--file", help="Course file to load before the menu starts")


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    parser = subparsers.add_parser("list", help="Print all courses sorted by identifier")
    parser.add_argument("file", help="Comma-delimited course file")


def _add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Print one course with prerequisites")
    parser.add_argument("file", help="Comma-delimited course file")
    parser.add_argument("course", help="Course identifier, case-insensitive")


def _add_stats_command(subparsers: Any) -> None:
    """Register stats subcommand."""
    parser = subparsers.add_parser("stats", help="Print course table bucket occupancy")
    parser.add_argument("file", help="Comma-delimited course file")
