"""Course catalog file reader.

This module parses comma-delimited course files into typed records.
Malformed or undecodable lines are reported as warnings instead of
aborting the read.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import (
    COURSE_FILE_ENCODING,
    FIELD_DELIMITER,
    IDENTIFIER_STRIP_CHARS,
    MIN_COURSE_FIELDS,
    UTF8_BYTE_ORDER_MARK,
    WARNING_KIND_MALFORMED_LINE,
    WARNING_KIND_UNDECODABLE_LINE,
)
from core.errors import AdvisorLoadError
from core.types import CourseRecord, LoadWarning


@dataclass(frozen=True)
class ParsedCourseFile:
    """Records and line warnings read from one course file.

    Attributes:
        source_path: File that was read.
        records: Parsed records in file order, duplicates included.
        warnings: Malformed and undecodable line warnings in file order.
    """

    source_path: str
    records: tuple[CourseRecord, ...]
    warnings: tuple[LoadWarning, ...]


def read_course_file(source_path: str | Path) -> ParsedCourseFile:
    """Read and parse an entire course file.

    Lines are decoded one at a time, so a line that is not valid UTF-8
    is skipped with a warning while the rest of the file still loads.

    Args:
        source_path: Path to a comma-delimited course file.

    Returns:
        Parsed records plus line warnings.

    Raises:
        AdvisorLoadError: If the file is missing or cannot be read.
    """
    file_path = Path(source_path).expanduser()
    content = _read_bytes(file_path)
    records: list[CourseRecord] = []
    warnings: list[LoadWarning] = []
    for line_number, raw_line in enumerate(content.splitlines(), 1):
        try:
            line = raw_line.decode(COURSE_FILE_ENCODING)
        except UnicodeDecodeError as error:
            warnings.append(
                LoadWarning(
                    kind=WARNING_KIND_UNDECODABLE_LINE,
                    message=f"Skipping invalid line {line_number}: not valid UTF-8 "
                    f"({error.reason}).",
                    line_number=line_number,
                )
            )
            continue
        if not line.strip(IDENTIFIER_STRIP_CHARS):
            continue
        record = parse_course_line(line)
        if record is None:
            warnings.append(
                LoadWarning(
                    kind=WARNING_KIND_MALFORMED_LINE,
                    message=f"Skipping invalid line {line_number}: expected at least "
                    f"{MIN_COURSE_FIELDS} comma-separated fields.",
                    line_number=line_number,
                )
            )
            continue
        records.append(record)
    return ParsedCourseFile(
        source_path=str(file_path),
        records=tuple(records),
        warnings=tuple(warnings),
    )


def parse_course_line(line: str) -> CourseRecord | None:
    """Parse one ``identifier,title[,prereq...]`` line.

    Every field is trimmed. Empty prerequisite fields are dropped,
    so trailing commas are harmless.

    Args:
        line: Raw line without quoting support.

    Returns:
        Parsed record, or None when fewer than two fields are present.
    """
    fields = _split_fields(line)
    if len(fields) < MIN_COURSE_FIELDS:
        return None
    prerequisites = tuple(field for field in fields[2:] if field)
    return CourseRecord(identifier=fields[0], title=fields[1], prerequisites=prerequisites)


def _split_fields(line: str) -> list[str]:
    """Split on the delimiter and trim, dropping one trailing empty field.

    A line ending in a delimiter yields no empty final field, so
    ``"BADLINE,"`` still counts as a single field.
    """
    stripped = line.strip(IDENTIFIER_STRIP_CHARS)
    if not stripped:
        return []
    fields = [field.strip(IDENTIFIER_STRIP_CHARS) for field in stripped.split(FIELD_DELIMITER)]
    if stripped.endswith(FIELD_DELIMITER):
        fields.pop()
    return fields


def _read_bytes(file_path: Path) -> bytes:
    """Read raw file content without a leading UTF-8 byte order mark."""
    if not file_path.is_file():
        raise AdvisorLoadError(
            f"Cannot open course file '{file_path}': file does not exist. "
            "Please check the file name and try again."
        )
    try:
        content = file_path.read_bytes()
    except OSError as error:
        raise AdvisorLoadError(
            f"Cannot open course file '{file_path}': {error.strerror or error}. "
            "Check file permissions and try again."
        ) from error
    if content.startswith(UTF8_BYTE_ORDER_MARK):
        return content[len(UTF8_BYTE_ORDER_MARK):]
    return content
