"""Core constants used across advisor modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_BUCKET_COUNT = 20
HASH_MULTIPLIER = 31
HASH_WIDTH_BITS = 32
HASH_MODULUS = 2**HASH_WIDTH_BITS
IDENTIFIER_STRIP_CHARS = " \t\r\n"
FIELD_DELIMITER = ","
MIN_COURSE_FIELDS = 2
COURSE_FILE_ENCODING = "utf-8"
UTF8_BYTE_ORDER_MARK = b"\xef\xbb\xbf"
PREREQUISITE_SEPARATOR = ", "
NO_PREREQUISITES_MARKER = "None"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
CONFIG_KEYS = ("bucket_count", "log_level", "default_catalog_path")
WARNING_KIND_MALFORMED_LINE = "malformed_line"
WARNING_KIND_DUPLICATE_COURSE = "duplicate_course"
WARNING_KIND_UNDECODABLE_LINE = "undecodable_line"
