"""Course identifier normalization."""

from __future__ import annotations

from core.constants import IDENTIFIER_STRIP_CHARS


def normalize_identifier(raw: str) -> str:
    """Return the canonical key form of a course identifier.

    Leading and trailing spaces, tabs, carriage returns and newlines are
    removed before upper-casing, so ``" csci200\\n"`` and ``"CSCI200"``
    share one key. Whitespace-only input yields an empty string.

    Args:
        raw: Identifier as typed or read from a file.

    Returns:
        Trimmed, upper-cased identifier.
    """
    return raw.strip(IDENTIFIER_STRIP_CHARS).upper()
