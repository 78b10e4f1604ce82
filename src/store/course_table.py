"""Fixed-size hash table of course records.

This module keys courses by normalized identifier in a bucket array
with per-bucket chains. The bucket count is fixed at construction and
never resized, since course catalogs are small and bounded.
"""

from __future__ import annotations

from core.constants import DEFAULT_BUCKET_COUNT, HASH_MODULUS, HASH_MULTIPLIER
from core.errors import AdvisorStoreError
from core.logging_config import get_logger
from core.normalization import normalize_identifier
from core.types import CourseRecord

_LOGGER = get_logger(__name__)


class CourseTable:
    """Insert/lookup/list store for course records.

    At most one record exists per normalized identifier. Records are
    immutable, so ``find`` returns the stored instance directly.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> None:
        """Create an empty table.

        Args:
            bucket_count: Number of buckets, at least 1.

        Raises:
            AdvisorStoreError: If bucket count is not a positive integer.
        """
        if isinstance(bucket_count, bool) or not isinstance(bucket_count, int) or bucket_count < 1:
            raise AdvisorStoreError(
                f"Invalid bucket count {bucket_count!r}: expected a positive integer."
            )
        self._buckets: list[list[CourseRecord]] = [[] for _ in range(bucket_count)]

    @property
    def bucket_count(self) -> int:
        """Number of buckets fixed at construction."""
        return len(self._buckets)

    def bucket_index(self, identifier: str) -> int:
        """Return the bucket an identifier maps to after normalization."""
        return rolling_hash(normalize_identifier(identifier)) % self.bucket_count

    def insert(self, record: CourseRecord) -> bool:
        """Add a record unless its normalized identifier is already present.

        The first record seen for an identifier wins. A rejected duplicate
        leaves the table unchanged and is reported through the return value.

        Args:
            record: Course record to store.

        Returns:
            True when stored, False when rejected as a duplicate.
        """
        key = normalize_identifier(record.identifier)
        chain = self._buckets[rolling_hash(key) % self.bucket_count]
        if _find_in_chain(chain, key) is not None:
            _LOGGER.debug(
                "course_duplicate_skipped",
                identifier=record.identifier,
                normalized_identifier=key,
            )
            return False
        chain.append(record)
        return True

    def find(self, query: str) -> CourseRecord | None:
        """Look up a course by identifier, ignoring case and outer whitespace.

        Args:
            query: Identifier to search for.

        Returns:
            Matching record, or None when absent.
        """
        key = normalize_identifier(query)
        return _find_in_chain(self._buckets[rolling_hash(key) % self.bucket_count], key)

    def all_records(self) -> list[CourseRecord]:
        """Return every record in bucket order, then chain order.

        The order reflects table layout only. Callers needing a
        meaningful order must sort.
        """
        return [record for chain in self._buckets for record in chain]

    def bucket_sizes(self) -> tuple[int, ...]:
        """Return chain length per bucket."""
        return tuple(len(chain) for chain in self._buckets)

    def clear(self) -> None:
        """Remove all records while keeping the bucket count."""
        for chain in self._buckets:
            chain.clear()

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __contains__(self, query: object) -> bool:
        return isinstance(query, str) and self.find(query) is not None


def rolling_hash(key: str) -> int:
    """Polynomial string hash with 32-bit unsigned wraparound.

    Computes ``h = h * 31 + ord(char)`` left to right from zero. Unlike
    the builtin ``hash``, the result does not vary between processes.

    Args:
        key: Normalized identifier.

    Returns:
        Hash value in ``[0, 2**32)``.
    """
    hash_value = 0
    for char in key:
        hash_value = (hash_value * HASH_MULTIPLIER + ord(char)) % HASH_MODULUS
    return hash_value


def _find_in_chain(chain: list[CourseRecord], key: str) -> CourseRecord | None:
    for record in chain:
        if normalize_identifier(record.identifier) == key:
            return record
    return None
