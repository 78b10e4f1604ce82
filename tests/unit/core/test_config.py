"""Unit tests for core config parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import AdvisorConfig, parse_bucket_count
from core.constants import DEFAULT_BUCKET_COUNT, DEFAULT_LOG_LEVEL
from core.errors import AdvisorConfigError
from tests.fixture_paths import fixture_path


def test_default_config_uses_twenty_buckets() -> None:
    """Default config should match the built-in table size."""
    config = AdvisorConfig.default()

    assert config.bucket_count == DEFAULT_BUCKET_COUNT == 20
    assert config.log_level == DEFAULT_LOG_LEVEL
    assert config.default_catalog_path is None


def test_from_file_reads_values_and_resolves_catalog_path() -> None:
    """Config file values should be parsed and paths resolved next to the file."""
    config = AdvisorConfig.from_file(fixture_path("config/valid.yaml"))

    assert config.bucket_count == 7
    assert config.log_level == "info"
    assert config.default_catalog_path == fixture_path("catalog/example_courses.csv").resolve()


def test_from_file_empty_file_uses_defaults(tmp_path: Path) -> None:
    """An empty YAML document should yield the default config."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("", encoding="utf-8")

    assert AdvisorConfig.from_file(config_file) == AdvisorConfig.default()


def test_from_file_raises_for_zero_buckets() -> None:
    """Non-positive bucket counts should be rejected."""
    with pytest.raises(AdvisorConfigError):
        AdvisorConfig.from_file(fixture_path("config/invalid_bucket_count.yaml"))


def test_from_file_raises_for_unknown_key() -> None:
    """Unknown config keys should be rejected."""
    with pytest.raises(AdvisorConfigError, match="colour"):
        AdvisorConfig.from_file(fixture_path("config/unknown_key.yaml"))


def test_from_file_raises_for_missing_file(tmp_path: Path) -> None:
    """A missing config file should raise a config error."""
    with pytest.raises(AdvisorConfigError):
        AdvisorConfig.from_file(tmp_path / "missing.yaml")


def test_from_file_raises_for_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML should raise a config error."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("bucket_count: [1, 2\n", encoding="utf-8")

    with pytest.raises(AdvisorConfigError):
        AdvisorConfig.from_file(config_file)


def test_from_file_raises_for_non_mapping(tmp_path: Path) -> None:
    """A YAML list at the root should be rejected."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(AdvisorConfigError):
        AdvisorConfig.from_file(config_file)


def test_from_file_raises_for_unsupported_log_level(tmp_path: Path) -> None:
    """Unknown log levels should be rejected."""
    config_file = tmp_path / "level.yaml"
    config_file.write_text("log_level: loud\n", encoding="utf-8")

    with pytest.raises(AdvisorConfigError):
        AdvisorConfig.from_file(config_file)


@pytest.mark.parametrize("raw_value", ["20", 2.5, True, -3])
def test_parse_bucket_count_rejects_invalid_values(raw_value: object) -> None:
    """Bucket count must be a positive integer, not a string, float, or bool."""
    with pytest.raises(AdvisorConfigError):
        parse_bucket_count(raw_value)
