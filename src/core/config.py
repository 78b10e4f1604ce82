"""Runtime configuration model for the course advisor.

This module owns all configuration file parsing and validation.
Other modules consume a typed config object instead of raw mappings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.constants import (
    CONFIG_KEYS,
    DEFAULT_BUCKET_COUNT,
    DEFAULT_LOG_LEVEL,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import AdvisorConfigError


@dataclass(frozen=True)
class AdvisorConfig:
    """Validated runtime configuration.

    Attributes:
        bucket_count: Number of hash buckets in the course table.
        log_level: Minimum structured log level.
        default_catalog_path: Optional course file loaded when the menu starts.
    """

    bucket_count: int = DEFAULT_BUCKET_COUNT
    log_level: str = DEFAULT_LOG_LEVEL
    default_catalog_path: Path | None = None

    @classmethod
    def default(cls) -> "AdvisorConfig":
        """Return the built-in configuration."""
        return cls()

    @classmethod
    def from_file(cls, config_path: str | Path) -> "AdvisorConfig":
        """Build config from a YAML file.

        Args:
            config_path: Path to a YAML mapping with optional
                ``bucket_count``, ``log_level`` and ``default_catalog_path``.

        Returns:
            A validated config object.

        Raises:
            AdvisorConfigError: If the file is missing, malformed, or invalid.
        """
        config_file = Path(config_path).expanduser().resolve()
        payload = _load_yaml_mapping(config_file)
        unknown_keys = sorted(set(payload) - set(CONFIG_KEYS))
        if unknown_keys:
            raise AdvisorConfigError(
                f"Unknown config keys in {config_file}: {unknown_keys}. "
                f"Supported keys: {list(CONFIG_KEYS)}."
            )
        return cls(
            bucket_count=parse_bucket_count(payload.get("bucket_count", DEFAULT_BUCKET_COUNT)),
            log_level=_parse_log_level(payload.get("log_level", DEFAULT_LOG_LEVEL)),
            default_catalog_path=_parse_catalog_path(
                payload.get("default_catalog_path"), config_file.parent
            ),
        )


def parse_bucket_count(raw_value: object) -> int:
    """Validate a bucket count value.

    Args:
        raw_value: Value from a config file or CLI flag.

    Returns:
        Positive integer bucket count.

    Raises:
        AdvisorConfigError: If value is not a positive integer.
    """
    if isinstance(raw_value, bool) or not isinstance(raw_value, int):
        raise AdvisorConfigError(
            f"Invalid bucket_count value: expected integer, got '{raw_value}'. "
            "Set bucket_count to a positive whole number."
        )
    if raw_value < 1:
        raise AdvisorConfigError(
            f"Invalid bucket_count value: expected at least 1, got {raw_value}."
        )
    return raw_value


def _load_yaml_mapping(config_file: Path) -> Mapping[str, object]:
    if not config_file.is_file():
        raise AdvisorConfigError(
            f"Config file does not exist at {config_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise AdvisorConfigError(
            f"Failed to read config at {config_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise AdvisorConfigError(
            f"Failed to parse YAML config at {config_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise AdvisorConfigError(
            f"Invalid config at {config_file}: expected a mapping, got {type(payload).__name__}."
        )
    return {str(key): value for key, value in payload.items()}


def _parse_log_level(raw_value: object) -> str:
    level = str(raw_value).strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise AdvisorConfigError(
            f"Invalid log_level value '{raw_value}'. Use one of {SUPPORTED_LOG_LEVELS}."
        )
    return level


def _parse_catalog_path(raw_value: object, base_dir: Path) -> Path | None:
    """Resolve an optional catalog path relative to the config file."""
    if raw_value is None:
        return None
    if not isinstance(raw_value, str) or not raw_value.strip():
        raise AdvisorConfigError(
            f"Invalid default_catalog_path value '{raw_value}': expected a non-empty string."
        )
    catalog_path = Path(raw_value.strip()).expanduser()
    if not catalog_path.is_absolute():
        catalog_path = base_dir / catalog_path
    return catalog_path.resolve()
