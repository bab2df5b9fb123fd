from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from winget_updater.parsing.classifier import DETAIL_MAX_LENGTH

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "json")


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


@dataclass
class OutputConfig:
    """How parsed listings are printed."""

    format: str = "table"


@dataclass
class ClassifierConfig:
    """Update classification settings."""

    detail_max_length: int = DETAIL_MAX_LENGTH


@dataclass
class DebugConfig:
    """Debug mode settings."""

    enabled: bool = False
    trace: bool = False
    verbose: bool = False


@dataclass
class AppConfig:
    """Top-level application configuration aggregating all subsections."""

    output: OutputConfig = field(default_factory=OutputConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


def load_config(path: str | None) -> AppConfig:
    """Load and validate application configuration from a YAML file.

    Every section is optional; missing keys take their defaults.

    Args:
        path: Filesystem path to the YAML configuration file, or None to
            use defaults only.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        ConfigError: If the file does not exist, is not a mapping, or
            holds an invalid output format or detail length.
    """
    if path is None:
        return AppConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(config_path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file loads as None
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")

    # `or {}` fallback handles YAML null values for optional sections
    output_raw = raw.get("output", {}) or {}
    classifier_raw = raw.get("classifier", {}) or {}
    debug_raw = raw.get("debug", {}) or {}

    output_format = output_raw.get("format", "table")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
        )

    max_length = classifier_raw.get("detail_max_length", DETAIL_MAX_LENGTH)
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0:
        raise ConfigError("classifier.detail_max_length must be a positive integer")

    logger.debug("Loaded config from %s", path)

    return AppConfig(
        output=OutputConfig(format=output_format),
        classifier=ClassifierConfig(detail_max_length=max_length),
        debug=DebugConfig(
            enabled=bool(debug_raw.get("enabled", False)),
            trace=bool(debug_raw.get("trace", False)),
            verbose=bool(debug_raw.get("verbose", False)),
        ),
    )
