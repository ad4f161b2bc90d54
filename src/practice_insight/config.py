"""Configuration loading and management for Practice Insight.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in ReconcileConfig)
    2. Global config (~/.practice-insight.toml)
    3. Project config (./practice-insight.toml)
    4. Explicit config file
    5. Environment variables (PRACTICE_INSIGHT_* prefix)
    6. Keyword overrides (typically CLI flags)

Threshold bands are overridden per category with TOML tables:

    [thresholds.code-style]
    adopt = 0.9

    [thresholds.default]
    confirm = 0.6

Example:
    >>> config = load_config(verbose=True, sample_limit=20)
    >>> config.verbosity
    'verbose'
    >>> config.sample_limit
    20
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .thresholds import ThresholdTable

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "PRACTICE_INSIGHT_"
CONFIG_FILENAME = "practice-insight.toml"


@dataclass(frozen=True)
class ReconcileConfig:
    """Configuration for one reconciliation run.

    Attributes:
        Sampling:
            sample_limit: Max files read for generic keyword matching
            style_sample_limit: Max files read for code-style/component signals
            read_workers: Thread pool size for concurrent reads (None = auto)

        Corpus extraction:
            min_point_length: List items at or below this length are discarded
            min_section_length: Whole-section fallback requires more than this
            tech_stack: Tech-stack names used to tag practices (empty = detect
                from the project dependencies)

        File discovery:
            code_extensions: Extensions considered source code for sampling
            exclude_patterns: Glob patterns excluded from discovery
            allow_hidden_files: Include hidden files (starting with .)
            follow_symlinks: Follow symbolic links during discovery

        Output control:
            verbosity: Logging verbosity level
            log_file: Optional file that also receives log records

        thresholds: Per-category threshold bands
    """

    # Sampling
    sample_limit: int = 50
    style_sample_limit: int = 50
    read_workers: Optional[int] = None

    # Corpus extraction
    min_point_length: int = 10
    min_section_length: int = 20
    tech_stack: list[str] = field(default_factory=list)

    # File discovery
    code_extensions: list[str] = field(
        default_factory=lambda: [".ts", ".tsx", ".js", ".jsx", ".py", ".vue", ".svelte"]
    )
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "node_modules/*",
            "vendor/*",
            "dist/*",
            "build/*",
            ".git/*",
            "venv/*",
            ".venv/*",
            "__pycache__/*",
            "coverage/*",
            "*.min.js",
            "*.bundle.js",
            "*.generated.*",
        ]
    )
    allow_hidden_files: bool = False
    follow_symlinks: bool = False

    # Output control
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    thresholds: ThresholdTable = field(default_factory=ThresholdTable)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.sample_limit < 1:
            raise ValueError("sample_limit must be at least 1")
        if self.style_sample_limit < 1:
            raise ValueError("style_sample_limit must be at least 1")
        if self.read_workers is not None and self.read_workers < 1:
            raise ValueError("read_workers must be at least 1")
        if self.min_point_length < 0:
            raise ValueError("min_point_length must be non-negative")
        if self.min_section_length < 0:
            raise ValueError("min_section_length must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet, normal, verbose")
        for ext in self.code_extensions:
            if not ext.startswith("."):
                raise ValueError(f"code extension must start with '.': {ext!r}")


def load_config(config_file: Optional[Path] = None, **overrides) -> ReconcileConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated ReconcileConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a value
            fails validation
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_checked(global_config, "global config"))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_checked(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_checked(config_file, "config file"))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    thresholds = merged.pop("thresholds", None)
    if thresholds is not None:
        if isinstance(thresholds, dict):
            try:
                merged["thresholds"] = ThresholdTable().with_overrides(thresholds)
            except (TypeError, ValueError, AttributeError) as e:
                raise InvalidConfigError("thresholds", thresholds, str(e))
        elif isinstance(thresholds, ThresholdTable):
            merged["thresholds"] = thresholds
        else:
            raise InvalidConfigError("thresholds", thresholds, "expected a table")

    try:
        return ReconcileConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_toml_checked(path: Path, label: str) -> dict:
    try:
        return load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from PRACTICE_INSIGHT_* environment variables.

    Supported environment variables:
        PRACTICE_INSIGHT_SAMPLE_LIMIT: int
        PRACTICE_INSIGHT_STYLE_SAMPLE_LIMIT: int
        PRACTICE_INSIGHT_READ_WORKERS: int
        PRACTICE_INSIGHT_MIN_POINT_LENGTH: int
        PRACTICE_INSIGHT_MIN_SECTION_LENGTH: int
        PRACTICE_INSIGHT_ALLOW_HIDDEN_FILES: bool
        PRACTICE_INSIGHT_FOLLOW_SYMLINKS: bool
        PRACTICE_INSIGHT_VERBOSITY: quiet/normal/verbose
        PRACTICE_INSIGHT_LOG_FILE: str

    List fields and thresholds are file-only.

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(ReconcileConfig)

    result: dict[str, Any] = {}

    for field_name in ReconcileConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value or None if the field type is not settable from env

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list or type_hint is ThresholdTable:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
