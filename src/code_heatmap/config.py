"""Configuration loading and management for code-heatmap.

Configuration sources are merged in priority order:
    1. Defaults (defined in HeatmapConfig)
    2. Global config (~/.code-heatmap.toml)
    3. Project config (./code-heatmap.toml)
    4. Explicit config file
    5. Environment variables (CODE_HEATMAP_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(language="python3", verbose=True)
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "CODE_HEATMAP_"

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class HeatmapConfig:
    """Rendering configuration.

    Attributes:
        Color scale:
            min_run_time: Lower bound of the logarithmic time domain (seconds).
                Lines faster than this get the light endpoint color.
            min_run_color: Color for the cheapest executed lines.
            max_run_color: Color for lines that took the whole run time.

        Source display:
            language: Pygments lexer name used to highlight every line.
            pygments_style: Pygments style whose CSS is embedded in pages.

        Page:
            title: Document title of written pages.
            help_message: Markup of the help banner above the module list.

        Output control:
            verbosity: Logging verbosity level
    """

    # Color scale
    min_run_time: float = 0.000001
    min_run_color: str = "#ebfaeb"
    max_run_color: str = "#47d147"

    # Source display
    language: str = "python"
    pygments_style: str = "default"

    # Page
    title: str = "Code heatmap"
    help_message: str = "<p>&#8226 Hover over line to see line execution count.</p>"

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.min_run_time <= 0:
            raise InvalidConfigError("min_run_time", self.min_run_time, "must be positive")

        for key in ("min_run_color", "max_run_color"):
            value = getattr(self, key)
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise InvalidConfigError(key, value, "expected a #rrggbb color")

        for key in ("language", "pygments_style", "title"):
            if not str(getattr(self, key)).strip():
                raise InvalidConfigError(key, getattr(self, key), "must not be empty")

        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITY_LEVELS)}"
            )


DEFAULT_CONFIG = HeatmapConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> HeatmapConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep file values.

    Returns:
        Validated HeatmapConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".code-heatmap.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global"))

    project_config = Path.cwd() / "code-heatmap.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_read_config_file(config_file, "explicit"))

    merged.update(_load_env_vars())

    # Verbosity boolean flags become the verbosity string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(HeatmapConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown configuration key")

    return HeatmapConfig(**merged)


def _read_config_file(path: Path, kind: str) -> dict:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(
            f"Invalid {kind} config '{path}': {e}", details={"path": str(path)}
        ) from e

    # Settings may live at the top level or under a [heatmap] table
    section = data.get("heatmap", data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Invalid {kind} config '{path}': [heatmap] must be a table",
            details={"path": str(path)},
        )
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CODE_HEATMAP_* environment variables.

    Supported environment variables:
        CODE_HEATMAP_MIN_RUN_TIME: float
        CODE_HEATMAP_MIN_RUN_COLOR: #rrggbb
        CODE_HEATMAP_MAX_RUN_COLOR: #rrggbb
        CODE_HEATMAP_LANGUAGE: lexer name
        CODE_HEATMAP_PYGMENTS_STYLE: style name
        CODE_HEATMAP_TITLE: str
        CODE_HEATMAP_HELP_MESSAGE: str
        CODE_HEATMAP_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any CODE_HEATMAP_* vars found.
    """
    type_hints = get_type_hints(HeatmapConfig)

    result: dict[str, Any] = {}

    for config_field in fields(HeatmapConfig):
        env_key = f"{ENV_PREFIX}{config_field.name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(config_field.name)
        try:
            result[config_field.name] = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(config_field.name, env_value, f"{env_key}: {e}") from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is float:
        return float(value)
    if type_hint is int:
        return int(value)
    return value


def _load_toml_file(path: Path) -> dict:
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
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
