"""Scripter configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scripter.exceptions import ConfigurationError, check_config_keys

if TYPE_CHECKING:
    from scripter.parser.models import ConversionOptions


class ScripterSettings(BaseSettings):
    """Scripter configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: scripter convert script.pdf --strict

    2. Config file values (YAML, TOML, or JSON)
       Example: scripter --config myconfig.yaml convert script.pdf
       Multiple files: Later files override earlier ones

    3. Environment variables (prefixed with SCRIPTER_)
       Example: export SCRIPTER_STRICT_MODE=true

    4. .env file (in current directory or specified path)
       Example: SCRIPTER_LOG_LEVEL=DEBUG in .env file

    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Conversion settings
    detect_scene_headings: bool = Field(
        default=True,
        description="Detect scene headings (also enables title page detection)",
    )
    detect_character_names: bool = Field(
        default=True,
        description="Detect character cues before dialogue",
    )
    include_metadata: bool = Field(
        default=True,
        description="Append conversion metadata as a trailing note",
    )
    strict_mode: bool = Field(
        default=False,
        description="Tighten scene heading and character heuristics",
    )
    preserve_formatting: bool = Field(
        default=True,
        description="Reserved for layout fidelity; not used by the classifier",
    )

    # Output settings
    output_dir: Path | None = Field(
        default=None,
        description="Directory for converted .fountain files",
    )
    continue_on_error: bool = Field(
        default=False,
        description="Keep converting remaining files when a batch item fails",
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("output_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and resolve path.

        Accepts None, str (with env vars and ~ expansion) and Path values.
        Collection types are rejected.
        """
        if v is None:
            return None
        if isinstance(v, str):
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.resolve()

        if isinstance(v, (dict, list, set, tuple)):  # noqa: UP038
            raise ValueError(
                f"Path fields cannot accept {type(v).__name__} types. "
                f"Expected str or Path, got: {v!r}"
            )

        try:
            return Path(str(v)).resolve()
        except (TypeError, ValueError, OSError) as e:
            raise ValueError(
                f"Path fields must be string, Path, or convertible to string. "
                f"Got {type(v).__name__}: {v!r}"
            ) from e

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    def conversion_options(self) -> ConversionOptions:
        """Build parser options from these settings."""
        from scripter.parser.models import ConversionOptions

        return ConversionOptions(
            detect_scene_headings=self.detect_scene_headings,
            detect_character_names=self.detect_character_names,
            include_metadata=self.include_metadata,
            strict_mode=self.strict_mode,
            preserve_formatting=self.preserve_formatting,
        )

    @classmethod
    def from_env(cls) -> ScripterSettings:
        """Create settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScripterSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": [".yml", ".yaml", ".toml", ".json"],
                },
            )

        check_config_keys(data)

        return cls(**data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> ScripterSettings:
        """Load settings with proper precedence from multiple sources.

        Precedence (highest to lowest):
        1. CLI arguments
        2. Config files (last file wins)
        3. Environment variables
        4. .env file
        5. Default values

        Args:
            config_files: List of config files to load (later files override earlier).
            env_file: Path to .env file (default: .env in current directory).
            cli_args: Dictionary of CLI arguments.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        if config_files:
            for config_file in config_files:
                try:
                    file_settings = cls.from_file(config_file)
                    data.update(file_settings.model_dump(exclude_unset=True))
                except FileNotFoundError:
                    # Imported here to avoid a circular import at module load
                    from scripter.config.logging import get_logger as _get_logger

                    logger = _get_logger("scripter.config.settings")
                    logger.warning(
                        "Configuration file not found, using defaults",
                        config_file=str(config_file),
                    )

        if env_file:
            # pydantic-settings accepts _env_file at construction time
            settings = cast(
                "ScripterSettings", cast(Any, cls)(_env_file=env_file, **data)
            )
        else:
            settings = cls(**data)

        if cli_args:
            cli_data = {k: v for k, v in cli_args.items() if v is not None}
            if cli_data:
                updated_data = settings.model_dump()
                updated_data.update(cli_data)
                settings = cls(**updated_data)

        return settings


# Global settings instance
_settings: ScripterSettings | None = None
# Cache for config file paths that exist
_config_paths_cache: list[Path | str] | None = None


def _get_config_paths() -> list[Path | str]:
    """Get list of config file paths to check.

    Returns paths in priority order (later files override earlier).
    """
    global _config_paths_cache

    if _config_paths_cache is not None:
        return _config_paths_cache

    potential_paths = [
        # User config in .config directory (XDG standard)
        Path.home() / ".config" / "scripter" / "config.yaml",
        Path.home() / ".config" / "scripter" / "config.json",
        Path.home() / ".config" / "scripter" / "config.toml",
        # Project config in current directory
        Path.cwd() / "scripter.yaml",
        Path.cwd() / "scripter.json",
        Path.cwd() / "scripter.toml",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.is_file():
                existing_paths.append(path)
        except OSError:
            continue

    _config_paths_cache = existing_paths
    return existing_paths


def get_settings() -> ScripterSettings:
    """Get the global settings instance.

    Loads configuration from config files (user, then project), the
    environment, and defaults.

    Returns:
        Global ScripterSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()

        if config_paths:
            _settings = ScripterSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = ScripterSettings.from_env()
    return _settings


def set_settings(settings: ScripterSettings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    This forces get_settings() to re-read from environment variables
    and configuration files on the next call.
    """
    global _settings, _config_paths_cache
    _settings = None
    _config_paths_cache = None


def reset_settings() -> None:
    """Reset the global settings instance."""
    clear_settings_cache()


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScripterSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides (e.g., strict_mode).
                      Only non-None values are applied.

    Returns:
        ScripterSettings instance with all sources merged.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        return ScripterSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()

    if cli_overrides:
        filtered_overrides = {k: v for k, v in cli_overrides.items() if v is not None}
        if filtered_overrides:
            data = settings.model_dump()
            data.update(filtered_overrides)
            settings = ScripterSettings(**data)

    return settings
