"""Regeneration configuration and settings.

This module provides the configuration model and TOML I/O functions for
world regeneration. A configuration is an immutable snapshot: callers
derive changed copies (e.g. for self-disable) and persist them explicitly.

Configuration is stored in ~/.config/worldreboot/config.toml
"""

import os
import tomllib
from pathlib import Path, PurePath
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from worldreboot.core.paths import ensure_config_dir, get_config_path

# Vanilla server world folders
DEFAULT_WORLDS: tuple[str, ...] = ("world", "world_nether", "world_the_end")


class RegenerationConfig(BaseModel):
    """Configuration for world regeneration.

    Attributes:
        enabled: Gate for the whole run. A disabled config is a no-op.
        disable_after_regeneration: Flip enabled to false and persist once
            a run has gone through its target list.
        worlds_to_regenerate: Ordered world folder names, relative to the
            server's world container. Duplicates are processed again.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: Annotated[
        bool,
        Field(description="Regenerate worlds on the next run"),
    ] = False
    disable_after_regeneration: Annotated[
        bool,
        Field(description="Set enabled to false after a run"),
    ] = True
    worlds_to_regenerate: Annotated[
        list[str],
        Field(description="World folder names to empty, in order"),
    ] = Field(default_factory=lambda: list(DEFAULT_WORLDS))

    @field_validator("worlds_to_regenerate")
    @classmethod
    def validate_world_names(cls, names: list[str]) -> list[str]:
        """Reject names that would resolve outside their own folder."""
        for name in names:
            if not name or not name.strip():
                msg = "world name must not be empty"
                raise ValueError(msg)
            path = PurePath(name)
            if path.is_absolute() or len(path.parts) != 1 or name in (".", "..") or "\\" in name:
                msg = f"world name must be a single folder name: {name!r}"
                raise ValueError(msg)
        return names


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when config content doesn't match the schema."""


def load_config(path: Path | None = None) -> RegenerationConfig:
    """Load regeneration configuration from a TOML file.

    Keys missing from the file take their default values.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RegenerationConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return RegenerationConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def save_config(config: RegenerationConfig, path: Path | None = None) -> Path:
    """Save regeneration configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The RegenerationConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            raise ConfigError(str(e)) from e
        config_path = get_config_path()
    else:
        config_path = path

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def ensure_config(path: Path | None = None) -> RegenerationConfig:
    """Load the config, writing the defaults first if the file is missing.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        The loaded (possibly freshly written) configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or written.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        config = get_default_config()
        save_config(config, path)
        return config


def set_enabled(enabled: bool, path: Path | None = None) -> RegenerationConfig:
    """Persist a copy of the config with the enabled flag changed.

    Args:
        enabled: New value of the enabled flag.
        path: Path to the config file. If None, uses the default config path.

    Returns:
        The updated configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or written.
    """
    config = ensure_config(path).model_copy(update={"enabled": enabled})
    save_config(config, path)
    return config


def get_default_config() -> RegenerationConfig:
    """Create a default RegenerationConfig.

    Returns:
        RegenerationConfig with default settings.
    """
    return RegenerationConfig()
