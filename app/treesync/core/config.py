"""treesync configuration and settings.

Configuration is stored in ~/.config/treesync/config.toml:

    [clean]
    include = ["**/*.orig"]
    exclude = [".git/**"]

``clean.include`` supplies default globs for ``treesync tree clean`` when none
are given on the command line. ``clean.exclude`` globs are always kept.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from treesync.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE: tuple[str, ...] = (".git/**",)


class CleanConfig(BaseModel):
    """Settings for filtered tree cleanup.

    Attributes:
        include: Default globs selecting files to delete.
        exclude: Globs for files that are never deleted.
    """

    model_config = ConfigDict(extra="forbid")

    include: Annotated[
        list[str],
        Field(description="Default globs selecting files to delete"),
    ] = []
    exclude: Annotated[
        list[str],
        Field(description="Globs for files that are never deleted"),
    ] = list(DEFAULT_EXCLUDE)

    @field_validator("include", "exclude")
    @classmethod
    def validate_globs(cls, v: list[str]) -> list[str]:
        """Reject blank glob entries."""
        for glob in v:
            if not glob.strip():
                msg = "Glob patterns cannot be empty"
                raise ValueError(msg)
        return v


class TreeSyncConfig(BaseModel):
    """Top-level treesync configuration."""

    model_config = ConfigDict(extra="forbid")

    clean: CleanConfig = Field(default_factory=CleanConfig)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> TreeSyncConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated TreeSyncConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or does not match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return TreeSyncConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return TreeSyncConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: TreeSyncConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file first and then moved into
    place with os.replace(), which is atomic on POSIX.

    Args:
        config: The configuration to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

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
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
