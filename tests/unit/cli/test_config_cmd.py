"""Unit tests for config CLI commands.

Tests for the treesync config show and treesync config init commands.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from treesync.cli.main import app
from treesync.core.config import ConfigError, load_config
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    home = tmp_path / "xdg-config"
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(home)}):
        yield home


class TestConfigShow:
    """Tests for treesync config show command."""

    def test_defaults(self) -> None:
        """Without a config file the defaults are shown."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "defaults" in result.stdout
        assert ".git/**" in result.stdout

    def test_from_file(self, config_home: Path) -> None:
        """Values from the config file are shown."""
        path = config_home / "treesync" / "config.toml"
        path.parent.mkdir(parents=True)
        path.write_text('[clean]\ninclude = ["*.orig"]\n')

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "*.orig" in result.stdout

    def test_invalid_file(self, config_home: Path) -> None:
        """A broken config file exits with code 1."""
        path = config_home / "treesync" / "config.toml"
        path.parent.mkdir(parents=True)
        path.write_text("[clean\n")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1


class TestConfigInit:
    """Tests for treesync config init command."""

    def test_writes_defaults(self, config_home: Path) -> None:
        """init writes a loadable default config file."""
        result = runner.invoke(app, ["config", "init"])

        path = config_home / "treesync" / "config.toml"
        assert result.exit_code == 0
        assert path.exists()
        assert load_config(path).clean.exclude == [".git/**"]

    def test_existing_file_kept(self, config_home: Path) -> None:
        """An existing config is not overwritten without --force."""
        path = config_home / "treesync" / "config.toml"
        path.parent.mkdir(parents=True)
        path.write_text('[clean]\ninclude = ["*.orig"]\n')

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "already exists" in result.stdout
        assert load_config(path).clean.include == ["*.orig"]

    def test_force_overwrites(self, config_home: Path) -> None:
        """--force replaces an existing config with defaults."""
        path = config_home / "treesync" / "config.toml"
        path.parent.mkdir(parents=True)
        path.write_text('[clean]\ninclude = ["*.orig"]\n')

        result = runner.invoke(app, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(path).clean.include == []

    def test_write_failure(self) -> None:
        """A failing save exits with code 1."""
        with patch(
            "treesync.cli.commands.config.save_config",
            side_effect=ConfigError("Failed to write config: disk full"),
        ):
            result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 1
