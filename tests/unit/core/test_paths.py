"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from worldreboot.core.paths import (
    APP_NAME,
    ensure_config_dir,
    get_config_dir,
    get_config_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_falls_back(self) -> None:
        """An empty XDG_CONFIG_HOME is ignored."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestFilePaths:
    """Tests for file path helpers."""

    def test_config_path(self, tmp_path: Path) -> None:
        """Config file lives in the config dir."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_path() == tmp_path / APP_NAME / "config.toml"


class TestEnsureConfigDir:
    """Tests for ensure_config_dir."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        """The directory is created with parents."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path / "a" / "b")}):
            result = ensure_config_dir()

        assert result.is_dir()
        assert result == tmp_path / "a" / "b" / APP_NAME

    def test_permission_denied(self, tmp_path: Path) -> None:
        """Permission errors become RuntimeError."""
        with (
            patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}),
            patch.object(Path, "mkdir", side_effect=PermissionError("denied")),
        ):
            with pytest.raises(RuntimeError, match="Permission denied"):
                ensure_config_dir()

    def test_os_error(self, tmp_path: Path) -> None:
        """Other OS errors become RuntimeError with the message."""
        with (
            patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}),
            patch.object(Path, "mkdir", side_effect=OSError("read-only file system")),
        ):
            with pytest.raises(RuntimeError, match="read-only file system"):
                ensure_config_dir()
