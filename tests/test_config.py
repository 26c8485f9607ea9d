"""Tests for settings and data-file resolution (config.py, infra/paths.py)."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from ws.config import DEFAULT_LOG_LEVEL, load_settings, log_level_from_env
from ws.exceptions import HomeDirectoryError
from ws.infra.paths import resolve_data_file, resolve_home


class TestDataFile:
    def test_path_under_injected_home(self, home: Path) -> None:
        assert resolve_data_file(home) == home / ".config" / "ws" / "ws.json"

    def test_settings_use_injected_home(self, home: Path) -> None:
        assert load_settings(home).data_file == home / ".config" / "ws" / "ws.json"

    def test_default_home_comes_from_environment(
        self, home: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
        assert load_settings().data_file == home / ".config" / "ws" / "ws.json"

    def test_nothing_is_created(self, home: Path) -> None:
        load_settings(home)
        assert list(home.iterdir()) == []


class TestHome:
    @pytest.mark.parametrize("error", [RuntimeError("no home"), KeyError("HOME")])
    def test_unresolvable_home_is_startup_error(self, error: Exception) -> None:
        with patch("ws.infra.paths.Path.home", side_effect=error):
            with pytest.raises(HomeDirectoryError, match="home directory"):
                resolve_home()

    def test_unresolvable_home_surfaces_from_settings(self) -> None:
        with patch("ws.infra.paths.Path.home", side_effect=RuntimeError("no home")):
            with pytest.raises(HomeDirectoryError):
                load_settings()


class TestLogLevel:
    def test_default(self) -> None:
        assert log_level_from_env({}) == DEFAULT_LOG_LEVEL == logging.WARNING

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            (" error ", logging.ERROR),
        ],
    )
    def test_named_levels(self, raw: str, expected: int) -> None:
        assert log_level_from_env({"WS_LOG_LEVEL": raw}) == expected

    @pytest.mark.parametrize("raw", ["", "loud", "12x"])
    def test_unknown_falls_back(self, raw: str) -> None:
        assert log_level_from_env({"WS_LOG_LEVEL": raw}) == DEFAULT_LOG_LEVEL
