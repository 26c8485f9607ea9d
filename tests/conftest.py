"""Shared pytest fixtures and configuration for the ws test suite.

Guidelines
----------
* Never touch the real home directory: the data file always lives under
  ``tmp_path`` and is injected.
* Core tests run against an in-memory repository — no filesystem.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ws.config import Settings


@pytest.fixture()
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture()
def data_file(home: Path) -> Path:
    return home / ".config" / "ws" / "ws.json"


@pytest.fixture()
def settings(data_file: Path) -> Settings:
    return Settings(data_file=data_file)


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "projects" / "x"
    path.mkdir(parents=True)
    return path
