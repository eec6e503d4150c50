"""Shared test fixtures."""

import io
import os
from pathlib import Path

import pytest
from rich.console import Console

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_scenes(fixtures_dir: Path) -> Path:
    return fixtures_dir / "scenes.json"


@pytest.fixture
def capture_console() -> Console:
    """Console writing into a buffer; read it back via ``.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Keep user/project config files and REELSYNC_* env vars out of tests."""
    import reelsync.core.config as config_module

    monkeypatch.setattr(config_module, "_USER_CONFIG", tmp_path / "no-user-config.toml")
    monkeypatch.setattr(config_module, "_PROJECT_CONFIG", tmp_path / "no-project-config.toml")
    for key in list(os.environ):
        if key.startswith("REELSYNC_"):
            monkeypatch.delenv(key)
