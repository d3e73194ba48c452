# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_logs_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Point Settings.LOGS_DIR at a temp dir so runs never touch logs/."""
    logs_dir = tmp_path / "logs"
    with patch("src.config.settings.Settings.LOGS_DIR", logs_dir):
        yield logs_dir
