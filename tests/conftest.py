"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from datetime import UTC, datetime
from io import StringIO
from pathlib import Path

import pytest
from fakes import FakeRunner
from labmaint.core.logger import MaintenanceLogger
from labmaint.core.theme import get_rich_theme
from rich.console import Console


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Runner where every package tool is present and every command succeeds."""
    return FakeRunner(commands={"apt-get", "dpkg-query", "flatpak", "snap", "bleachbit", "df"})


@pytest.fixture
def console_buffer() -> StringIO:
    """Buffer capturing console output."""
    return StringIO()


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Audit log location inside the test directory."""
    return tmp_path / "maintenance.log"


@pytest.fixture
def maintenance_log(log_path: Path, console_buffer: StringIO) -> MaintenanceLogger:
    """MaintenanceLogger writing to a temp log and an in-memory console."""
    console = Console(
        file=console_buffer,
        theme=get_rich_theme(),
        force_terminal=False,
        color_system=None,
        width=200,
    )
    return MaintenanceLogger(
        log_path,
        console=console,
        clock=lambda: datetime(2026, 10, 16, 9, 30, 0, tzinfo=UTC),
    )


@pytest.fixture
def mock_df_output() -> str:
    """Sample df -h / output."""
    return """Filesystem      Size  Used Avail Use% Mounted on
/dev/sda2       234G   98G  125G  44% /
"""


@pytest.fixture
def mock_flatpak_output() -> str:
    """Sample flatpak list --app --columns=application output."""
    return """org.kde.gcompris
edu.mit.Scratch
org.mozilla.firefox
"""
