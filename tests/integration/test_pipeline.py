"""Integration tests running the whole pipeline against a simulated machine.

The fake system keeps track of installed packages so that uninstall and
purge commands have lasting effects across runs.
"""

from datetime import UTC, datetime
from io import StringIO
from pathlib import Path

import pytest
from fakes import FakeRunner
from labmaint.core.config import MaintenanceConfig
from labmaint.core.logger import MaintenanceLogger
from labmaint.core.pipeline import MaintenancePipeline
from labmaint.core.theme import get_rich_theme
from labmaint.utils.shell import CommandResult
from rich.console import Console


class FakeSystem:
    """Lab machine state behind a FakeRunner."""

    def __init__(self, apt: set[str], flatpaks: set[str], bleachbit: bool = True) -> None:
        self.apt = set(apt)
        self.flatpaks = set(flatpaks)
        self.runner = FakeRunner(commands={"apt-get", "dpkg-query", "flatpak", "snap", "df"})
        if bleachbit:
            self.runner.commands.add("bleachbit")

        self.runner.on(
            ["df"],
            stdout="Filesystem Size Used Avail Use% Mounted on\n/dev/sda2 234G 98G 125G 44% /\n",
        )
        self.runner.handle(["dpkg-query"], self._dpkg_query)
        self.runner.handle(["apt-get", "purge"], self._apt_purge)
        self.runner.handle(["apt-get", "install"], self._apt_install)
        self.runner.handle(["flatpak", "list"], self._flatpak_list)
        self.runner.handle(["flatpak", "uninstall"], self._flatpak_uninstall)

    @staticmethod
    def _ok(stdout: str = "") -> CommandResult:
        return CommandResult(stdout=stdout, stderr="", returncode=0)

    def _dpkg_query(self, args: list[str]) -> CommandResult:
        if args[-1] in self.apt:
            return self._ok("ii ")
        return CommandResult(stdout="", stderr="no packages found", returncode=1)

    def _apt_purge(self, args: list[str]) -> CommandResult:
        self.apt.discard(args[-1])
        return self._ok(f"Removing {args[-1]} ...\n")

    def _apt_install(self, args: list[str]) -> CommandResult:
        self.apt.add(args[-1])
        if args[-1] == "bleachbit":
            self.runner.commands.add("bleachbit")
        return self._ok(f"Setting up {args[-1]} ...\n")

    def _flatpak_list(self, args: list[str]) -> CommandResult:
        return self._ok("".join(f"{app}\n" for app in sorted(self.flatpaks)))

    def _flatpak_uninstall(self, args: list[str]) -> CommandResult:
        if "--unused" not in args:
            self.flatpaks.discard(args[2])
        return self._ok()


def _messages(log_path: Path) -> list[str]:
    """Timestamped log lines without their timestamp prefix."""
    prefix = "Fri Oct 16 09:30:00 UTC 2026: "
    lines = log_path.read_text().splitlines()
    return [line[len(prefix) :] for line in lines if line.startswith(prefix)]


def _allow() -> None:
    """Privilege check that always passes."""


def _fetch(url: str, dest: Path) -> None:
    dest.write_text("[bleachbit]\n")


@pytest.fixture(autouse=True)
def _isolate_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBIAN_FRONTEND", "dialog")


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Student home with two files in Downloads and an empty Pictures folder."""
    home = tmp_path / "home" / "student"
    (home / "Downloads").mkdir(parents=True)
    (home / "Pictures").mkdir()
    (home / "Downloads" / "game.exe").write_text("x")
    (home / "Downloads" / "notes.txt").write_text("y")
    return home


@pytest.fixture
def config(tmp_path: Path, home: Path, log_path: Path) -> MaintenanceConfig:
    """Config with everything pointed into the test directory."""
    return MaintenanceConfig(
        log_path=log_path,
        cleanup_config_dir=tmp_path / "root" / ".config" / "bleachbit",
        folders=[str(home / "Downloads"), str(home / "Pictures")],
        flatpak_apps=["edu.mit.Scratch", "org.kde.gcompris"],
        apt_packages=["hexchat", "gnome-mines"],
    )


def _run(config: MaintenanceConfig, system: FakeSystem) -> None:
    console = Console(
        file=StringIO(),
        theme=get_rich_theme(),
        color_system=None,
        width=200,
    )
    log = MaintenanceLogger(
        config.log_path,
        console=console,
        clock=lambda: datetime(2026, 10, 16, 9, 30, 0, tzinfo=UTC),
    )
    MaintenancePipeline(
        config, log, system.runner, fetch=_fetch, privilege_check=_allow
    ).run()


class TestMaintenanceRun:
    """End-to-end runs of the maintenance pipeline."""

    def test_folder_contents_cleared(
        self, config: MaintenanceConfig, home: Path, log_path: Path
    ) -> None:
        """Both files go, the folder stays, and one success line is logged."""
        system = FakeSystem(apt=set(), flatpaks=set())

        _run(config, system)

        downloads = home / "Downloads"
        assert downloads.is_dir()
        assert list(downloads.iterdir()) == []
        messages = _messages(log_path)
        assert messages.count(f"  [OK] Cleared contents of {downloads}") == 1
        assert f"  [OK] Cleared contents of {home / 'Pictures'}" in messages

    def test_bleachbit_installed_when_missing(
        self, config: MaintenanceConfig, log_path: Path
    ) -> None:
        """A missing BleachBit is installed, configured and run, in that order."""
        system = FakeSystem(apt=set(), flatpaks=set(), bleachbit=False)

        _run(config, system)

        messages = _messages(log_path)
        start = messages.index("Step 5: Setting up BleachBit...")
        end = messages.index("Step 6: Updating System Packages (APT)...")
        assert messages[start + 1 : end] == [
            "  BleachBit not found. Installing...",
            "  [OK] BleachBit installed.",
            "  Downloading config from GitHub...",
            "  [OK] Config applied.",
            "  [OK] BleachBit cycle complete.",
        ]
        assert system.runner.called(["apt-get", "install", "-y", "bleachbit"])
        assert system.runner.called(["bleachbit", "--clean", "--preset"])
        preset = config.cleanup_config_dir / "bleachbit.ini"
        assert preset.read_text() == "[bleachbit]\n"

    def test_second_run_is_idempotent(self, config: MaintenanceConfig, log_path: Path) -> None:
        """Running twice removes things once and only skips the second time."""
        system = FakeSystem(
            apt={"hexchat", "firefox"},
            flatpaks={"edu.mit.Scratch", "org.mozilla.firefox"},
        )

        _run(config, system)
        first_calls = list(system.runner.calls)
        log_path.unlink()
        _run(config, system)
        second_calls = system.runner.calls[len(first_calls) :]

        assert system.apt == {"firefox"}
        assert system.flatpaks == {"org.mozilla.firefox"}
        assert ["apt-get", "purge", "-y", "hexchat"] in first_calls
        assert ["flatpak", "uninstall", "edu.mit.Scratch", "-y"] in first_calls
        assert [c for c in second_calls if c[:2] == ["apt-get", "purge"]] == []
        scratch = ["flatpak", "uninstall", "edu.mit.Scratch"]
        assert [c for c in second_calls if c[:3] == scratch] == []

        messages = _messages(log_path)
        assert "  [SKIP] hexchat not installed." in messages
        assert "  [SKIP] gnome-mines not installed." in messages
        assert "  [SKIP] edu.mit.Scratch not found." in messages
        assert "  [SKIP] org.kde.gcompris not found." in messages
        assert not [m for m in messages if m.startswith("  [ERR]")]

    def test_upgrade_runs_noninteractive(self, config: MaintenanceConfig) -> None:
        """Commands from the update stage on carry DEBIAN_FRONTEND=noninteractive."""
        system = FakeSystem(apt=set(), flatpaks=set())

        _run(config, system)

        runner = system.runner
        upgrade_index = runner.calls.index(["apt-get", "upgrade", "-y"])
        assert runner.envs[upgrade_index].get("DEBIAN_FRONTEND") == "noninteractive"
        autoremove_index = runner.calls.index(["apt-get", "autoremove", "--purge", "-y"])
        assert runner.envs[autoremove_index].get("DEBIAN_FRONTEND") == "noninteractive"
