"""BleachBit installation, preset download and cleaning run.

The three steps form a chain: BleachBit is installed if missing, the lab's
preset file is downloaded over any existing copy, and the cleaning run
happens only if that download succeeded. BleachBit is never run against
a stale or missing preset.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from labmaint.core.logger import LogStyle, MaintenanceLogger
from labmaint.core.paths import ensure_dir, get_cleanup_config_path
from labmaint.models.report import StageReport
from labmaint.operators.apt import AptOperator
from labmaint.utils.net import download_file
from labmaint.utils.shell import CommandRunner

logger = logging.getLogger(__name__)

BLEACHBIT_BINARY = "bleachbit"
BLEACHBIT_PACKAGE = "bleachbit"

# Fetches a URL into a file, raising OSError on failure
Fetcher = Callable[[str, Path], None]


class BleachBitSetup:
    """Installs, configures and runs BleachBit.

    Attributes:
        config_url: Source of the preset file.
        config_path: Where the preset file is written.
    """

    def __init__(
        self,
        runner: CommandRunner,
        apt: AptOperator,
        log: MaintenanceLogger,
        config_url: str,
        config_dir: Path,
        fetch: Fetcher = download_file,
    ) -> None:
        """Initialize the setup helper.

        Args:
            runner: Command runner for the presence check and cleaning run.
            apt: APT operator used to install BleachBit.
            log: Maintenance logger.
            config_url: Preset download URL.
            config_dir: Directory for the preset file.
            fetch: Download function; replaced in tests.
        """
        self._runner = runner
        self._apt = apt
        self._log = log
        self._fetch = fetch
        self.config_url = config_url
        self.config_dir = config_dir
        self.config_path = get_cleanup_config_path(config_dir)

    def is_installed(self) -> bool:
        """Check if the bleachbit binary is on PATH."""
        return self._runner.exists(BLEACHBIT_BINARY)

    def ensure_installed(self, report: StageReport) -> bool:
        """Install BleachBit from APT unless it is already present.

        Args:
            report: Stage report to update.

        Returns:
            True if BleachBit is present or was installed successfully.
        """
        if self.is_installed():
            self._log.record("  [OK] BleachBit is already installed.", LogStyle.SUCCESS)
            report.skipped.append("install")
            return True

        self._log.record("  BleachBit not found. Installing...", LogStyle.WARNING)
        update = self._apt.update_index()
        self._log.append_output(update.output)
        result = self._apt.install(BLEACHBIT_PACKAGE)
        self._log.append_output(result.output)

        if result.success:
            self._log.record("  [OK] BleachBit installed.", LogStyle.SUCCESS)
            report.succeeded.append("install")
            return True

        self._log.record("  [ERR] Could not install BleachBit.", LogStyle.ERROR)
        report.failed.append("install")
        return False

    def fetch_config(self, report: StageReport) -> bool:
        """Download the preset file, replacing any existing copy.

        Args:
            report: Stage report to update.

        Returns:
            True if the download succeeded.
        """
        try:
            ensure_dir(self.config_dir, "BleachBit config")
        except RuntimeError as e:
            logger.warning("%s", e)
            report.failed.append("config")
            return False

        self._log.record("  Downloading config from GitHub...")
        try:
            self._fetch(self.config_url, self.config_path)
        except OSError as e:
            logger.warning("Failed to download %s: %s", self.config_url, e)
            self._log.append_output(f"Download of {self.config_url} failed: {e}")
            report.failed.append("config")
            return False

        report.succeeded.append("config")
        return True

    def run_clean(self, report: StageReport) -> None:
        """Run BleachBit with its preset, non-interactively.

        Completion is logged regardless of BleachBit's exit status; the
        status itself goes to the diagnostics log.

        Args:
            report: Stage report to update.
        """
        result = self._runner.run([BLEACHBIT_BINARY, "--clean", "--preset"])
        self._log.append_output("".join(part for part in (result.stdout, result.stderr) if part))
        if not result.success:
            logger.warning("bleachbit exited with status %d", result.returncode)
        self._log.record("  [OK] BleachBit cycle complete.", LogStyle.SUCCESS)
        report.succeeded.append("clean")

    def run(self, report: StageReport) -> None:
        """Install if needed, fetch the preset, and clean if the fetch worked.

        Args:
            report: Stage report to update.
        """
        self.ensure_installed(report)

        if not self.fetch_config(report):
            self._log.record(
                "  [ERR] Failed to download config. Skipping cleanup.",
                LogStyle.ERROR,
            )
            return

        self._log.record("  [OK] Config applied.", LogStyle.SUCCESS)
        self.run_clean(report)
