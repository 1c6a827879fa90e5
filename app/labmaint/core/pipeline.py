"""Maintenance pipeline orchestration.

Runs the stages in a fixed order. Apart from the root check, nothing
stops the run: every stage executes even if an earlier one failed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from labmaint.core import stages
from labmaint.core.bleachbit import BleachBitSetup, Fetcher
from labmaint.core.disk import DiskUsageReporter
from labmaint.core.logger import LogStyle, MaintenanceLogger
from labmaint.core.privilege import require_root
from labmaint.filesystem.purger import FolderPurger
from labmaint.models.report import PipelineReport, StageReport
from labmaint.operators.apt import AptOperator
from labmaint.operators.flatpak import FlatpakOperator
from labmaint.operators.snap import SnapOperator
from labmaint.scanners.apt import AptScanner
from labmaint.scanners.flatpak import FlatpakScanner
from labmaint.utils.net import download_file

if TYPE_CHECKING:
    from labmaint.core.config import MaintenanceConfig
    from labmaint.utils.shell import CommandRunner

logger = logging.getLogger(__name__)


class MaintenancePipeline:
    """Runs one complete maintenance pass over a lab machine.

    All collaborators are injected so the pipeline can run against a
    scripted runner and a temporary directory in tests.

    Example:
        >>> config = get_default_config()
        >>> log = MaintenanceLogger(config.log_path)
        >>> report = MaintenancePipeline(config, log, CommandRunner()).run()
    """

    def __init__(
        self,
        config: MaintenanceConfig,
        log: MaintenanceLogger,
        runner: CommandRunner,
        *,
        fetch: Fetcher = download_file,
        privilege_check: Callable[[], None] = require_root,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Lists and locations for this run.
            log: Maintenance logger shared by all stages.
            runner: Command runner shared by all stages.
            fetch: Download function for the BleachBit preset.
            privilege_check: Raises PrivilegeError when not root.
        """
        self._config = config
        self._log = log
        self._runner = runner
        self._privilege_check = privilege_check

        self._disk = DiskUsageReporter(runner)
        self._purger = FolderPurger()
        self._apt = AptOperator(runner)
        self._apt_scanner = AptScanner(runner)
        self._flatpak = FlatpakOperator(runner)
        self._flatpak_scanner = FlatpakScanner(runner)
        self._snap = SnapOperator(runner)
        self._bleachbit = BleachBitSetup(
            runner,
            self._apt,
            log,
            config_url=config.cleanup_config_url,
            config_dir=config.cleanup_config_dir,
            fetch=fetch,
        )

    def run(self) -> PipelineReport:
        """Run every stage in order.

        Returns:
            PipelineReport with disk snapshots and per-stage outcomes.

        Raises:
            PrivilegeError: If not running as root. Raised before any
                stage runs or anything is logged.
        """
        self._privilege_check()

        report = PipelineReport()
        log = self._log

        log.rule()
        log.record("STARTING MAINTENANCE TASK", LogStyle.HEADER)
        log.rule()

        report.start_usage = self._disk.snapshot()
        log.record(
            f"Initial Disk Usage: {report.start_usage.percent_used} "
            f"({report.start_usage.available} Available)",
            LogStyle.WARNING,
        )

        log.record("Step 2: Clearing Student Folders...", LogStyle.HEADER)
        report.stages.append(
            stages.purge_folders(log, self._purger, self._config.effective_folders)
        )

        log.record("Step 3: Removing Flatpaks...", LogStyle.HEADER)
        report.stages.append(
            stages.remove_flatpaks(
                log, self._flatpak_scanner, self._flatpak, self._config.flatpak_apps
            )
        )

        log.record("Step 4: Removing Standard Packages (APT)...", LogStyle.HEADER)
        report.stages.append(
            stages.purge_apt_packages(
                log, self._apt_scanner, self._apt, self._config.apt_packages
            )
        )

        log.record("Step 5: Setting up BleachBit...", LogStyle.HEADER)
        bleachbit_report = StageReport(name="bleachbit")
        self._bleachbit.run(bleachbit_report)
        report.stages.append(bleachbit_report)

        log.record("Step 6: Updating System Packages (APT)...", LogStyle.HEADER)
        report.stages.append(stages.update_system(log, self._runner, self._apt))

        log.record("Step 7: Refreshing Snaps and Flatpaks...", LogStyle.HEADER)
        report.stages.append(stages.refresh_snaps_and_flatpaks(log, self._snap, self._flatpak))

        log.record("Step 8: Final Cache Cleanup...", LogStyle.HEADER)
        report.stages.append(stages.clean_caches(log, self._apt))

        log.rule()
        report.end_usage = self._disk.snapshot()
        log.record("MAINTENANCE COMPLETE", LogStyle.SUCCESS)
        log.record(f"Started at: {report.start_usage}", LogStyle.WARNING)
        log.record(f"Ended at:   {report.end_usage}", LogStyle.SUCCESS)
        log.rule()

        if report.failures:
            logger.info("Run finished with %d failure(s)", len(report.failures))
        return report
