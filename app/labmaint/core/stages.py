"""Maintenance stages.

Each stage is a plain function that receives its collaborators and the
item lists explicitly, logs every outcome, and returns a StageReport.
Stages never raise for a failed item: a failure is logged and the next
item is processed.
"""

import logging
import os
from collections.abc import Sequence

from labmaint.core.logger import LogStyle, MaintenanceLogger
from labmaint.filesystem.purger import FolderPurger
from labmaint.models.action import ActionResult
from labmaint.models.report import StageReport
from labmaint.operators.apt import AptOperator
from labmaint.operators.flatpak import FlatpakOperator
from labmaint.operators.snap import SnapOperator
from labmaint.scanners.apt import AptScanner
from labmaint.scanners.flatpak import FlatpakScanner
from labmaint.utils.shell import CommandRunner

logger = logging.getLogger(__name__)


def _log_output(log: MaintenanceLogger, result: ActionResult) -> ActionResult:
    """Copy a command's raw output into the audit log and pass the result on."""
    log.append_output(result.output)
    return result


def purge_folders(
    log: MaintenanceLogger,
    purger: FolderPurger,
    folders: Sequence[str],
) -> StageReport:
    """Empty every folder in the deny-list, keeping the folders themselves.

    Args:
        log: Maintenance logger.
        purger: Folder purge operator.
        folders: Absolute folder paths.

    Returns:
        StageReport; missing folders are counted as skipped.
    """
    report = StageReport(name="folders")

    for folder in folders:
        try:
            result = purger.purge(folder)
        except ValueError as e:
            log.record(f"  [ERR] {e}", LogStyle.ERROR)
            report.failed.append(str(folder))
            continue

        if not result.found:
            log.record(f"  [WARN] Directory not found: {folder}", LogStyle.WARNING)
            report.skipped.append(folder)
            continue

        for error in result.errors:
            log.record(f"  [ERR] Could not delete {error}", LogStyle.ERROR)

        if result.success:
            log.record(f"  [OK] Cleared contents of {folder}", LogStyle.SUCCESS)
            report.succeeded.append(folder)
        else:
            report.failed.append(folder)

    return report


def remove_flatpaks(
    log: MaintenanceLogger,
    scanner: FlatpakScanner,
    operator: FlatpakOperator,
    apps: Sequence[str],
) -> StageReport:
    """Uninstall listed Flatpak apps, then prune unused runtimes.

    Args:
        log: Maintenance logger.
        scanner: Flatpak scanner used for the installed check.
        operator: Flatpak operator used for uninstalls.
        apps: Application IDs to remove.

    Returns:
        StageReport for the app list. The runtime prune is not counted.
    """
    report = StageReport(name="flatpak")
    available = scanner.is_available()
    if not available:
        logger.info("flatpak is not installed; skipping Flatpak removal")

    for app in apps:
        if not available or not scanner.is_installed(app):
            log.record(f"  [SKIP] {app} not found.")
            report.skipped.append(app)
            continue

        log.record(f"Removing {app}...")
        result = _log_output(log, operator.uninstall(app))
        if result.success:
            log.record(f"  [OK] {app} removed.", LogStyle.SUCCESS)
            report.succeeded.append(app)
        else:
            log.record(f"  [ERR] Failed to remove {app}.", LogStyle.ERROR)
            report.failed.append(app)

    if available:
        log.record("Cleaning unused Flatpak runtimes...")
        prune = _log_output(log, operator.uninstall_unused())
        if prune.failed:
            logger.warning("flatpak uninstall --unused exited with status %d", prune.returncode)

    return report


def purge_apt_packages(
    log: MaintenanceLogger,
    scanner: AptScanner,
    operator: AptOperator,
    packages: Sequence[str],
) -> StageReport:
    """Purge listed APT packages that are installed.

    Args:
        log: Maintenance logger.
        scanner: APT scanner used for the installed check.
        operator: APT operator used for purges.
        packages: Package names to purge.

    Returns:
        StageReport for the package list.
    """
    report = StageReport(name="apt")

    for package in packages:
        if not scanner.is_installed(package):
            log.record(f"  [SKIP] {package} not installed.")
            report.skipped.append(package)
            continue

        log.record(f"Purging {package}...")
        result = _log_output(log, operator.purge(package))
        if result.success:
            log.record(f"  [OK] {package} purged.", LogStyle.SUCCESS)
            report.succeeded.append(package)
        else:
            log.record(f"  [ERR] Failed to purge {package}.", LogStyle.ERROR)
            report.failed.append(package)

    return report


def update_system(
    log: MaintenanceLogger,
    runner: CommandRunner,
    operator: AptOperator,
) -> StageReport:
    """Switch to non-interactive mode, refresh the index and upgrade.

    Only the upgrade's exit status decides the logged outcome; a failed
    index refresh is not reported on its own.

    Args:
        log: Maintenance logger.
        runner: Command runner; receives DEBIAN_FRONTEND for all later commands.
        operator: APT operator.

    Returns:
        StageReport with a single "upgrade" entry.
    """
    report = StageReport(name="upgrade")

    # Applies to every command for the rest of the run
    runner.set_env("DEBIAN_FRONTEND", "noninteractive")
    os.environ["DEBIAN_FRONTEND"] = "noninteractive"

    update = _log_output(log, operator.update_index())
    if update.failed:
        logger.warning("apt-get update exited with status %d", update.returncode)

    upgrade = _log_output(log, operator.upgrade())
    if upgrade.success:
        log.record("  [OK] System (APT) Upgraded successfully.", LogStyle.SUCCESS)
        report.succeeded.append("upgrade")
    else:
        log.record("  [ERR] Errors occurred during APT upgrade.", LogStyle.ERROR)
        report.failed.append("upgrade")

    return report


def refresh_snaps_and_flatpaks(
    log: MaintenanceLogger,
    snap: SnapOperator,
    flatpak: FlatpakOperator,
) -> StageReport:
    """Update all snaps and Flatpaks where those tools exist.

    Success is logged whatever the exit status; nonzero statuses are
    only reported to the diagnostics log. Missing tools are skipped
    without a log line.

    Args:
        log: Maintenance logger.
        snap: Snap operator.
        flatpak: Flatpak operator.

    Returns:
        StageReport naming the tools that were refreshed.
    """
    report = StageReport(name="refresh")

    if snap.is_available():
        log.record("Updating Snaps...")
        result = _log_output(log, snap.refresh())
        if result.failed:
            logger.warning("snap refresh exited with status %d", result.returncode)
        log.record("  [OK] Snaps refreshed.", LogStyle.SUCCESS)
        report.succeeded.append("snap")

    if flatpak.is_available():
        log.record("Updating Flatpaks...")
        result = _log_output(log, flatpak.update_all())
        if result.failed:
            logger.warning("flatpak update exited with status %d", result.returncode)
        log.record("  [OK] Flatpaks updated.", LogStyle.SUCCESS)
        report.succeeded.append("flatpak")

    return report


def clean_caches(log: MaintenanceLogger, operator: AptOperator) -> StageReport:
    """Clear the APT download cache and purge orphaned packages.

    Args:
        log: Maintenance logger.
        operator: APT operator.

    Returns:
        StageReport with a single "cache" entry.
    """
    report = StageReport(name="cache")

    for step in (operator.clean, operator.autoremove):
        result = _log_output(log, step())
        if result.failed:
            logger.warning(
                "%s exited with status %d",
                result.action.action_type.value,
                result.returncode,
            )

    log.record("  [OK] Cache cleaned.", LogStyle.SUCCESS)
    report.succeeded.append("cache")
    return report
