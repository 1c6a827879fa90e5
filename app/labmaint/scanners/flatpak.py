"""Flatpak package scanner implementation.

Lists installed Flatpak applications using the flatpak CLI.
"""

import logging

from labmaint.models.package import PackageSource
from labmaint.scanners.base import Scanner

logger = logging.getLogger(__name__)


class FlatpakScanner(Scanner):
    """Scanner for Flatpak applications.

    Uses `flatpak list --app` to enumerate installed applications. Runtimes
    are not listed; they are pruned separately once unused.
    """

    @property
    def source(self) -> PackageSource:
        """Return FLATPAK as the package source."""
        return PackageSource.FLATPAK

    def is_available(self) -> bool:
        """Check if flatpak CLI is available."""
        return self._runner.exists("flatpak")

    def installed_apps(self) -> set[str]:
        """Get the application IDs of all installed Flatpak apps.

        Returns:
            Set of application IDs. Empty if the listing fails.
        """
        result = self._runner.run(["flatpak", "list", "--app", "--columns=application"])
        if not result.success:
            logger.warning("flatpak list failed: %s", result.stderr.strip() or "unknown error")
            return set()

        return {line.strip() for line in result.stdout.splitlines() if line.strip()}

    def is_installed(self, name: str) -> bool:
        """Check whether a Flatpak application is installed.

        Matches the application ID exactly, so ``org.kde.minuet`` does not
        match ``org.kde.minuet.Locale``.

        Args:
            name: Application ID (e.g., 'org.kde.gcompris').

        Returns:
            True if the application is installed.
        """
        return name in self.installed_apps()
