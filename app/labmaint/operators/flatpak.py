"""Flatpak package operator implementation.

Executes application removal and updates using the flatpak CLI.
"""

from labmaint.models.action import ActionResult, ActionType
from labmaint.models.package import PackageSource
from labmaint.operators.base import ALL_PACKAGES, Operator


class FlatpakOperator(Operator):
    """Operator for Flatpak applications.

    Note: Flatpak does not distinguish between remove and purge, so
    uninstalls are reported as REMOVE actions.
    """

    @property
    def source(self) -> PackageSource:
        """Return FLATPAK as the package source."""
        return PackageSource.FLATPAK

    def is_available(self) -> bool:
        """Check if flatpak CLI is available."""
        return self._runner.exists("flatpak")

    def uninstall(self, app_id: str) -> ActionResult:
        """Uninstall a single Flatpak application.

        Args:
            app_id: Application ID to uninstall.

        Returns:
            ActionResult for this application.
        """
        return self._execute(ActionType.REMOVE, app_id, ["flatpak", "uninstall", app_id, "-y"])

    def uninstall_unused(self) -> ActionResult:
        """Remove runtimes and extensions no installed app depends on."""
        return self._execute(
            ActionType.REMOVE,
            ALL_PACKAGES,
            ["flatpak", "uninstall", "--unused", "-y"],
        )

    def update_all(self) -> ActionResult:
        """Update every installed application and runtime."""
        return self._execute(ActionType.UPDATE, ALL_PACKAGES, ["flatpak", "update", "-y"])
