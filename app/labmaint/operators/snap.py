"""Snap package operator implementation.

Refreshes installed snaps using the snap CLI.
"""

from labmaint.models.action import ActionResult, ActionType
from labmaint.models.package import PackageSource
from labmaint.operators.base import ALL_PACKAGES, Operator


class SnapOperator(Operator):
    """Operator for Snap packages."""

    @property
    def source(self) -> PackageSource:
        """Return SNAP as the package source."""
        return PackageSource.SNAP

    def is_available(self) -> bool:
        """Check if snap CLI is available."""
        return self._runner.exists("snap")

    def refresh(self) -> ActionResult:
        """Refresh all installed snaps to their latest revision."""
        return self._execute(ActionType.UPDATE, ALL_PACKAGES, ["snap", "refresh"])
