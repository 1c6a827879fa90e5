"""APT package operator implementation.

Executes package installation, purging, upgrades and cache cleanup
using apt-get. The maintenance run is already root, so no sudo is used.
"""

from labmaint.models.action import ActionResult, ActionType
from labmaint.models.package import PackageSource
from labmaint.operators.base import ALL_PACKAGES, Operator


class AptOperator(Operator):
    """Operator for APT/dpkg packages.

    Every mutating command passes ``-y`` so it never stops for a prompt.
    """

    @property
    def source(self) -> PackageSource:
        """Return APT as the package source."""
        return PackageSource.APT

    def is_available(self) -> bool:
        """Check if apt-get is available."""
        return self._runner.exists("apt-get")

    def install(self, package: str) -> ActionResult:
        """Install a package with apt-get install."""
        return self._execute(ActionType.INSTALL, package, ["apt-get", "install", "-y", package])

    def purge(self, package: str) -> ActionResult:
        """Remove a package and its configuration files with apt-get purge."""
        return self._execute(ActionType.PURGE, package, ["apt-get", "purge", "-y", package])

    def update_index(self) -> ActionResult:
        """Refresh the package index (apt-get update)."""
        return self._execute(ActionType.UPDATE, ALL_PACKAGES, ["apt-get", "update"])

    def upgrade(self) -> ActionResult:
        """Upgrade all installed packages (apt-get upgrade)."""
        return self._execute(ActionType.UPDATE, ALL_PACKAGES, ["apt-get", "upgrade", "-y"])

    def clean(self) -> ActionResult:
        """Clear the local archive of downloaded .deb files."""
        return self._execute(ActionType.CLEAN, ALL_PACKAGES, ["apt-get", "clean"])

    def autoremove(self) -> ActionResult:
        """Purge packages that are no longer required by anything."""
        return self._execute(
            ActionType.PURGE,
            ALL_PACKAGES,
            ["apt-get", "autoremove", "--purge", "-y"],
        )
