"""APT package scanner implementation.

Queries the dpkg database for the installation state of a package.
"""

import logging

from labmaint.models.package import PackageSource
from labmaint.scanners.base import Scanner

logger = logging.getLogger(__name__)


class AptScanner(Scanner):
    """Scanner for APT/dpkg packages.

    A package counts as installed only when dpkg reports the ``ii`` state
    (desired=install, status=installed), the same rows ``dpkg -l`` marks
    with ``ii``. Packages that were removed but still have configuration
    files (``rc``) are not installed.
    """

    # Two-letter abbreviation of desired/current state, e.g. "ii " or "rc "
    _STATUS_FORMAT = "${db:Status-Abbrev}"
    _INSTALLED_PREFIX = "ii"

    @property
    def source(self) -> PackageSource:
        """Return APT as the package source."""
        return PackageSource.APT

    def is_available(self) -> bool:
        """Check if dpkg-query is available."""
        return self._runner.exists("dpkg-query")

    def is_installed(self, name: str) -> bool:
        """Check whether an APT package is fully installed.

        Args:
            name: Package name.

        Returns:
            True if dpkg reports the package in state ``ii``.
        """
        result = self._runner.run(["dpkg-query", "-W", f"-f={self._STATUS_FORMAT}", name])
        if not result.success:
            # dpkg-query exits 1 for packages it has never heard of
            logger.debug("dpkg-query found no record of %s", name)
            return False

        return result.stdout.strip().startswith(self._INSTALLED_PREFIX)
