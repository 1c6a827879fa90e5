"""Abstract base class for package scanners.

This module defines the Scanner interface that all package source
scanners must implement.
"""

from abc import ABC, abstractmethod

from labmaint.models.package import PackageSource
from labmaint.utils.shell import CommandRunner


class Scanner(ABC):
    """Abstract base class for all package scanners.

    Scanners answer whether a package is currently installed. They never
    modify the system.

    Example:
        >>> scanner = AptScanner(CommandRunner())
        >>> if scanner.is_available() and scanner.is_installed("thunderbird"):
        ...     print("thunderbird is installed")
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize the scanner.

        Args:
            runner: Command runner used to query the package manager.
        """
        self._runner = runner

    @property
    @abstractmethod
    def source(self) -> PackageSource:
        """Return the package source this scanner handles.

        Returns:
            PackageSource enum value (APT or FLATPAK)
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system.

        Returns:
            True if the package manager can be used, False otherwise.
        """

    @abstractmethod
    def is_installed(self, name: str) -> bool:
        """Check whether a single package is installed.

        Args:
            name: Package name or application ID.

        Returns:
            True if installed. Query failures count as not installed.
        """
