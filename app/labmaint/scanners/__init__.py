"""Package scanners for querying installation state.

This module provides abstract and concrete implementations of package
scanners for different package managers (APT, Flatpak).
"""

from labmaint.scanners.apt import AptScanner
from labmaint.scanners.base import Scanner
from labmaint.scanners.flatpak import FlatpakScanner

__all__ = ["Scanner", "AptScanner", "FlatpakScanner"]
