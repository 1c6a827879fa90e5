"""Package source definitions.

Identifies which package manager an action or query belongs to.
"""

from enum import Enum


class PackageSource(Enum):
    """Enumeration of supported package sources."""

    APT = "apt"
    FLATPAK = "flatpak"
    SNAP = "snap"
