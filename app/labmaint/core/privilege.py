"""Administrative privilege check."""

import os


class PrivilegeError(Exception):
    """Raised when the process lacks root privileges."""


def is_root() -> bool:
    """Check if the effective user is root."""
    return os.geteuid() == 0


def require_root() -> None:
    """Ensure the process runs as root.

    Raises:
        PrivilegeError: If the effective user ID is not 0.
    """
    if not is_root():
        msg = "Please run as root (use sudo)."
        raise PrivilegeError(msg)
