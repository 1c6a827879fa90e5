"""Protected filesystem paths whose contents must never be purged.

A misconfigured folder list must not be able to wipe the system, so
the filesystem root and the top-level system directories are refused
outright.
"""

import os

# Directories whose contents are never purged (matched after normalization)
PROTECTED_DIRECTORIES: frozenset[str] = frozenset(
    {
        "/",
        "/bin",
        "/boot",
        "/dev",
        "/etc",
        "/home",
        "/lib",
        "/lib64",
        "/opt",
        "/proc",
        "/root",
        "/sbin",
        "/srv",
        "/sys",
        "/usr",
        "/var",
    }
)


def is_blank_path(path: object) -> bool:
    """Check if a path is unset or empty.

    ``Path("")`` silently turns into ``"."``, so callers must run this
    check on the raw value before converting it to a Path.

    Args:
        path: Raw path value (str, Path or None).

    Returns:
        True if the value is None or empty after stripping whitespace.
    """
    if path is None:
        return True
    return not str(path).strip()


def is_protected_path(path: str) -> bool:
    """Check if a directory is protected from having its contents purged.

    Args:
        path: Absolute directory path to check.

    Returns:
        True if the normalized path is a protected system directory.
    """
    normalized = os.path.normpath(path)
    # normpath keeps a leading "//" (POSIX allows it to be special)
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized in PROTECTED_DIRECTORIES
