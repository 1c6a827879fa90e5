"""Filesystem cleanup for lab user folders."""

from labmaint.filesystem.protected import is_blank_path, is_protected_path
from labmaint.filesystem.purger import FolderPurger, PurgeResult

__all__ = ["FolderPurger", "PurgeResult", "is_blank_path", "is_protected_path"]
