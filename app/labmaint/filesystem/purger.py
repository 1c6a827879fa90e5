"""Folder content purge operator.

Empties a directory while keeping the directory entry itself, so lab
users always find their Downloads and Pictures folders in place.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from labmaint.filesystem.protected import is_blank_path, is_protected_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PurgeResult:
    """Result of purging a single folder.

    Attributes:
        path: Folder that was operated on.
        found: Whether the folder existed as a directory.
        removed: Number of top-level entries deleted.
        errors: One message per entry that could not be deleted.
    """

    path: str
    found: bool
    removed: int = 0
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        """True when the folder existed and every entry was deleted."""
        return self.found and not self.errors


class FolderPurger:
    """Deletes everything inside a folder, keeping the folder.

    Hidden entries are deleted too. Symlinks inside the folder are
    unlinked, never followed.
    """

    def purge(self, path: str | Path | None) -> PurgeResult:
        """Delete all contents of a directory.

        Args:
            path: Absolute directory path.

        Returns:
            PurgeResult; ``found`` is False if the directory does not exist.

        Raises:
            ValueError: If the path is empty/unset or a protected directory.
                Raised before the filesystem is touched.
        """
        if is_blank_path(path):
            msg = "Refusing to purge an empty path"
            raise ValueError(msg)

        path_str = str(path)
        if is_protected_path(path_str):
            msg = f"Refusing to purge protected directory: {path_str}"
            raise ValueError(msg)

        target = Path(path_str)
        if not target.is_dir():
            logger.debug("Not a directory, nothing to purge: %s", path_str)
            return PurgeResult(path=path_str, found=False)

        removed = 0
        errors: list[str] = []
        for child in sorted(target.iterdir()):
            try:
                self._delete_entry(child)
                removed += 1
            except OSError as e:
                logger.warning("Failed to delete %s: %s", child, e)
                errors.append(f"{child}: {e}")

        logger.info("Purged %d entries from %s", removed, path_str)
        return PurgeResult(path=path_str, found=True, removed=removed, errors=tuple(errors))

    @staticmethod
    def _delete_entry(entry: Path) -> None:
        """Delete one file, symlink or directory tree.

        Args:
            entry: Path to delete.

        Raises:
            OSError: If deletion fails.
        """
        # Directories (but not symlinks to directories)
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
