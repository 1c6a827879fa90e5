"""Unit tests for FolderPurger."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from labmaint.filesystem.purger import FolderPurger, PurgeResult


@pytest.fixture
def purger() -> FolderPurger:
    """Create a FolderPurger."""
    return FolderPurger()


@pytest.fixture
def downloads(tmp_path: Path) -> Path:
    """A Downloads folder with files, a hidden file and a subtree."""
    folder = tmp_path / "Downloads"
    folder.mkdir()
    (folder / "homework.pdf").write_text("pdf")
    (folder / ".hidden").write_text("secret")
    nested = folder / "game" / "levels"
    nested.mkdir(parents=True)
    (nested / "1.dat").write_text("x")
    return folder


class TestPurgeResult:
    """Tests for PurgeResult."""

    def test_success_requires_found(self) -> None:
        """A missing folder is never a success."""
        assert PurgeResult(path="/x", found=False).success is False

    def test_success_without_errors(self) -> None:
        """A found folder without errors is a success."""
        assert PurgeResult(path="/x", found=True, removed=3).success is True

    def test_errors_mean_failure(self) -> None:
        """Any per-entry error marks the purge as failed."""
        result = PurgeResult(path="/x", found=True, removed=1, errors=("/x/a: denied",))
        assert result.success is False


class TestFolderPurger:
    """Tests for FolderPurger.purge."""

    def test_empties_folder_but_keeps_it(self, purger: FolderPurger, downloads: Path) -> None:
        """All entries go, hidden ones included; the folder stays."""
        result = purger.purge(str(downloads))

        assert result.success is True
        assert result.found is True
        assert result.removed == 3
        assert downloads.is_dir()
        assert list(downloads.iterdir()) == []

    def test_accepts_path_objects(self, purger: FolderPurger, downloads: Path) -> None:
        """Path arguments work like strings."""
        result = purger.purge(downloads)

        assert result.path == str(downloads)
        assert result.success is True

    def test_empty_folder(self, purger: FolderPurger, tmp_path: Path) -> None:
        """An already empty folder is a success with nothing removed."""
        folder = tmp_path / "Pictures"
        folder.mkdir()

        result = purger.purge(str(folder))

        assert result.success is True
        assert result.removed == 0

    def test_missing_folder(self, purger: FolderPurger, tmp_path: Path) -> None:
        """A folder that does not exist is reported as not found."""
        result = purger.purge(str(tmp_path / "Pictures"))

        assert result.found is False
        assert result.success is False

    def test_file_instead_of_folder(self, purger: FolderPurger, tmp_path: Path) -> None:
        """A regular file is not a folder and is left alone."""
        target = tmp_path / "Downloads"
        target.write_text("not a dir")

        result = purger.purge(str(target))

        assert result.found is False
        assert target.read_text() == "not a dir"

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank_path_refused(self, purger: FolderPurger, value: str | None) -> None:
        """An unset path is refused instead of purging the working directory."""
        with patch("labmaint.filesystem.purger.Path.iterdir") as iterdir:
            with pytest.raises(ValueError, match="empty path"):
                purger.purge(value)
            iterdir.assert_not_called()

    @pytest.mark.parametrize("value", ["/", "/home", "//", "/home/copesal/.."])
    def test_protected_path_refused(self, purger: FolderPurger, value: str) -> None:
        """System directories are refused before anything is touched."""
        with patch("labmaint.filesystem.purger.Path.iterdir") as iterdir:
            with pytest.raises(ValueError, match="protected directory"):
                purger.purge(value)
            iterdir.assert_not_called()

    def test_symlink_not_followed(self, purger: FolderPurger, tmp_path: Path) -> None:
        """A symlink to a directory is unlinked; its target survives."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("keep")
        folder = tmp_path / "Downloads"
        folder.mkdir()
        os.symlink(outside, folder / "link")

        result = purger.purge(str(folder))

        assert result.success is True
        assert not (folder / "link").exists()
        assert (outside / "keep.txt").read_text() == "keep"

    def test_entry_errors_collected(self, purger: FolderPurger, downloads: Path) -> None:
        """A failing entry is reported and the remaining entries are still deleted."""
        real_unlink = Path.unlink

        def flaky_unlink(self: Path, missing_ok: bool = False) -> None:
            if self.name == ".hidden":
                raise PermissionError("Operation not permitted")
            real_unlink(self, missing_ok=missing_ok)

        with patch.object(Path, "unlink", flaky_unlink):
            result = purger.purge(str(downloads))

        assert result.found is True
        assert result.success is False
        assert result.removed == 2
        assert len(result.errors) == 1
        assert ".hidden" in result.errors[0]
        assert "Operation not permitted" in result.errors[0]
        assert [p.name for p in downloads.iterdir()] == [".hidden"]
