"""Tests for directory listing."""

import os

import pytest

from jout.exceptions import DirectoryTraversalError
from jout.file_ops import list_directories, list_files


class TestListFiles:
    """Test recursive file listing."""

    def test_lists_all_files_sorted(self, class_tree):
        files = list_files(class_tree)
        assert files == sorted(files)
        assert len(files) == 5
        assert os.path.join(str(class_tree), "readme.txt") in files

    def test_suffix_filter(self, class_tree):
        """Only paths ending with the suffix are kept."""
        files = list_files(class_tree, ".class")
        names = [os.path.basename(f) for f in files]
        assert sorted(names) == sorted(
            ["Main.class", "Widget.class", "Widget$Part.class", "Widget$1.class"]
        )

    def test_suffix_is_case_sensitive(self, tmp_path):
        (tmp_path / "A.CLASS").write_bytes(b"")
        (tmp_path / "B.class").write_bytes(b"")
        assert list_files(tmp_path, ".class") == [os.path.join(str(tmp_path), "B.class")]

    def test_empty_suffix_keeps_everything(self, class_tree):
        assert list_files(class_tree, "") == list_files(class_tree)

    def test_directories_are_not_listed(self, class_tree):
        assert all(os.path.isfile(f) for f in list_files(class_tree))

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(DirectoryTraversalError) as exc_info:
            list_files(tmp_path / "missing")
        assert "missing" in str(exc_info.value.directory)

    def test_file_root_raises(self, tmp_path):
        target = tmp_path / "file.class"
        target.write_bytes(b"")
        with pytest.raises(DirectoryTraversalError):
            list_files(target)

    @pytest.mark.skipif(
        os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permissions are not enforced",
    )
    def test_unreadable_subdirectory_raises(self, tmp_path):
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0)
        try:
            with pytest.raises(DirectoryTraversalError):
                list_files(tmp_path)
        finally:
            locked.chmod(0o755)


class TestListDirectories:
    """Test recursive directory listing."""

    def test_includes_root_and_descendants(self, class_tree):
        root = str(class_tree)
        assert list_directories(class_tree) == sorted(
            [
                root,
                os.path.join(root, "com"),
                os.path.join(root, "com", "acme"),
                os.path.join(root, "empty"),
            ]
        )

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(DirectoryTraversalError):
            list_directories(tmp_path / "missing")
