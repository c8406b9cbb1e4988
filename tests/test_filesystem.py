"""
Tests for filesystem primitives and path helpers
"""

import os

import pytest

from imageupload import DirectoryCreationError, FileSystem
from imageupload.storage.filesystem import directory_portion, join_path, relative_to_root


class TestFileSystem:
    """Test directory checks and creation"""

    def test_make_directory_recursive(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"

        assert FileSystem().make_directory(str(target)) is True
        assert target.is_dir()

    def test_make_existing_directory(self, tmp_path):
        """Existing directory should count as success"""
        assert FileSystem().make_directory(str(tmp_path)) is True

    def test_make_directory_below_file(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x")

        with pytest.raises(DirectoryCreationError) as exc_info:
            FileSystem().make_directory(str(blocker / "sub"))

        assert exc_info.value.path == str(blocker / "sub")

    def test_make_directory_over_file(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x")

        with pytest.raises(DirectoryCreationError):
            FileSystem().make_directory(str(blocker))

    def test_ensure_directory(self, tmp_path):
        fs = FileSystem()
        target = str(tmp_path / "new")

        assert fs.ensure_directory(target) is True
        assert fs.is_directory(target)
        assert fs.is_writable(target)

    def test_is_directory_for_file(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")

        assert FileSystem().is_directory(str(path)) is False


class TestJoinPath:
    """Test "/" joining with empty segments skipped"""

    def test_join(self):
        assert join_path("/srv/uploads/", "2024/05/") == "/srv/uploads/2024/05"

    def test_empty_segments(self):
        assert join_path("/srv/uploads", "", None) == "/srv/uploads"

    def test_inner_segments_trimmed(self):
        assert join_path("/srv/uploads", "/thumb/", "photo.jpg") == "/srv/uploads/thumb/photo.jpg"


class TestDirectoryPortion:
    """Test extraction of the directory part of a sub path"""

    def test_nested(self):
        assert directory_portion("2024/05/photo.jpg") == "2024/05"

    def test_trailing_slash(self):
        assert directory_portion("/avatars/") == "avatars"

    def test_bare_name(self):
        assert directory_portion("avatars") == ""

    def test_empty(self):
        assert directory_portion(None) == ""
        assert directory_portion("") == ""

    def test_parent_segments_dropped(self):
        """".." segments should never climb out of the base directory"""
        assert directory_portion("../../../escaped/x") == "escaped"
        assert directory_portion("2024/../05/./x") == "2024/05"
        assert directory_portion("..\\..\\x") == ""


class TestRelativeToRoot:
    """Test public-root relative paths"""

    def test_inside_root(self, tmp_path):
        path = tmp_path / "public" / "uploads" / "images"

        assert relative_to_root(str(path), str(tmp_path / "public")) == "uploads/images"

    def test_root_itself(self, tmp_path):
        assert relative_to_root(str(tmp_path), str(tmp_path)) == ""

    def test_outside_root(self, tmp_path):
        """Paths outside the root should not gain ".." segments"""
        outside = tmp_path / "elsewhere" / "images"
        relative = relative_to_root(str(outside), str(tmp_path / "public"))

        assert ".." not in relative.split("/")
        assert not relative.startswith("/")
        assert relative.endswith("elsewhere/images")

    def test_dot_segments_normalized(self, tmp_path):
        root = tmp_path / "public"
        path = os.path.join(str(root), "uploads", "..", "uploads", "images")

        assert relative_to_root(path, str(root)) == "uploads/images"

    def test_empty(self):
        assert relative_to_root(None, "public") == ""
