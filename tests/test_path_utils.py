"""Tests for separator normalization helpers."""

import pytest
from os_path.utils import PathUtils
from os_path.utils.path_utils import SENTINEL


class TestPathUtils:
    """Test path text normalization and splitting."""

    def test_normalize_separators(self):
        """Both slash styles become the sentinel."""
        assert PathUtils.normalize_separators("a/b\\c") == f"a{SENTINEL}b{SENTINEL}c"

    def test_normalize_empty_string(self):
        assert PathUtils.normalize_separators("") == ""

    def test_split_impossible_path(self):
        """Runs of mixed separators never produce empty components."""
        result = PathUtils.split_components("/\\///\\foo///bar\\\\baz.txt")
        assert result == ["foo", "bar", "baz.txt"]

    @pytest.mark.parametrize("path", ["", "/", "\\", "//\\\\//"])
    def test_split_without_components(self, path):
        assert PathUtils.split_components(path) == []

    def test_split_keeps_parent_markers(self):
        assert PathUtils.split_components("a/../b") == ["a", "..", "b"]

    def test_split_single_file(self):
        assert PathUtils.split_components("README.md") == ["README.md"]

    def test_starts_with_separator(self):
        assert PathUtils.starts_with_separator("/a")
        assert PathUtils.starts_with_separator("\\a")
        assert not PathUtils.starts_with_separator("a/")

    @pytest.mark.parametrize("path,expected", [
        ("a/", True),
        ("a\\", True),
        ("a/..", True),
        ("..", True),
        ("a", False),
        ("a/.b", False),
        ("", False),
    ])
    def test_ends_as_directory(self, path, expected):
        assert PathUtils.ends_as_directory(path) is expected

    def test_join_components(self):
        assert PathUtils.join_components(["src", "main.py"], "/") == "src/main.py"
        assert PathUtils.join_components(["src", "main.py"], "\\") == "src\\main.py"
        assert PathUtils.join_components([], "/") == ""
