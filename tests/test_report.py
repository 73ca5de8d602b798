"""Tests for serialization through pydantic."""

import json

import pytest
from pydantic import BaseModel, ValidationError
from os_path import OsPath, PathReport


class Entry(BaseModel):
    path: OsPath


class TestPydanticField:
    def test_validates_from_string(self):
        entry = Entry(path="/\\foo//bar/")
        assert entry.path == OsPath("/foo/bar/")

    def test_validates_from_os_path(self, posix):
        entry = Entry(path=posix("/a/b.txt"))
        assert entry.path == posix("/a/b.txt")

    def test_serializes_as_display_string(self):
        entry = Entry(path="/foo/bar/")
        assert entry.model_dump()["path"] == str(OsPath("/foo/bar/"))

    def test_json_round_trip(self):
        entry = Entry(path="/foo/../bar/baz.txt")
        restored = Entry.model_validate_json(entry.model_dump_json())
        assert restored == entry

    def test_rejects_non_path_values(self):
        with pytest.raises(ValidationError):
            Entry(path=123)


class TestPathReport:
    def test_from_path(self, posix):
        report = PathReport.from_path(posix("/foo/bar/baz.txt"))
        assert report.name == "baz.txt"
        assert report.extension == "txt"
        assert report.parent == posix("/foo/bar/")
        assert report.platform == "posix"
        assert report.absolute is True
        assert report.directory is False
        assert report.components == ["foo", "bar", "baz.txt"]
        assert report.exists is None

    def test_root_has_no_name_or_parent(self, posix):
        report = PathReport.from_path(posix("/"))
        assert report.name is None
        assert report.extension is None
        assert report.parent is None
        assert report.directory is True

    def test_to_json(self, windows):
        data = json.loads(PathReport.from_path(windows("C:/foo/bar/")).to_json())
        assert data["path"] == "C:\\foo\\bar\\"
        assert data["native"] == "C:\\foo\\bar"
        assert data["parent"] == "C:\\foo\\"
        assert data["platform"] == "windows"
        assert data["exists"] is None

    def test_check_exists(self, temp_workspace):
        target = temp_workspace / "notes.txt"
        target.write_text("hello")
        assert PathReport.from_path(OsPath(str(target)), check_exists=True).exists is True
        missing = OsPath(str(temp_workspace / "gone.txt"))
        assert PathReport.from_path(missing, check_exists=True).exists is False

    def test_json_round_trip_keeps_platform(self, windows):
        """Serialized paths come back under the conventions they were written with."""
        report = PathReport.from_path(windows("C:\\a\\b.txt"))
        restored = PathReport.model_validate_json(report.to_json())
        assert restored.path == windows("C:\\a\\b.txt")
        assert restored.parent == windows("C:\\a\\")
        assert restored == report

    def test_unknown_platform_is_rejected(self):
        with pytest.raises(ValidationError):
            PathReport.model_validate({
                "path": "/a", "native": "/a", "platform": "beos",
                "absolute": True, "directory": False,
            })
