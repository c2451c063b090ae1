"""Tests for the file-system resolver."""

from __future__ import annotations

from pathlib import Path

import pytest

from graphcool.resolver import FileSystemResolver


class TestFileSystemResolver:
    def test_project_files_lists_only_graphcool_files(self, tmp_path: Path) -> None:
        (tmp_path / "project.graphcool").write_text("", encoding="utf-8")
        (tmp_path / "schema.graphql").write_text("", encoding="utf-8")
        (tmp_path / "dir.graphcool").mkdir()

        files = FileSystemResolver(tmp_path).project_files(".")

        assert files == ["./project.graphcool"]

    def test_project_files_missing_directory(self, tmp_path: Path) -> None:
        assert FileSystemResolver(tmp_path).project_files("nope") == []

    def test_read_directory(self, tmp_path: Path) -> None:
        (tmp_path / "a.graphcool").write_text("", encoding="utf-8")
        (tmp_path / "b.txt").write_text("", encoding="utf-8")
        assert sorted(FileSystemResolver(tmp_path).read_directory(".")) == ["a.graphcool", "b.txt"]

    def test_read_directory_skips_subdirectories(self, tmp_path: Path) -> None:
        (tmp_path / "dir.graphcool").mkdir()
        (tmp_path / "a.graphcool").write_text("", encoding="utf-8")
        assert FileSystemResolver(tmp_path).read_directory(".") == ["a.graphcool"]

    def test_read_relative_to_root(self, tmp_path: Path) -> None:
        (tmp_path / "schema.graphql").write_text("type A { id: ID! }", encoding="utf-8")
        assert FileSystemResolver(tmp_path).read("./schema.graphql") == "type A { id: ID! }"

    def test_read_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FileSystemResolver(tmp_path).read("missing.graphql")

    def test_write_creates_parents_and_leaves_no_tmp(self, tmp_path: Path) -> None:
        resolver = FileSystemResolver(tmp_path)
        resolver.write("nested/dir/project.graphcool", "contents")

        target = tmp_path / "nested" / "dir" / "project.graphcool"
        assert target.read_text(encoding="utf-8") == "contents"
        assert list(target.parent.glob("*.tmp")) == []

    def test_write_overwrites(self, tmp_path: Path) -> None:
        resolver = FileSystemResolver(tmp_path)
        resolver.write("project.graphcool", "old")
        resolver.write("project.graphcool", "new")
        assert resolver.read("project.graphcool") == "new"

    def test_absolute_paths_bypass_root(self, tmp_path: Path) -> None:
        other = tmp_path / "other"
        other.mkdir()
        (other / "schema.graphql").write_text("x", encoding="utf-8")
        resolver = FileSystemResolver(tmp_path / "root")
        assert resolver.read(str(other / "schema.graphql")) == "x"
