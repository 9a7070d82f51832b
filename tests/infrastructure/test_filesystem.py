"""Tests for tree traversal, ignore signals, and package file lookup."""

from __future__ import annotations

from pathlib import Path

from gochk.domain.imports import read_imports
from gochk.infrastructure.filesystem import (
    IgnoreSignal,
    match_ignore,
    open_source,
    package_files,
    walk_go_files,
)
from tests.gotree import write_go

IGNORE = ("test", "_test")


class TestMatchIgnore:
    def test_ignored_directory_skips_subtree(self) -> None:
        assert match_ignore(IGNORE, "../../test/data/test", is_dir=True) is IgnoreSignal.SKIP_DIR

    def test_test_suffix_file_is_skipped(self) -> None:
        signal = match_ignore(IGNORE, "../../test/data/_test.go", is_dir=False)
        assert signal is IgnoreSignal.SKIP_FILE
        assert match_ignore(IGNORE, "repo_test.go", is_dir=False) is IgnoreSignal.SKIP_FILE

    def test_regular_file_not_matched(self) -> None:
        assert match_ignore(IGNORE, "./print.go", is_dir=False) is IgnoreSignal.NONE

    def test_suffix_rule_only_for_underscore_entries(self) -> None:
        assert match_ignore(("test",), "latest.go", is_dir=False) is IgnoreSignal.NONE
        assert match_ignore(("test",), "test.go", is_dir=False) is IgnoreSignal.NONE
        assert match_ignore(("test.go",), "test.go", is_dir=False) is IgnoreSignal.SKIP_FILE

    def test_directory_named_like_suffix_entry(self) -> None:
        assert match_ignore(("_test",), "integration_test", is_dir=True) is IgnoreSignal.NONE

    def test_glob_entry(self) -> None:
        assert match_ignore(("*_mock.go",), "repo_mock.go", is_dir=False) is IgnoreSignal.SKIP_FILE
        assert match_ignore(("gen*",), "generated", is_dir=True) is IgnoreSignal.SKIP_DIR

    def test_trailing_slash_entry(self) -> None:
        assert match_ignore(("vendor/",), "vendor", is_dir=True) is IgnoreSignal.SKIP_DIR

    def test_empty_ignore(self) -> None:
        assert match_ignore((), "test", is_dir=True) is IgnoreSignal.NONE


class TestWalkGoFiles:
    def test_sorted_and_filtered(self, tmp_path: Path) -> None:
        write_go(tmp_path, "b/z.go")
        write_go(tmp_path, "b/a.go")
        write_go(tmp_path, "a/x.go")
        write_go(tmp_path, "a/x_test.go")
        write_go(tmp_path, "test/ignored.go")
        (tmp_path / "a" / "notes.txt").write_text("x")

        found = [p.relative_to(tmp_path).as_posix() for p in walk_go_files(tmp_path, IGNORE)]
        assert found == ["a/x.go", "b/a.go", "b/z.go"]

    def test_single_file_target(self, tmp_path: Path) -> None:
        path = write_go(tmp_path, "domain/user.go")
        assert list(walk_go_files(path, IGNORE)) == [path]

    def test_single_non_go_file(self, tmp_path: Path) -> None:
        path = tmp_path / "violatefile.txt"
        path.write_text('import "x"')
        assert list(walk_go_files(path, IGNORE)) == []

    def test_ignored_single_file(self, tmp_path: Path) -> None:
        path = write_go(tmp_path, "domain/user_test.go")
        assert list(walk_go_files(path, IGNORE)) == []

    def test_ignored_target_directory(self, tmp_path: Path) -> None:
        write_go(tmp_path, "test/x.go")
        assert list(walk_go_files(tmp_path / "test", IGNORE)) == []

    def test_test_files_skipped_without_ignore_entry(self, tmp_path: Path) -> None:
        write_go(tmp_path, "domain/user.go")
        test_file = write_go(tmp_path, "domain/user_test.go")
        found = [p.name for p in walk_go_files(tmp_path, ("mock",))]
        assert found == ["user.go"]
        assert list(walk_go_files(test_file, ())) == []

    def test_file_named_like_ignored_directory(self, tmp_path: Path) -> None:
        write_go(tmp_path, "domain/test.go")
        write_go(tmp_path, "test/x.go")
        found = [p.relative_to(tmp_path).as_posix() for p in walk_go_files(tmp_path, IGNORE)]
        assert found == ["domain/test.go"]

    def test_deterministic(self, tmp_path: Path) -> None:
        for name in ("c", "a", "b"):
            write_go(tmp_path, f"{name}/{name}.go")
        assert list(walk_go_files(tmp_path)) == list(walk_go_files(tmp_path))


class TestPackageFiles:
    def test_excludes_tests_and_subdirs(self, tmp_path: Path) -> None:
        write_go(tmp_path, "domain/b.go")
        write_go(tmp_path, "domain/a.go")
        write_go(tmp_path, "domain/a_test.go")
        write_go(tmp_path, "domain/inner/c.go")
        assert [p.name for p in package_files(tmp_path / "domain")] == ["a.go", "b.go"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert package_files(tmp_path / "nope") == []


class TestOpenSource:
    def test_undecodable_bytes_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "x.go"
        path.write_bytes(b'package x\nimport "fmt" // \xff\n')
        with open_source(path) as fh:
            assert "import" in fh.read()

    def test_byte_order_mark_dropped(self, tmp_path: Path) -> None:
        path = tmp_path / "x.go"
        path.write_text('package x\nimport "fmt"\n', encoding="utf-8-sig")
        with open_source(path) as fh:
            assert fh.read().startswith("package x")

    def test_byte_order_mark_file_imports(self, tmp_path: Path) -> None:
        path = tmp_path / "x.go"
        path.write_text('package x\nimport "fmt"\n', encoding="utf-8-sig")
        with open_source(path) as fh:
            assert read_imports(fh) == ['"fmt"']
