"""Tests for Dependency and CheckResult value types."""

from __future__ import annotations

import dataclasses

import pytest

from gochk.domain.types import CheckResult, Color, Dependency, ResultType


class TestDependency:
    def test_direct_edge(self) -> None:
        dep = Dependency("a/domain/x.go", 3, '"m/adapter"', 1, via="a/domain/x.go")
        assert dep.is_direct
        assert dep.to_dict()["via"] == "a/domain/x.go"

    def test_transitive_edge(self) -> None:
        dep = Dependency("a/domain/x.go", 3, '"m/adapter"', 1, via="a/util/y.go")
        assert not dep.is_direct

    def test_missing_via_defaults_to_file(self) -> None:
        assert Dependency("f.go", 0, '"m/p"', None).to_dict()["via"] == "f.go"

    def test_frozen(self) -> None:
        dep = Dependency("f.go", 0, '"m/p"', None)
        with pytest.raises(dataclasses.FrozenInstanceError):
            dep.file_layer = 1  # type: ignore[misc]


class TestCheckResult:
    @pytest.mark.parametrize(
        ("result_type", "color"),
        [
            (ResultType.VIOLATED, Color.RED),
            (ResultType.VERIFIED, Color.GREEN),
            (ResultType.IGNORED, Color.YELLOW),
        ],
    )
    def test_of_pairs_color(self, result_type: ResultType, color: Color) -> None:
        assert CheckResult.of(result_type, "msg").color is color

    def test_to_dict(self) -> None:
        dep = Dependency("f.go", 3, '"m/adapter"', 1, via="f.go")
        result = CheckResult.of(ResultType.VIOLATED, "bad", file_path="f.go", dependencies=(dep,))
        data = result.to_dict()
        assert data["result_type"] == "violated"
        assert data["color"] == "red"
        assert data["file_path"] == "f.go"
        assert data["dependencies"][0]["import_layer"] == 1
