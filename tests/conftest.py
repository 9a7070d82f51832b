"""Shared pytest fixtures: throwaway Go modules laid out in layers."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.gotree import MODULE, write_go


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GOCHK_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("GOCHK_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def go_module(tmp_path: Path) -> Path:
    """A clean layered module: every layer imports only layers after it.

    ::

        internal/external/server.go   -> adapter
        internal/adapter/repo.go      -> application, domain, database/sql
        internal/application/svc.go   -> domain
        internal/domain/user.go       -> fmt
    """
    (tmp_path / "go.mod").write_text(f"module {MODULE}\n\ngo 1.22\n", encoding="utf-8")
    write_go(tmp_path, "internal/domain/user.go", "fmt")
    write_go(tmp_path, "internal/application/svc.go", f"{MODULE}/internal/domain")
    write_go(
        tmp_path,
        "internal/adapter/repo.go",
        "database/sql",
        f"{MODULE}/internal/application",
        f"{MODULE}/internal/domain",
    )
    write_go(tmp_path, "internal/external/server.go", f"{MODULE}/internal/adapter")
    return tmp_path


@pytest.fixture
def in_module(go_module: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """CWD set to the module root (for CLI tests)."""
    monkeypatch.chdir(go_module)
    yield go_module
