"""Import extraction — a line-oriented state machine over Go source.

Reads only as far as the import section and returns the declared import
paths in order, quotes included (``'"fmt"'``) so they compare directly
with import-path literals.

States::

    PREAMBLE ──import "x"──▶ PREAMBLE          (single import consumed)
    PREAMBLE ──import──────▶ SINGLE_IMPORT     (path on the next line)
    PREAMBLE ──import (────▶ MULTI_IMPORT ──)──▶ PREAMBLE
    any      ──/* ...──────▶ BLOCK_COMMENT ──*/──▶ previous state
    PREAMBLE ──other code──▶ DONE

Malformed input (unterminated block comment, missing ``)``) simply runs
out of lines; whatever was collected so far is returned.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
from typing import TextIO


class ScanState(Enum):
    """States of :class:`ImportScanner`."""

    PREAMBLE = auto()
    BLOCK_COMMENT = auto()
    SINGLE_IMPORT = auto()
    MULTI_IMPORT = auto()
    DONE = auto()


_KEYWORD = "import"
_BOM = "\ufeff"


def strip_comments(line: str, in_block: bool = False) -> tuple[str, bool]:
    """Remove ``//`` and ``/* */`` comments from one line.

    Returns ``(code, in_block)`` where *in_block* tells whether a block
    comment is still open at the end of the line. String literals are
    respected, so ``"a//b"`` is not cut.
    """
    line = line.rstrip("\r\n")
    out: list[str] = []
    quote: str | None = None
    i = 0
    n = len(line)
    while i < n:
        if in_block:
            end = line.find("*/", i)
            if end == -1:
                return "".join(out), True
            in_block = False
            out.append(" ")
            i = end + 2
            continue
        ch = line[i]
        if quote is not None:
            out.append(ch)
            if ch == "\\" and quote == '"' and i + 1 < n:
                out.append(line[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = None
            i += 1
            continue
        if ch in ('"', "`"):
            quote = ch
            out.append(ch)
            i += 1
            continue
        if line.startswith("//", i):
            break
        if line.startswith("/*", i):
            in_block = True
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out), in_block


def extract_import_path(code: str) -> str | None:
    """Return the quoted path literal in *code*, ignoring any alias.

    ``alias "path"`` yields ``'"path"'``; a raw ```path``` literal is
    normalized to double quotes.
    """
    for quote in ('"', "`"):
        start = code.find(quote)
        if start == -1:
            continue
        end = code.find(quote, start + 1)
        if end == -1:
            return None
        return f'"{code[start + 1 : end]}"'
    return None


def is_import_statement(code: str) -> bool:
    """True if *code* starts with the (case-insensitive) ``import`` token."""
    code = code.lstrip()
    if len(code) < len(_KEYWORD) or code[: len(_KEYWORD)].lower() != _KEYWORD:
        return False
    return len(code) == len(_KEYWORD) or code[len(_KEYWORD)] in " \t(\"`"


def _is_package_clause(code: str) -> bool:
    return code == "package" or code.startswith(("package ", "package\t"))


class ImportScanner:
    """Feed lines one at a time; collected paths accumulate in ``imports``."""

    def __init__(self) -> None:
        self.state = ScanState.PREAMBLE
        self.imports: list[str] = []
        self._resume = ScanState.PREAMBLE
        self._started = False

    def feed(self, line: str) -> ScanState:
        """Consume one line and return the resulting state."""
        if self.state is ScanState.DONE:
            return self.state

        if not self._started:
            self._started = True
            line = line.removeprefix(_BOM)

        was_in_block = self.state is ScanState.BLOCK_COMMENT
        code, still_in_block = strip_comments(line, was_in_block)
        if was_in_block:
            self.state = self._resume

        code = code.strip()
        if code:
            self._consume(code)

        if still_in_block and self.state is not ScanState.DONE:
            self._resume = self.state
            self.state = ScanState.BLOCK_COMMENT
        return self.state

    # ------------------------------------------------------------------
    # Per-state handlers
    # ------------------------------------------------------------------

    def _consume(self, code: str) -> None:
        if self.state is ScanState.PREAMBLE:
            self._consume_preamble(code)
        elif self.state is ScanState.SINGLE_IMPORT:
            self._consume_single(code)
        elif self.state is ScanState.MULTI_IMPORT:
            self._consume_multi(code)

    def _consume_preamble(self, code: str) -> None:
        if _is_package_clause(code):
            return
        if not is_import_statement(code):
            self.state = ScanState.DONE
            return
        rest = code[len(_KEYWORD) :].strip()
        self.state = ScanState.SINGLE_IMPORT
        if rest:
            self._consume_single(rest)

    def _consume_single(self, code: str) -> None:
        if code.startswith("("):
            self.state = ScanState.MULTI_IMPORT
            rest = code[1:].strip()
            if rest:
                self._consume_multi(rest)
            return
        path = extract_import_path(code)
        if path is not None:
            self.imports.append(path)
        self.state = ScanState.PREAMBLE

    def _consume_multi(self, code: str) -> None:
        # ``import ("fmt"; "strings")`` puts several specs on one line.
        for spec in code.split(";"):
            spec = spec.strip()
            if not spec:
                continue
            if spec.startswith(")"):
                self.state = ScanState.PREAMBLE
                return
            closing = spec.endswith(")") and extract_import_path(spec[:-1]) is not None
            path = extract_import_path(spec[:-1] if closing else spec)
            if path is not None:
                self.imports.append(path)
            if closing:
                self.state = ScanState.PREAMBLE
                return


def scan_imports(lines: Iterable[str]) -> list[str]:
    """Run an :class:`ImportScanner` over *lines* until it is done."""
    scanner = ImportScanner()
    for line in lines:
        if scanner.feed(line) is ScanState.DONE:
            break
    return scanner.imports


def read_imports(stream: TextIO) -> list[str]:
    """Return the import paths declared in an open Go source stream."""
    return scan_imports(stream)


def skip_to_import_statement(lines: Iterable[str]) -> str | None:
    """Advance past package clause and comments to the first import line.

    Returns that line unchanged, or None when the file has no import.
    """
    in_block = False
    for line in lines:
        code, in_block = strip_comments(line, in_block)
        if is_import_statement(code):
            return line
    return None
