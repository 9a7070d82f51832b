"""CLI invocations reconfigure logging and telemetry; undo that per test."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from gochk.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_cli_state() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    disable_telemetry()
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("gochk").setLevel(logging.NOTSET)
