"""Exception hierarchy for configuration-level failures.

Violations are values (:class:`~gochk.domain.types.CheckResult`), never
exceptions. Only problems that make a run meaningless raise.
"""

from __future__ import annotations


class GochkError(Exception):
    """Base class for all gochk errors."""


class ConfigError(GochkError):
    """Invalid configuration detected before traversal begins."""

    code = "INVALID_CONFIG"


class TargetNotFoundError(ConfigError):
    """The configured target path does not exist."""

    code = "TARGET_NOT_FOUND"


class LayerError(GochkError):
    """A layer name or rank that the configured order does not define."""

    code = "UNKNOWN_LAYER"
