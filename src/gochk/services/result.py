"""ServiceResult and ServiceError — what the CLI consumes from a check run.

INVARIANT: violations travel in ``data``; ``ok=False`` is reserved for
configuration failures that prevented the run.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of :class:`~gochk.services.check.CheckService` operations.

    Attributes:
        ok: False only when the run could not start.
        op: Name of the operation (``"check"``).
        data: Per-file results and counters.
        warnings: Non-fatal issues such as unreadable files.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing spans with ``--verbose``).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def violation_count(self) -> int:
        return int(self.data.get("violations", 0))
