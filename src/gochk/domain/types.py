"""Value types produced and consumed by a check run.

Everything here is immutable and transient: a :class:`Dependency` lives for
one resolution, a :class:`CheckResult` for one run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ResultType(StrEnum):
    """Outcome of checking one file."""

    VIOLATED = "violated"
    VERIFIED = "verified"
    IGNORED = "ignored"


class Color(StrEnum):
    """Presentation tag carried for the reporter; never used in logic."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


RESULT_COLORS: dict[ResultType, Color] = {
    ResultType.VIOLATED: Color.RED,
    ResultType.VERIFIED: Color.GREEN,
    ResultType.IGNORED: Color.YELLOW,
}


@dataclass(frozen=True)
class Dependency:
    """One internal import edge discovered during resolution.

    ``file_path``/``file_layer`` always name the top-level file being
    checked. ``via`` is the file that declares the import; it differs from
    ``file_path`` for transitive edges. ``import_layer`` is None when no
    configured layer claims the imported package.
    """

    file_path: str
    file_layer: int
    import_path: str
    import_layer: int | None
    via: str = ""

    @property
    def is_direct(self) -> bool:
        return not self.via or self.via == self.file_path

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "file_layer": self.file_layer,
            "import_path": self.import_path,
            "import_layer": self.import_layer,
            "via": self.via or self.file_path,
        }


@dataclass(frozen=True)
class CheckResult:
    """Per-file verdict handed to the reporter."""

    result_type: ResultType
    message: str
    color: Color
    file_path: str = ""
    dependencies: tuple[Dependency, ...] = field(default_factory=tuple)

    @classmethod
    def of(
        cls,
        result_type: ResultType,
        message: str,
        *,
        file_path: str = "",
        dependencies: tuple[Dependency, ...] = (),
    ) -> CheckResult:
        """Build a result with the color conventionally paired with its type."""
        return cls(
            result_type=result_type,
            message=message,
            color=RESULT_COLORS[result_type],
            file_path=file_path,
            dependencies=dependencies,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "result_type": str(self.result_type),
            "message": self.message,
            "color": str(self.color),
            "file_path": self.file_path,
            "dependencies": [d.to_dict() for d in self.dependencies],
        }
