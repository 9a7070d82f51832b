"""CheckService — adapts a check run to the ServiceResult contract.

Configuration failures become ``ok=False`` results with an error code;
violations are ordinary data on an ``ok=True`` result.
"""

from __future__ import annotations

from pydantic import ValidationError

from gochk.config.models import CheckConfig
from gochk.domain.errors import GochkError
from gochk.services.checker import run_check
from gochk.services.result import ServiceError, ServiceResult
from gochk.services.telemetry import traced


def apply_overrides(base: CheckConfig, **overrides: object) -> CheckConfig:
    """Re-validate *base* with the non-None *overrides* applied.

    Raises:
        ValidationError: an override breaks a config invariant.
    """
    data = base.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CheckConfig.model_validate(data)


def invalid_config_result(exc: ValidationError) -> ServiceResult:
    first = exc.errors()[0]
    location = ".".join(str(p) for p in first.get("loc", ()))
    return ServiceResult(
        ok=False,
        op="check",
        error=ServiceError(
            code="INVALID_CONFIG",
            message=f"{location}: {first.get('msg', 'invalid value')}",
            detail={"errors": len(exc.errors())},
        ),
    )


class CheckService:
    """Runs layer checks for one configuration."""

    def __init__(self, config: CheckConfig) -> None:
        self._config = config

    @property
    def config(self) -> CheckConfig:
        return self._config

    @traced
    def check(self) -> ServiceResult:
        """Check the configured target and report per-file results."""
        try:
            report = run_check(self._config)
        except GochkError as exc:
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(
                    code=getattr(exc, "code", "CHECK_FAILED"),
                    message=str(exc),
                    detail={"target": str(self._config.target_path)},
                ),
            )

        warnings = [f"Could not read {path}" for path in report.unreadable]
        return ServiceResult(
            ok=True,
            op="check",
            data={
                "target": str(self._config.target_path),
                "order": list(self._config.dependency_orders),
                "module": report.module.path if report.module else None,
                "results": [r.to_dict() for r in report.results],
                "count": len(report.results),
                "violations": len(report.violations),
                "files_checked": report.files_checked,
            },
            warnings=warnings,
        )
