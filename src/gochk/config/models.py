"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``gochk.toml`` only carries
overrides. camelCase keys as used in JSON configs
(``dependencyOrders``, ``printViolationsAtTheBottom``) are accepted too.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field, field_validator

from gochk.domain.errors import ConfigError
from gochk.domain.layers import LayerOrder

# Outer layers first: each layer may import the layers listed after it.
DEFAULT_DEPENDENCY_ORDERS: tuple[str, ...] = ("external", "adapter", "application", "domain")
DEFAULT_IGNORE: tuple[str, ...] = ("test", "_test", "vendor", ".git")


class CheckConfig(BaseModel):
    """[check] section — everything one check run needs."""

    model_config = {"frozen": True}

    target_path: Path = Field(
        default=Path("."),
        validation_alias=AliasChoices("target_path", "targetPath"),
    )
    dependency_orders: tuple[str, ...] = Field(
        default=DEFAULT_DEPENDENCY_ORDERS,
        validation_alias=AliasChoices("dependency_orders", "dependencyOrders"),
    )
    ignore: tuple[str, ...] = DEFAULT_IGNORE
    module_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("module_path", "modulePath"),
    )
    module_root: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("module_root", "moduleRoot"),
    )
    show_all: bool = Field(
        default=False,
        validation_alias=AliasChoices("show_all", "showAll"),
    )
    print_violations_at_bottom: bool = Field(
        default=False,
        validation_alias=AliasChoices("print_violations_at_bottom", "printViolationsAtTheBottom"),
    )

    @field_validator("dependency_orders")
    @classmethod
    def _validate_order(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        try:
            LayerOrder(tuple(value))
        except ConfigError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("module_path")
    @classmethod
    def _strip_module_path(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().strip('"').rstrip("/") or None

    @property
    def layer_order(self) -> LayerOrder:
        return LayerOrder(self.dependency_orders)
