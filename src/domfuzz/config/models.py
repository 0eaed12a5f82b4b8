"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``domfuzz.toml`` only holds
overrides. :class:`FuzzConfig` is the per-run object handed to the service.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field, model_validator

from domfuzz.domain.types import KeyboardLayout

if TYPE_CHECKING:
    from domfuzz.config.settings import DomfuzzSettings

SortOrder = Literal["generation", "score"]


# --- domfuzz.toml sections ---


class GenerationConfig(BaseModel):
    """[generation] section."""

    model_config = {"frozen": True}

    transformations: list[str] = Field(default_factory=list)
    max_variations: int = Field(default=1000, gt=0)
    batch_size: int = Field(default=20, gt=0)
    max_substitutions: int | None = Field(default=None, ge=1)
    keyboard_layouts: list[KeyboardLayout] = Field(default_factory=lambda: list(KeyboardLayout))
    min_score: float | None = Field(default=None, ge=0.0, le=1.0)
    sort: SortOrder = "generation"


class CheckerConfig(BaseModel):
    """[checker] section."""

    model_config = {"frozen": True}

    enabled: bool = False
    concurrency_limit: int = Field(default=15, gt=0)
    per_check_timeout: float = Field(default=5.0, gt=0)
    preserve_order: bool = False
    rdap: bool = True
    whois: bool = True
    dns: bool = True
    http_probe: bool = False


class DictionaryConfig(BaseModel):
    """[dictionary] section."""

    model_config = {"frozen": True}

    path: Path | None = None


# --- Per-run config ---


class FuzzConfig(BaseModel):
    """Everything one generation run needs.

    ``transformations`` holds user tokens (ids, aliases, bundles); the
    service resolves them to the enabled id set at run start. Either
    ``only_*`` filter implies ``check_status``.
    """

    model_config = {"frozen": True}

    transformations: tuple[str, ...] = ()
    max_variations: int = Field(default=1000, gt=0)
    batch_size: int = Field(default=20, gt=0)
    concurrency_limit: int = Field(default=15, gt=0)
    per_check_timeout: float = Field(default=5.0, gt=0)
    check_status: bool = False
    dictionary: tuple[str, ...] | None = None
    max_substitutions: int | None = Field(default=None, ge=1)
    keyboard_layouts: tuple[KeyboardLayout, ...] = tuple(KeyboardLayout)
    preserve_order: bool = False
    min_score: float | None = Field(default=None, ge=0.0, le=1.0)
    only_registered: bool = False
    only_available: bool = False
    sort: SortOrder = "generation"
    checker: CheckerConfig = Field(default_factory=CheckerConfig)

    @model_validator(mode="before")
    @classmethod
    def _filters_imply_check(cls, data: Any) -> Any:
        if isinstance(data, dict) and (data.get("only_registered") or data.get("only_available")):
            data = {**data, "check_status": True}
        return data

    @classmethod
    def from_settings(cls, settings: DomfuzzSettings, **overrides: object) -> FuzzConfig:
        """Build a run config from merged settings; *overrides* win (None is ignored)."""
        gen, chk = settings.generation, settings.checker
        values: dict[str, object] = {
            "transformations": tuple(gen.transformations),
            "max_variations": gen.max_variations,
            "batch_size": gen.batch_size,
            "concurrency_limit": chk.concurrency_limit,
            "per_check_timeout": chk.per_check_timeout,
            "check_status": chk.enabled,
            "max_substitutions": gen.max_substitutions,
            "keyboard_layouts": tuple(gen.keyboard_layouts),
            "preserve_order": chk.preserve_order,
            "min_score": gen.min_score,
            "sort": gen.sort,
            "checker": chk,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
