"""ServiceResult and ServiceError — the service-layer return contract.

INVARIANT: every public service operation returns a ServiceResult; fatal
:class:`~domfuzz.domain.errors.DomfuzzError` kinds surface as
``ServiceError.code`` rather than escaping to the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from domfuzz.domain.errors import DomfuzzError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: DomfuzzError) -> ServiceError:
        return cls(code=exc.kind.value, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"generate"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the run.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry, timing).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
