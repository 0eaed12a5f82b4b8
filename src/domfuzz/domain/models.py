"""Candidate, check result, and the record handed to output sinks.

Candidates and check results are created in the hot generation/check paths,
so they are slotted frozen dataclasses. :class:`VariationRecord` is the
serialisable contract for sinks and is a frozen pydantic model.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from domfuzz.domain.names import Domain
from domfuzz.domain.types import CheckStatus, TransformationId


@dataclass(frozen=True, slots=True)
class Candidate:
    """One generated variation and where it came from."""

    domain: Domain
    source: TransformationId
    score: float

    @property
    def name(self) -> str:
        return self.domain.name

    @property
    def key(self) -> str:
        return self.domain.key


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Terminal status of one candidate after a status check."""

    candidate: Candidate
    status: CheckStatus
    reason: str | None = None


class VariationRecord(BaseModel):
    """``{domain, transformation, score, status?}`` as emitted to sinks."""

    model_config = {"frozen": True}

    domain: str
    transformation: str
    score: float = Field(ge=0.0, le=1.0)
    status: str | None = None
    reason: str | None = None

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> VariationRecord:
        return cls(
            domain=candidate.name,
            transformation=candidate.source.value,
            score=round(candidate.score, 4),
        )

    @classmethod
    def from_check(cls, result: CheckResult) -> VariationRecord:
        return cls.from_candidate(result.candidate).model_copy(
            update={"status": result.status.value, "reason": result.reason}
        )
