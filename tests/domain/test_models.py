"""Tests for Candidate, CheckResult, and VariationRecord."""

from __future__ import annotations

import dataclasses

import pytest
from pydantic import ValidationError

from domfuzz.domain.models import Candidate, CheckResult, VariationRecord
from domfuzz.domain.names import Domain
from domfuzz.domain.types import CheckStatus, Classification, TransformationId


def _candidate() -> Candidate:
    return Candidate(Domain("Exarnple", "com"), TransformationId.MISSPELLING, 0.73281)


class TestCandidate:
    def test_name_and_key(self) -> None:
        c = _candidate()
        assert c.name == "Exarnple.com"
        assert c.key == "exarnple.com"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _candidate().score = 1.0  # type: ignore[misc]


class TestVariationRecord:
    def test_from_candidate(self) -> None:
        record = VariationRecord.from_candidate(_candidate())
        assert record.domain == "Exarnple.com"
        assert record.transformation == "misspelling"
        assert record.score == 0.7328
        assert record.status is None

    def test_from_check(self) -> None:
        result = CheckResult(_candidate(), CheckStatus.TIMED_OUT, "NETWORK_TIMEOUT")
        record = VariationRecord.from_check(result)
        assert record.status == "timeout"
        assert record.reason == "NETWORK_TIMEOUT"

    def test_score_bounds(self) -> None:
        with pytest.raises(ValidationError):
            VariationRecord(domain="a.com", transformation="x", score=1.5)

    def test_dump_excludes_unset_status(self) -> None:
        dumped = VariationRecord.from_candidate(_candidate()).model_dump(exclude_none=True)
        assert set(dumped) == {"domain", "transformation", "score"}


class TestCheckStatus:
    @pytest.mark.parametrize("classification", list(Classification))
    def test_from_classification(self, classification: Classification) -> None:
        assert CheckStatus.from_classification(classification).value == classification.value

    def test_terminal(self) -> None:
        assert not CheckStatus.PENDING.is_terminal
        assert not CheckStatus.RESOLVING.is_terminal
        assert CheckStatus.TIMED_OUT.is_terminal
        assert CheckStatus.ERROR.is_terminal
