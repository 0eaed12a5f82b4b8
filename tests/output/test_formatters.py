"""Tests for record lines, run summaries, and format_result."""

import json

from domfuzz.domain.models import VariationRecord
from domfuzz.output.formatters import format_record, format_result, format_summary
from domfuzz.services.result import ServiceError, ServiceResult


def _generate(**data: object) -> ServiceResult:
    base: dict[str, object] = {"domain": "example.com", "count": 0, "items": [], "capped": False, "stats": {}}
    base.update(data)
    return ServiceResult(ok=True, op="generate", data=base)


class TestFormatRecord:
    def test_unchecked_record(self) -> None:
        record = VariationRecord(domain="exarnple.com", transformation="misspelling", score=0.7328)
        assert format_record(record) == "73.28%, exarnple.com, misspelling"

    def test_checked_record(self) -> None:
        record = VariationRecord(domain="exarnple.com", transformation="misspelling", score=0.7328, status="registered")
        assert format_record(record) == "73.28%, exarnple.com, misspelling, registered"

    def test_dict_record(self) -> None:
        item = {"domain": "example.net", "transformation": "tld-variations", "score": 1.0}
        assert format_record(item) == "100.00%, example.net, tld-variations"


class TestFormatSummary:
    def test_basic(self) -> None:
        assert format_summary(_generate(count=3)) == "3 variations of example.com"

    def test_dropped_counts(self) -> None:
        result = _generate(count=2, stats={"accepted": 2, "invalid": 1, "duplicate": 4, "below_threshold": 0})
        assert format_summary(result) == "2 variations of example.com (dropped: invalid=1, duplicate=4)"

    def test_statuses_and_cap(self) -> None:
        result = _generate(count=2, capped=True, statuses={"registered": 1, "available": 1})
        assert format_summary(result) == "2 variations of example.com [available=1, registered=1], capped"


class TestFormatResult:
    def test_json_mode(self) -> None:
        data = json.loads(format_result(_generate(count=0), json_output=True))
        assert data["ok"] is True
        assert data["op"] == "generate"
        assert data["data"]["domain"] == "example.com"

    def test_json_mode_error(self) -> None:
        result = ServiceResult(ok=False, op="generate", error=ServiceError(code="INVALID_DOMAIN", message="Bad"))
        data = json.loads(format_result(result, json_output=True))
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_DOMAIN"

    def test_plain_lists_items(self) -> None:
        items = [
            {"domain": "exampel.com", "transformation": "misspelling", "score": 0.5},
            {"domain": "example.net", "transformation": "tld-variations", "score": 0.25},
        ]
        output = format_result(_generate(count=2, items=items))
        assert output.splitlines() == ["50.00%, exampel.com, misspelling", "25.00%, example.net, tld-variations"]

    def test_plain_error(self) -> None:
        result = ServiceResult(ok=False, op="generate", error=ServiceError(code="X", message="boom"))
        assert format_result(result) == "ERROR: generate: boom"
