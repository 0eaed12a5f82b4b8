"""Tests for DedupStreamPipeline."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from domfuzz.domain.models import Candidate
from domfuzz.domain.names import Domain, parse_domain
from domfuzz.domain.types import TransformationId
from domfuzz.infrastructure.dictionary import BUILTIN_WORDS
from domfuzz.services.generator import CandidateGenerator
from domfuzz.services.pipeline import DedupStreamPipeline
from domfuzz.transforms.registry import TransformationRegistry
from tests.conftest import generator_for, make_candidates

T = TransformationId


class _ScriptedGenerator:
    """Stands in for CandidateGenerator; records whether it was closed."""

    def __init__(self, candidates: list[Candidate]) -> None:
        self.candidates = candidates
        self.pulled = 0
        self.closed = False

    def is_unicode_source(self, source: TransformationId) -> bool:
        return source is T.MIXED_ENCODINGS

    def generate(self, domain: Domain) -> Iterator[Candidate]:
        try:
            for candidate in self.candidates:
                self.pulled += 1
                yield candidate
        finally:
            self.closed = True


def _pipeline(generator: object, **kwargs: object) -> DedupStreamPipeline:
    options = {"max_variations": 1000, "batch_size": 20, **kwargs}
    return DedupStreamPipeline(generator, **options)  # type: ignore[arg-type]


class TestDedup:
    def test_all_transformations_distinct(self, registry: TransformationRegistry) -> None:
        gen = CandidateGenerator(registry, list(TransformationId), dictionary=BUILTIN_WORDS)
        target = parse_domain("example.com")
        names = [c.key for c in _pipeline(gen, max_variations=100_000).candidates(target)]
        assert names
        assert len(names) == len(set(names))
        assert target.key not in names

    def test_first_producer_wins(self, registry: TransformationRegistry) -> None:
        pipeline = _pipeline(generator_for(registry, T.MISSPELLING, T.FAT_FINGER))
        by_name = {c.name: c.source for c in pipeline.candidates(parse_domain("example.com"))}
        assert by_name["ezample.com"] is T.MISSPELLING
        assert pipeline.stats.duplicate > 0

    def test_case_only_duplicates_collapse(self) -> None:
        gen = _ScriptedGenerator(
            [
                Candidate(Domain("Host", "com"), T.LEETSPEAK, 0.5),
                Candidate(Domain("host", "COM"), T.MISSPELLING, 0.5),
            ]
        )
        pipeline = _pipeline(gen)
        assert [c.name for c in pipeline.candidates(parse_domain("example.com"))] == ["Host.com"]
        assert pipeline.stats.duplicate == 1

    def test_target_never_emitted(self) -> None:
        gen = _ScriptedGenerator([Candidate(Domain("EXAMPLE", "com"), T.LEETSPEAK, 0.9)])
        assert list(_pipeline(gen).candidates(parse_domain("example.com"))) == []


class TestValidation:
    def test_invalid_names_dropped(self) -> None:
        gen = _ScriptedGenerator(
            [
                Candidate(Domain("bad_label", "com"), T.LEETSPEAK, 0.5),
                Candidate(Domain("-lead", "com"), T.HYPHENATION, 0.5),
                Candidate(Domain("fine", "com"), T.LEETSPEAK, 0.5),
            ]
        )
        pipeline = _pipeline(gen)
        assert [c.name for c in pipeline.candidates(parse_domain("example.com"))] == ["fine.com"]
        assert pipeline.stats.invalid == 2

    def test_unicode_only_from_unicode_sources(self) -> None:
        gen = _ScriptedGenerator(
            [
                Candidate(Domain("еxample", "com"), T.LEETSPEAK, 0.5),
                Candidate(Domain("еxample", "com"), T.MIXED_ENCODINGS, 0.5),
            ]
        )
        pipeline = _pipeline(gen)
        accepted = list(pipeline.candidates(parse_domain("example.com")))
        assert [c.source for c in accepted] == [T.MIXED_ENCODINGS]

    def test_unicode_target_allows_unicode(self) -> None:
        gen = _ScriptedGenerator([Candidate(Domain("büchers", "de"), T.SINGULAR_PLURAL, 0.5)])
        assert len(list(_pipeline(gen).candidates(parse_domain("bücher.de")))) == 1

    def test_min_score(self) -> None:
        gen = _ScriptedGenerator(
            [
                Candidate(Domain("low", "com"), T.LEETSPEAK, 0.2),
                Candidate(Domain("high", "com"), T.LEETSPEAK, 0.8),
            ]
        )
        pipeline = _pipeline(gen, min_score=0.5)
        assert [c.name for c in pipeline.candidates(parse_domain("example.com"))] == ["high.com"]
        assert pipeline.stats.below_threshold == 1


class TestCap:
    def test_output_is_min_of_cap_and_distinct(self, registry: TransformationRegistry) -> None:
        target = parse_domain("google.com")
        distinct = len(list(_pipeline(generator_for(registry, T.BITSQUATTING)).candidates(target)))
        assert distinct > 5

        capped = _pipeline(generator_for(registry, T.BITSQUATTING), max_variations=5)
        assert len(list(capped.candidates(target))) == 5
        assert capped.stats.capped

        roomy = _pipeline(generator_for(registry, T.BITSQUATTING), max_variations=distinct + 10)
        assert len(list(roomy.candidates(target))) == distinct
        assert not roomy.stats.capped

    def test_cap_closes_upstream(self) -> None:
        gen = _ScriptedGenerator(make_candidates(50))
        pipeline = _pipeline(gen, max_variations=3)
        assert len(list(pipeline.candidates(parse_domain("example.com")))) == 3
        assert gen.closed
        assert gen.pulled == 3

    def test_early_consumer_exit_closes_upstream(self) -> None:
        gen = _ScriptedGenerator(make_candidates(50))
        stream = _pipeline(gen).candidates(parse_domain("example.com"))
        next(stream)
        stream.close()
        assert gen.closed

    def test_rejects_non_positive_limits(self) -> None:
        with pytest.raises(ValueError):
            _pipeline(_ScriptedGenerator([]), max_variations=0)
        with pytest.raises(ValueError):
            _pipeline(_ScriptedGenerator([]), batch_size=0)


class TestBatches:
    def test_batch_sizes(self) -> None:
        pipeline = _pipeline(_ScriptedGenerator(make_candidates(45)), batch_size=20)
        sizes = [len(b) for b in pipeline.batches(parse_domain("example.com"))]
        assert sizes == [20, 20, 5]

    def test_batches_preserve_order(self) -> None:
        candidates = make_candidates(7)
        pipeline = _pipeline(_ScriptedGenerator(candidates), batch_size=3)
        flat = [c for batch in pipeline.batches(parse_domain("example.com")) for c in batch]
        assert flat == candidates

    def test_stats_to_dict(self) -> None:
        pipeline = _pipeline(_ScriptedGenerator(make_candidates(2)))
        list(pipeline.candidates(parse_domain("example.com")))
        assert pipeline.stats.to_dict() == {
            "accepted": 2,
            "invalid": 0,
            "duplicate": 0,
            "below_threshold": 0,
            "capped": False,
        }
