"""Tests for TransformationRegistry and the built-in catalogue."""

from __future__ import annotations

import pytest

from domfuzz.domain.errors import UnknownTransformationError
from domfuzz.domain.names import parse_domain
from domfuzz.domain.types import BundleId, Category, TransformationId
from domfuzz.transforms.context import GenerationContext
from domfuzz.transforms.registry import TransformationRegistry

T = TransformationId

SAMPLE_DOMAINS = ["example.com", "Google.COM", "mail.my-shop.co.uk", "4you.net", "paypal.com"]


class TestCatalogue:
    def test_every_id_registered(self, registry: TransformationRegistry) -> None:
        assert len(registry) == len(TransformationId)
        assert set(registry.ids()) == set(TransformationId)

    def test_registration_order(self, registry: TransformationRegistry) -> None:
        ids = registry.ids()
        assert ids[0] is T.LEETSPEAK
        assert ids[-1] is T.DOMAIN_SUFFIX

    def test_category_sizes(self, registry: TransformationRegistry) -> None:
        sizes = {category: len(specs) for category, specs in registry.by_category().items()}
        assert sizes == {
            Category.CHARACTER: 5,
            Category.PHONETIC: 3,
            Category.NUMERIC: 2,
            Category.STRUCTURE: 6,
            Category.EXTENSION: 7,
        }

    def test_dictionary_flags(self, registry: TransformationRegistry) -> None:
        needs = {spec.id for spec in registry if spec.requires_dictionary}
        assert needs == {T.COMBOSQUATTING, T.BRAND_CONFUSION}

    def test_unicode_flags(self, registry: TransformationRegistry) -> None:
        unicode_ids = {spec.id for spec in registry if spec.allows_unicode}
        assert unicode_ids == {T.MIXED_ENCODINGS, T.INTL_TLD}

    def test_tables_immutable(self, registry: TransformationRegistry) -> None:
        with pytest.raises(TypeError):
            registry.tables.leetspeak["a"] = ("@",)  # type: ignore[index]


class TestLookup:
    def test_get_by_id_and_string(self, registry: TransformationRegistry) -> None:
        assert registry.get(T.MISSPELLING).id is T.MISSPELLING
        assert registry.get("fat-finger").id is T.FAT_FINGER

    def test_get_unknown(self, registry: TransformationRegistry) -> None:
        with pytest.raises(UnknownTransformationError):
            registry.get("typo-magic")

    def test_contains(self, registry: TransformationRegistry) -> None:
        assert T.BITSQUATTING in registry

    def test_ordered_follows_registration(self, registry: TransformationRegistry) -> None:
        specs = registry.ordered([T.DOMAIN_SUFFIX, T.LEETSPEAK, T.WORD_SWAP])
        assert [s.id for s in specs] == [T.LEETSPEAK, T.WORD_SWAP, T.DOMAIN_SUFFIX]

    def test_max_substitutions(self, registry: TransformationRegistry) -> None:
        assert registry.get(T.LEETSPEAK).max_substitutions(10) == 3


class TestBundles:
    def test_all(self, registry: TransformationRegistry) -> None:
        assert registry.in_bundle(BundleId.ALL) == registry.ids()

    def test_lookalike(self, registry: TransformationRegistry) -> None:
        assert registry.in_bundle(BundleId.LOOKALIKE) == (
            T.LEETSPEAK,
            T.MISSPELLING,
            T.FAT_FINGER,
            T.MIXED_ENCODINGS,
        )

    def test_system_fault(self, registry: TransformationRegistry) -> None:
        assert registry.in_bundle(BundleId.SYSTEM_FAULT) == (T.BITSQUATTING,)

    def test_category_bundles(self, registry: TransformationRegistry) -> None:
        assert registry.in_bundle(BundleId.NUMERIC) == (T.CARDINAL_SUBSTITUTION, T.ORDINAL_SUBSTITUTION)
        assert len(registry.in_bundle(BundleId.EXTENSION)) == 7


class TestSpecGenerate:
    @pytest.mark.parametrize("name", SAMPLE_DOMAINS)
    def test_never_yields_input(self, registry: TransformationRegistry, ctx: GenerationContext, name: str) -> None:
        target = parse_domain(name)
        for spec in registry:
            for candidate in spec.generate(target, ctx, registry.scorer):
                assert candidate.key != target.key, spec.id

    @pytest.mark.parametrize("name", SAMPLE_DOMAINS)
    def test_deterministic(self, registry: TransformationRegistry, ctx: GenerationContext, name: str) -> None:
        target = parse_domain(name)
        for spec in registry:
            first = [c.name for c in spec.generate(target, ctx, registry.scorer)]
            second = [c.name for c in spec.generate(target, ctx, registry.scorer)]
            assert first == second, spec.id

    def test_candidates_carry_source_and_score(self, registry: TransformationRegistry, ctx: GenerationContext) -> None:
        spec = registry.get(T.TLD_VARIATIONS)
        candidates = list(spec.generate(parse_domain("example.com"), ctx, registry.scorer))
        assert candidates
        assert all(c.source is T.TLD_VARIATIONS for c in candidates)
        assert all(0.0 <= c.score <= 1.0 for c in candidates)

    def test_case_only_variant_dropped(self, registry: TransformationRegistry, ctx: GenerationContext) -> None:
        spec = registry.get(T.TLD_VARIATIONS)
        names = [c.name for c in spec.generate(parse_domain("Example.COM"), ctx, registry.scorer)]
        assert "Example.com" not in names
