"""TransformationRegistry — the immutable catalogue of algorithms.

INVARIANT: registration order is emission order. The registry, its specs,
and its lookup tables are never mutated after :func:`build_registry`.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from domfuzz.domain.errors import UnknownTransformationError
from domfuzz.domain.models import Candidate
from domfuzz.domain.names import Domain
from domfuzz.domain.types import BundleId, Category, TransformationId
from domfuzz.transforms import character, extensions, semantic, structural
from domfuzz.transforms.combinatorics import max_substitutions
from domfuzz.transforms.context import GenerationContext
from domfuzz.transforms.scoring import Scorer
from domfuzz.transforms.tables import LookupTables, default_tables

VariantFactory = Callable[[Domain, GenerationContext], Iterator[Domain]]

# Character algorithms are grouped by curated bundles (lookalike, system-fault) instead.
_CATEGORY_BUNDLES = {
    Category.PHONETIC: BundleId.PHONETIC,
    Category.NUMERIC: BundleId.NUMERIC,
    Category.STRUCTURE: BundleId.STRUCTURE,
    Category.EXTENSION: BundleId.EXTENSION,
}


@dataclass(frozen=True)
class TransformationSpec:
    """One registered algorithm and its metadata."""

    id: TransformationId
    category: Category
    bundles: frozenset[BundleId]
    factory: VariantFactory
    summary: str
    requires_dictionary: bool = False
    allows_unicode: bool = False

    def max_substitutions(self, length: int) -> int:
        return max_substitutions(length)

    def generate(self, domain: Domain, ctx: GenerationContext, scorer: Scorer) -> Iterator[Candidate]:
        """Lazily yield scored candidates, never the input itself."""
        original = domain.key
        with contextlib.closing(self.factory(domain, ctx)) as variants:
            for variant in variants:
                if variant.key == original:
                    continue
                yield Candidate(variant, self.id, scorer.score(domain, variant, self.id))


class TransformationRegistry:
    """Ordered, read-only lookup of :class:`TransformationSpec` by id."""

    def __init__(self, specs: Iterable[TransformationSpec], tables: LookupTables) -> None:
        self._specs = {spec.id: spec for spec in specs}
        self.tables = tables
        self.scorer = Scorer(tables)

    def __iter__(self) -> Iterator[TransformationSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, tid: object) -> bool:
        return tid in self._specs

    def get(self, tid: TransformationId | str) -> TransformationSpec:
        try:
            return self._specs[TransformationId(tid)]
        except (KeyError, ValueError):
            raise UnknownTransformationError(f"Unknown transformation: {tid}", token=str(tid)) from None

    def ids(self) -> tuple[TransformationId, ...]:
        return tuple(self._specs)

    def in_bundle(self, bundle: BundleId) -> tuple[TransformationId, ...]:
        if bundle is BundleId.ALL:
            return self.ids()
        return tuple(spec.id for spec in self if bundle in spec.bundles)

    def by_category(self) -> dict[Category, list[TransformationSpec]]:
        grouped: dict[Category, list[TransformationSpec]] = {c: [] for c in Category}
        for spec in self:
            grouped[spec.category].append(spec)
        return grouped

    def ordered(self, ids: Iterable[TransformationId]) -> list[TransformationSpec]:
        """Specs for *ids*, in registration order."""
        wanted = set(ids)
        return [spec for spec in self if spec.id in wanted]


def _spec(
    tid: TransformationId,
    category: Category,
    factory: VariantFactory,
    summary: str,
    *extra_bundles: BundleId,
    requires_dictionary: bool = False,
    allows_unicode: bool = False,
) -> TransformationSpec:
    bundles = set(extra_bundles)
    if category in _CATEGORY_BUNDLES:
        bundles.add(_CATEGORY_BUNDLES[category])
    return TransformationSpec(
        id=tid,
        category=category,
        bundles=frozenset(bundles),
        factory=factory,
        summary=summary,
        requires_dictionary=requires_dictionary,
        allows_unicode=allows_unicode,
    )


def build_registry(tables: LookupTables | None = None) -> TransformationRegistry:
    """Register every algorithm in emission order."""
    T, C, B = TransformationId, Category, BundleId
    specs = [
        _spec(T.LEETSPEAK, C.CHARACTER, character.leetspeak, "Digits and letters that look alike", B.LOOKALIKE),
        _spec(T.MISSPELLING, C.CHARACTER, character.misspelling, "Typing and spelling mistakes", B.LOOKALIKE),
        _spec(T.FAT_FINGER, C.CHARACTER, character.fat_finger, "Adjacent-key and repeated-key hits", B.LOOKALIKE),
        _spec(
            T.MIXED_ENCODINGS,
            C.CHARACTER,
            character.mixed_encodings,
            "Lookalike characters from other scripts",
            B.LOOKALIKE,
            allows_unicode=True,
        ),
        _spec(T.BITSQUATTING, C.CHARACTER, character.bitsquatting, "Single-bit memory errors", B.SYSTEM_FAULT),
        _spec(T.HOMOPHONES, C.PHONETIC, semantic.homophones, "Words that sound alike"),
        _spec(T.COGNITIVE, C.PHONETIC, semantic.cognitive, "Familiar misspellings and synonyms"),
        _spec(T.SINGULAR_PLURAL, C.PHONETIC, semantic.singular_plural, "Singular/plural of the last word"),
        _spec(T.CARDINAL_SUBSTITUTION, C.NUMERIC, semantic.cardinal_substitution, "Number words and digits"),
        _spec(T.ORDINAL_SUBSTITUTION, C.NUMERIC, semantic.ordinal_substitution, "Ordinal words and abbreviations"),
        _spec(T.WORD_SWAP, C.STRUCTURE, structural.word_swap, "Reordered words"),
        _spec(T.HYPHENATION, C.STRUCTURE, structural.hyphenation, "Inserted hyphens"),
        _spec(T.SUBDOMAIN, C.STRUCTURE, structural.subdomain, "Target name in front of another host"),
        _spec(T.DOT_INSERTION, C.STRUCTURE, structural.dot_insertion, "Inserted dots"),
        _spec(T.DOT_OMISSION, C.STRUCTURE, structural.dot_omission, "Removed dots"),
        _spec(T.DOT_HYPHEN_SUB, C.STRUCTURE, structural.dot_hyphen_sub, "Dots and hyphens swapped"),
        _spec(T.TLD_VARIATIONS, C.EXTENSION, extensions.tld_variations, "Other top-level domains"),
        _spec(
            T.INTL_TLD,
            C.EXTENSION,
            extensions.intl_tld,
            "Internationalised and mixed-script TLDs",
            allows_unicode=True,
        ),
        _spec(T.WRONG_SLD, C.EXTENSION, extensions.wrong_sld, "Wrong registry second-level domain"),
        _spec(
            T.COMBOSQUATTING,
            C.EXTENSION,
            extensions.combosquatting,
            "Dictionary words added to the label",
            requires_dictionary=True,
        ),
        _spec(
            T.BRAND_CONFUSION,
            C.EXTENSION,
            extensions.brand_confusion,
            "Authority words added to the label",
            requires_dictionary=True,
        ),
        _spec(T.DOMAIN_PREFIX, C.EXTENSION, extensions.domain_prefix, "Generic prefixes"),
        _spec(T.DOMAIN_SUFFIX, C.EXTENSION, extensions.domain_suffix, "Generic suffixes"),
    ]
    return TransformationRegistry(specs, tables or default_tables())
