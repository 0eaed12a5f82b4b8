"""Phonetic, semantic, and numeric word substitutions.

All of these work on tokens inside the label rather than on individual
characters. Matching is case-insensitive; replacements are inserted
lowercase.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from domfuzz.domain.names import Domain
from domfuzz.transforms.context import GenerationContext

_WORD_BOUNDARY = re.compile(r"[-.]")
_ES_ENDINGS = ("s", "x", "z", "sh", "ch")


def _occurrences(text: str, token: str) -> list[int]:
    hits = []
    start = text.find(token)
    while start != -1:
        hits.append(start)
        start = text.find(token, start + len(token))
    return hits


def token_variants(label: str, pairs: Iterable[tuple[str, str]]) -> Iterator[str]:
    """Replace tokens in *label*, longest token first.

    Every occurrence is replaced on its own; when a token occurs more than
    once, a variant with all occurrences replaced follows.
    """
    lowered = label.lower()
    for token, replacement in sorted(pairs, key=lambda p: -len(p[0])):
        hits = _occurrences(lowered, token)
        size = len(token)
        for start in hits:
            yield label[:start] + replacement + label[start + size :]
        if len(hits) > 1:
            out = label
            for start in reversed(hits):
                out = out[:start] + replacement + out[start + size :]
            yield out


def _both_ways(table: Iterable[tuple[str, tuple[str, ...]]]) -> list[tuple[str, str]]:
    pairs = []
    for word, alternatives in table:
        for alt in alternatives:
            pairs.append((word, alt))
            pairs.append((alt, word))
    return pairs


def _relabel(domain: Domain, labels: Iterable[str]) -> Iterator[Domain]:
    for label in labels:
        yield domain.with_label(label)


def homophones(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    yield from _relabel(domain, token_variants(domain.label, _both_ways(ctx.tables.homophones)))


def cognitive(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Familiar misspellings, phonetic digraphs, business synonyms, compound splits."""
    tables = ctx.tables
    label = domain.label
    spellings = [(word, alt) for word, alts in tables.cognitive for alt in alts]
    yield from _relabel(domain, token_variants(label, spellings))
    yield from _relabel(domain, token_variants(label, tables.phonetic))
    synonyms = [(word, alt) for word, alts in tables.business for alt in alts]
    yield from _relabel(domain, token_variants(label, synonyms))
    compounds = [(word, alt) for word, alts in tables.compounds.items() for alt in alts]
    yield from _relabel(domain, token_variants(label, compounds))


def _inflections(word: str, irregular: dict[str, str]) -> Iterator[str]:
    lower = word.lower()
    if lower in irregular:
        yield irregular[lower]
    for singular, plural in irregular.items():
        if lower == plural:
            yield singular
    if not lower.endswith("s"):
        yield word + "s"
    if lower.endswith(_ES_ENDINGS):
        yield word + "es"
    if lower.endswith("y") and len(word) > 1:
        yield word[:-1] + "ies"
    if lower.endswith("s") and len(word) > 1:
        yield word[:-1]
    if lower.endswith("es") and len(word) > 2:
        yield word[:-2]
    if lower.endswith("ies") and len(word) > 3:
        yield word[:-3] + "y"


def singular_plural(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Toggle the grammatical number of the last word of the label."""
    label = domain.label
    cut = max((m.end() for m in _WORD_BOUNDARY.finditer(label)), default=0)
    head, word = label[:cut], label[cut:]
    if not word:
        return
    for inflected in _inflections(word, dict(ctx.tables.irregular_plurals)):
        yield domain.with_label(head + inflected)


def cardinal_substitution(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    pairs = [p for digit, word in ctx.tables.cardinals for p in ((digit, word), (word, digit))]
    yield from _relabel(domain, token_variants(domain.label, pairs))


def ordinal_substitution(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    pairs = [p for short, word in ctx.tables.ordinals for p in ((short, word), (word, short))]
    yield from _relabel(domain, token_variants(domain.label, pairs))
