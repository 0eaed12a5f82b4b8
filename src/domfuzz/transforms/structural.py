"""Structural transformations: word order, hyphens, dots, and subdomain tricks."""

from __future__ import annotations

import re
from collections.abc import Iterator

from domfuzz.domain.names import Domain
from domfuzz.transforms.context import GenerationContext
from domfuzz.transforms.semantic import token_variants

_CAMEL_WORD = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")
_SEPARATORS = "-."


def _swap_parts(parts: list[str], sep: str) -> Iterator[str]:
    if len(parts) < 2 or not all(parts):
        return
    yield sep.join(reversed(parts))
    if len(parts) > 2:
        for i in range(len(parts) - 1):
            swapped = parts[:i] + [parts[i + 1], parts[i]] + parts[i + 2 :]
            yield sep.join(swapped)


def _dictionary_splits(label: str, words: frozenset[str]) -> Iterator[str]:
    lower = label.lower()
    for i in range(1, len(label)):
        if lower[:i] in words and lower[i:] in words:
            yield label[i:] + label[:i]


def _fallback_swaps(label: str) -> Iterator[str]:
    if len(label) >= 4:
        mid = len(label) // 2
        yield label[mid:] + label[:mid]
    if len(label) >= 6:
        third = len(label) // 3
        yield label[2 * third :] + label[third : 2 * third] + label[:third]


def word_swap(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Reorder the words of the label.

    Words come from hyphens, dots, camelCase, or a two-word dictionary
    segmentation; a label with no word structure has its halves and thirds
    swapped instead.
    """
    label = domain.label
    found = False
    for sep in _SEPARATORS:
        for swapped in _swap_parts(label.split(sep), sep):
            found = True
            yield domain.with_label(swapped)

    camel = _CAMEL_WORD.findall(label)
    if len(camel) >= 2 and "".join(camel) == label:
        found = True
        yield domain.with_label("".join(reversed(camel)))

    if ctx.dictionary:
        words = frozenset(w.lower() for w in ctx.dictionary)
        for swapped in _dictionary_splits(label, words):
            found = True
            yield domain.with_label(swapped)

    if not found:
        for swapped in _fallback_swaps(label):
            yield domain.with_label(swapped)


def _insert_between(domain: Domain, mark: str) -> Iterator[Domain]:
    label = domain.label
    for i in range(1, len(label)):
        if label[i - 1] in _SEPARATORS or label[i] in _SEPARATORS:
            continue
        yield domain.with_label(label[:i] + mark + label[i:])


def hyphenation(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    yield from _insert_between(domain, "-")


def dot_insertion(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    yield from _insert_between(domain, ".")


def dot_omission(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    for label in token_variants(domain.label, [(".", "")]):
        yield domain.with_label(label)


def _flat_tld(tld: str) -> str:
    return tld.replace(".", "-")


def dot_hyphen_sub(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Swap dots and hyphens inside the label; fold the TLD into the label."""
    label = domain.label
    for swapped in token_variants(label, [(".", "-"), ("-", ".")]):
        yield domain.with_label(swapped)
    yield domain.with_label(f"{label}-{_flat_tld(domain.tld)}")


def subdomain(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Put the target name in front of a lookalike host.

    ``example.com`` becomes ``example.com-login.com`` and
    ``login.example-com.com``.
    """
    label, tld = domain.label, domain.tld
    for word in ctx.tables.injection_words:
        yield domain.with_label(f"{label}.{tld}-{word}")
        yield domain.with_label(f"{word}.{label}-{_flat_tld(tld)}")
