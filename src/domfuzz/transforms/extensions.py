"""Domain-extension transformations: TLD swaps and label affixes."""

from __future__ import annotations

from collections.abc import Iterator

from domfuzz.domain.names import Domain
from domfuzz.transforms.context import GenerationContext


def tld_variations(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    for tld in ctx.tables.tlds:
        yield domain.with_tld(tld)


def _mixed_script_tlds(tld: str, ctx: GenerationContext) -> Iterator[str]:
    for pos, ch in enumerate(tld):
        for glyph in ctx.tables.homoglyphs.get(ch.lower(), ()):
            yield tld[:pos] + glyph.char + tld[pos + 1 :]


def intl_tld(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Registry IDN TLDs, then mixed-script lookalikes of the current TLD.

    A generic TLD (com, net, org) is swapped for the IDN equivalents of
    every generic TLD, since users do not distinguish between them.
    """
    tables = ctx.tables
    current = domain.tld.lower()
    sources = [current]
    if current in tables.generic_tlds:
        sources.extend(t for t in tables.generic_tlds if t != current)
    for source in sources:
        for idn in tables.idn_tlds.get(source, ()):
            yield domain.with_tld(idn)
    for lookalike in _mixed_script_tlds(domain.tld, ctx):
        yield domain.with_tld(lookalike)


def wrong_sld(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Move between a country TLD and its registry second-level domains."""
    current = domain.tld.lower()
    for country, slds in ctx.tables.second_level.items():
        if current == country:
            for sld in slds:
                yield domain.with_tld(sld)
        elif current in slds:
            yield domain.with_tld(country)
            for sld in slds:
                if sld != current:
                    yield domain.with_tld(sld)


def combosquatting(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    label = domain.label
    for word in ctx.dictionary or ():
        yield domain.with_label(f"{label}-{word}")
        yield domain.with_label(f"{label}{word}")
        yield domain.with_label(f"{word}-{label}")
        yield domain.with_label(f"{word}{label}")


def brand_confusion(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Authority affixes (``secure-``, ``-portal``), alone and with dictionary words."""
    tables = ctx.tables
    label = domain.label
    for prefix in tables.authority_prefixes:
        yield domain.with_label(f"{prefix}-{label}")
        yield domain.with_label(f"{prefix}.{label}")
    for suffix in tables.authority_suffixes:
        yield domain.with_label(f"{label}-{suffix}")
        yield domain.with_label(f"{label}{suffix}")
    for prefix in tables.authority_prefixes:
        for word in ctx.dictionary or ():
            yield domain.with_label(f"{prefix}-{label}-{word}")


def domain_prefix(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    label = domain.label
    for prefix in ctx.tables.domain_prefixes:
        yield domain.with_label(f"{prefix}-{label}")
        yield domain.with_label(f"{prefix}.{label}")
        yield domain.with_label(f"{prefix}{label}")


def domain_suffix(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    label = domain.label
    for suffix in ctx.tables.domain_suffixes:
        yield domain.with_label(f"{label}-{suffix}")
        yield domain.with_label(f"{label}{suffix}")
