"""Character-level transformations: leetspeak, misspelling, fat-finger,
mixed encodings, and bitsquatting.

Each generator takes the parsed target and a :class:`GenerationContext` and
lazily yields variant :class:`Domain` objects. Only the label is rewritten;
dots inside the label are never edited.
"""

from __future__ import annotations

from collections.abc import Iterator

from domfuzz.domain.names import Domain
from domfuzz.transforms.combinatorics import Edit, Op, Slot, apply_edits, edit_sets, substitution_slots
from domfuzz.transforms.context import GenerationContext
from domfuzz.transforms.tables import BITFLIP_ALPHABET, VOWELS

# Composed edits that change length must leave an untouched character between them.
_LENGTH_EDIT_GAP = 2
_IN_PLACE_GAP = 1

_HOMOGLYPH_SCRIPT_ORDER = ("cyrillic", "greek", "armenian", "latin")
_MIXED_SCRIPT_MIN_LENGTH = 8


def _with_edits(domain: Domain, edit_iter: Iterator[tuple[Edit, ...]]) -> Iterator[Domain]:
    label = domain.label
    for edits in edit_iter:
        yield domain.with_label(apply_edits(label, edits))


def _match_case(original: str, replacement: str) -> str:
    return replacement.upper() if original.isupper() else replacement


def leetspeak(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    label = domain.label
    slots = substitution_slots(label, ctx.tables.leetspeak)
    yield from _with_edits(domain, edit_sets(slots, ctx.bound(len(label)), min_gap=_IN_PLACE_GAP))


def _misspelling_slot(label: str, pos: int, ctx: GenerationContext) -> Slot:
    ch = label[pos]
    lower = ch.lower()
    edits: list[Edit] = []
    if len(label) > 1:
        edits.append(Edit(pos, Op.DELETE))
    if pos + 1 < len(label) and label[pos + 1] != "." and label[pos + 1].lower() != lower:
        edits.append(Edit(pos, Op.TRANSPOSE))
    if lower in VOWELS:
        edits.extend(Edit(pos, Op.SUBSTITUTE, _match_case(ch, v)) for v in VOWELS if v != lower)
    swapped = {e.value for e in edits}
    edits.extend(Edit(pos, Op.SUBSTITUTE, n) for n in ctx.neighbours(ch) if n not in swapped)
    edits.extend(Edit(pos, Op.INSERT, v) for v in VOWELS)
    return Slot(pos, tuple(edits))


def misspelling(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Insertion, deletion, transposition, keyboard slips, and vowel swaps."""
    label = domain.label
    slots = [_misspelling_slot(label, pos, ctx) for pos, ch in enumerate(label) if ch != "."]
    yield from _with_edits(domain, edit_sets(slots, ctx.bound(len(label)), min_gap=_LENGTH_EDIT_GAP))


def fat_finger(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Repeated keys, adjacent-key hits, and adjacent keys pressed alongside."""
    label = domain.label
    slots = []
    for pos, ch in enumerate(label):
        if ch in ".-":
            continue
        near = ctx.neighbours(ch)
        edits = [Edit(pos, Op.INSERT, ch)]
        edits.extend(Edit(pos, Op.SUBSTITUTE, n) for n in near)
        edits.extend(Edit(pos, Op.INSERT, n) for n in near)
        slots.append(Slot(pos, tuple(edits)))
    yield from _with_edits(domain, edit_sets(slots, ctx.bound(len(label)), min_gap=_LENGTH_EDIT_GAP))


def _homoglyph_slots(label: str, ctx: GenerationContext, script: str | None = None) -> list[Slot]:
    slots = []
    for pos, ch in enumerate(label):
        glyphs = ctx.tables.homoglyphs.get(ch.lower(), ())
        options = tuple(
            Edit(pos, Op.SUBSTITUTE, g.char) for g in glyphs if script is None or g.script == script
        )
        if options:
            slots.append(Slot(pos, options))
    return slots


def mixed_encodings(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Swap label characters for lookalikes from other scripts.

    Short labels draw every multi-position combination from a single
    script; labels of eight or more characters may mix scripts.
    """
    label = domain.label
    bound = ctx.bound(len(label))
    all_scripts = _homoglyph_slots(label, ctx)
    if len(label) >= _MIXED_SCRIPT_MIN_LENGTH:
        yield from _with_edits(domain, edit_sets(all_scripts, bound, min_gap=_IN_PLACE_GAP))
        return

    yield from _with_edits(domain, edit_sets(all_scripts, 1))
    for script in _HOMOGLYPH_SCRIPT_ORDER:
        slots = _homoglyph_slots(label, ctx, script)
        yield from _with_edits(domain, edit_sets(slots, bound, min_gap=_IN_PLACE_GAP, start=2))


def bitsquatting(domain: Domain, ctx: GenerationContext) -> Iterator[Domain]:
    """Single-bit flips of ASCII label characters that stay DNS-legal."""
    label = domain.label
    for pos, ch in enumerate(label):
        if ch == "." or not ch.isascii():
            continue
        code = ord(ch)
        for bit in range(8):
            flipped = chr(code ^ (1 << bit))
            if flipped in BITFLIP_ALPHABET and flipped.lower() != ch.lower():
                yield domain.with_label(label[:pos] + flipped + label[pos + 1 :])
