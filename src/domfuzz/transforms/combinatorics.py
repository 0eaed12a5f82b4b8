"""Bounded N-of-M edit enumeration.

Transformations describe *what* may change at each eligible position as a
ranked list of :class:`Edit` records; this module decides *which* positions
change together. Enumeration is lazy: nothing is materialised beyond the
current combination.

INVARIANT: every yielded edit set respects the per-family bound from
:func:`max_substitutions` and the minimum position gap, so edits never
overlap and the rewrite is well defined.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Mapping, Sequence
from enum import StrEnum
from typing import NamedTuple


def max_substitutions(length: int) -> int:
    """Upper bound on simultaneous edits for a label of *length* characters."""
    if length <= 4:
        return 1
    if length <= 8:
        return min(2, int(0.4 * length))
    return min(4, int(0.3 * length))


def effective_bound(length: int, override: int | None) -> int:
    """Policy bound, optionally lowered (never raised) by *override*."""
    bound = max_substitutions(length)
    if override is not None:
        bound = min(bound, max(override, 1))
    return bound


class Op(StrEnum):
    SUBSTITUTE = "sub"
    INSERT = "ins"
    DELETE = "del"
    TRANSPOSE = "swap"


class Edit(NamedTuple):
    """One rewrite anchored at ``pos`` of the original label."""

    pos: int
    op: Op
    value: str = ""


class Slot(NamedTuple):
    """An eligible position and its ranked alternatives."""

    pos: int
    edits: tuple[Edit, ...]


def apply_edits(label: str, edits: Sequence[Edit]) -> str:
    """Apply *edits* right-to-left so earlier positions stay valid."""
    out = label
    for edit in sorted(edits, key=lambda e: e.pos, reverse=True):
        p = edit.pos
        if edit.op is Op.SUBSTITUTE:
            out = out[:p] + edit.value + out[p + 1 :]
        elif edit.op is Op.INSERT:
            out = out[:p] + edit.value + out[p:]
        elif edit.op is Op.DELETE:
            out = out[:p] + out[p + 1 :]
        else:
            out = out[:p] + out[p + 1] + out[p] + out[p + 2 :]
    return out


def _narrow(n: int) -> int | None:
    """How many ranked alternatives each position keeps at combination size *n*."""
    if n == 1:
        return None
    if n == 2:
        return 2
    return 1


def _spaced(positions: Sequence[int], min_gap: int) -> bool:
    return all(b - a >= min_gap for a, b in itertools.pairwise(positions))


def edit_sets(
    slots: Sequence[Slot], bound: int, *, min_gap: int = 1, start: int = 1
) -> Iterator[tuple[Edit, ...]]:
    """Yield every edit set of size *start*..*bound* over *slots*.

    Singles use every alternative; larger sets keep only the best-ranked
    alternatives per position. Order is deterministic: by size, then by
    position tuple, then by alternative rank.
    """
    slots = [s for s in slots if s.edits]
    for n in range(start, min(bound, len(slots)) + 1):
        keep = _narrow(n)
        for combo in itertools.combinations(slots, n):
            if not _spaced([s.pos for s in combo], min_gap):
                continue
            choices = [s.edits[:keep] for s in combo]
            yield from itertools.product(*choices)


def substitution_slots(label: str, table: Mapping[str, tuple[str, ...]]) -> list[Slot]:
    """Build substitution slots for every character of *label* found in *table*.

    Lookup is case-insensitive; positions without alternatives are skipped.
    """
    slots = []
    for pos, ch in enumerate(label):
        options = table.get(ch.lower(), ())
        if options:
            slots.append(Slot(pos, tuple(Edit(pos, Op.SUBSTITUTE, v) for v in options)))
    return slots
