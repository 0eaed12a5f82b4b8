"""Static similarity weights for ranking candidates.

A score blends a *visual* measure (edit distance plus credit for known
lookalike characters) with a *cognitive* one (Soundex-style phonetic
distance, known word confusions, and a length penalty). The blend depends
on the transformation family. Scores rank output and back the optional
``min_score`` filter; they never affect correctness.
"""

from __future__ import annotations

from domfuzz.domain.names import Domain
from domfuzz.domain.types import TransformationId
from domfuzz.transforms.tables import LookupTables

_SOUNDEX_CODES = {
    **dict.fromkeys("bfpv", "1"),
    **dict.fromkeys("cgjkqsxz", "2"),
    **dict.fromkeys("dt", "3"),
    "l": "4",
    **dict.fromkeys("mn", "5"),
    "r": "6",
}

# (visual weight, cognitive weight) per family; everything else is an even split.
_BLEND: dict[TransformationId, tuple[float, float]] = {
    TransformationId.MIXED_ENCODINGS: (0.8, 0.2),
    TransformationId.LEETSPEAK: (0.8, 0.2),
    TransformationId.HOMOPHONES: (0.2, 0.8),
    TransformationId.COGNITIVE: (0.2, 0.8),
    TransformationId.SINGULAR_PLURAL: (0.2, 0.8),
    TransformationId.MISSPELLING: (0.6, 0.4),
    TransformationId.FAT_FINGER: (0.6, 0.4),
}

_KNOWN_CONFUSION = 0.8


def levenshtein(a: str, b: str) -> int:
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + (ca != cb)))
        previous = current
    return previous[-1]


def _ratio(a: str, b: str) -> float:
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest


def soundex(text: str) -> str:
    out: list[str] = []
    prev = None
    for ch in text.lower():
        code = _SOUNDEX_CODES.get(ch)
        if code is not None and code != prev:
            out.append(code)
        prev = code
    return "".join(out)


class Scorer:
    """Computes a clamped ``[0, 1]`` similarity between target and variant."""

    def __init__(self, tables: LookupTables) -> None:
        self._lookalikes = tables.lookalike_pairs()
        self._confusions = tuple((word, alt) for word, alts in tables.cognitive for alt in alts)

    def visual(self, original: str, variant: str) -> float:
        similarity = _ratio(original, variant)
        bonus = 0.0
        if len(original) == len(variant) and original:
            matches = sum(1 for a, b in zip(original, variant) if a == b or (a, b) in self._lookalikes)
            bonus = matches / len(original)
        return _clamp(similarity * 0.7 + bonus * 0.3)

    def _semantic(self, original: str, variant: str) -> float:
        for word, alt in self._confusions:
            if (word in original and alt in variant) or (alt in original and word in variant):
                return _KNOWN_CONFUSION
        return _ratio(original, variant)

    def cognitive(self, original: str, variant: str) -> float:
        phonetic = _ratio(soundex(original), soundex(variant))
        longest = max(len(original), len(variant)) or 1
        length = 1.0 - abs(len(original) - len(variant)) / longest
        return _clamp(phonetic * 0.4 + self._semantic(original, variant) * 0.3 + length * 0.3)

    def score(self, original: Domain, variant: Domain, source: TransformationId) -> float:
        a, b = original.key, variant.key
        visual_weight, cognitive_weight = _BLEND.get(source, (0.5, 0.5))
        return _clamp(self.visual(a, b) * visual_weight + self.cognitive(a, b) * cognitive_weight)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))
