"""Tests for the static lookup tables."""

from __future__ import annotations

import unicodedata

from domfuzz.domain.types import KeyboardLayout
from domfuzz.transforms.tables import default_tables


class TestKeyboardAdjacency:
    def test_same_row_and_neighbouring_rows(self) -> None:
        tables = default_tables()
        near = tables.neighbours("g", (KeyboardLayout.QWERTY,))
        assert set(near) == {"f", "h", "t", "y", "v", "b"}

    def test_digit_row_included(self) -> None:
        tables = default_tables()
        assert "1" in tables.neighbours("q", (KeyboardLayout.QWERTY,))

    def test_layout_union_dedupes(self) -> None:
        tables = default_tables()
        near = tables.neighbours("x", tuple(KeyboardLayout))
        assert len(near) == len(set(near))
        assert "y" in near  # from QWERTZ
        assert "w" in near  # from AZERTY


class TestHomoglyphs:
    def test_ranked_by_weight(self) -> None:
        tables = default_tables()
        for glyphs in tables.homoglyphs.values():
            weights = [g.weight for g in glyphs]
            assert weights == sorted(weights, reverse=True)

    def test_no_glyph_normalises_to_its_source(self) -> None:
        tables = default_tables()
        for ch, glyphs in tables.homoglyphs.items():
            for glyph in glyphs:
                assert unicodedata.normalize("NFKC", glyph.char) != ch

    def test_lookalike_pairs_symmetric(self) -> None:
        pairs = default_tables().lookalike_pairs()
        assert ("o", "0") in pairs
        assert ("0", "o") in pairs
