"""Tests for character-level transformations."""

from __future__ import annotations

import dataclasses

from domfuzz.domain.types import KeyboardLayout
from domfuzz.transforms import character
from domfuzz.transforms.context import GenerationContext
from domfuzz.transforms.registry import TransformationRegistry
from domfuzz.transforms.tables import BITFLIP_ALPHABET
from tests.conftest import variants


class TestLeetspeak:
    def test_single_substitutions_with_bound_one(self, ctx: GenerationContext) -> None:
        ctx = dataclasses.replace(ctx, max_substitutions=1)
        out = variants(character.leetspeak, "google.com", ctx)
        assert "g0ogle.com" in out
        assert "go0gle.com" in out
        assert "g00gle.com" not in out

    def test_pairs_with_default_bound(self, ctx: GenerationContext) -> None:
        out = variants(character.leetspeak, "google.com", ctx)
        assert "g00gle.com" in out
        assert "9oog1e.com" in out

    def test_multi_char_replacement(self, ctx: GenerationContext) -> None:
        assert "rnodern.com" in variants(character.leetspeak, "modern.com", ctx)

    def test_tld_untouched(self, ctx: GenerationContext) -> None:
        assert all(name.endswith(".com") for name in variants(character.leetspeak, "google.com", ctx))


class TestMisspelling:
    def test_edit_kinds(self, ctx: GenerationContext) -> None:
        out = variants(character.misspelling, "example.com", ctx)
        assert "exmple.com" in out  # deletion
        assert "exapmle.com" in out  # transposition
        assert "exampla.com" in out  # vowel swap
        assert "exanple.com" in out  # adjacent key
        assert "exaample.com" in out  # vowel insertion

    def test_dots_inside_label_kept(self, ctx: GenerationContext) -> None:
        out = variants(character.misspelling, "mail.example.com", ctx)
        assert all(name.count(".") == 2 for name in out)


class TestFatFinger:
    def test_repeat_substitute_and_insert(self, ctx: GenerationContext) -> None:
        out = variants(character.fat_finger, "example.com", ctx)
        assert "eexample.com" in out
        assert "ezample.com" in out
        assert "ezxample.com" in out

    def test_layout_restricts_neighbours(self, registry: TransformationRegistry) -> None:
        qwerty = GenerationContext(tables=registry.tables, keyboard_layouts=(KeyboardLayout.QWERTY,))
        out = variants(character.fat_finger, "example.com", qwerty)
        # 'y' sits next to 'x' only on QWERTZ.
        assert "eyample.com" not in out
        assert "ezample.com" in out

    def test_hyphen_never_repeated(self, ctx: GenerationContext) -> None:
        assert "my--site.com" not in variants(character.fat_finger, "my-site.com", ctx)


class TestMixedEncodings:
    def test_single_lookalike(self, ctx: GenerationContext) -> None:
        assert "gоogle.com" in variants(character.mixed_encodings, "google.com", ctx)

    def test_short_label_pairs_stay_in_one_script(self, ctx: GenerationContext) -> None:
        out = variants(character.mixed_encodings, "google.com", ctx)
        assert "gооgle.com" in out  # cyrillic + cyrillic
        assert "gоοgle.com" not in out  # cyrillic + greek

    def test_every_variant_is_unicode(self, ctx: GenerationContext) -> None:
        assert all(not name.isascii() for name in variants(character.mixed_encodings, "paypal.com", ctx))


class TestBitsquatting:
    def test_known_flip(self, ctx: GenerationContext) -> None:
        assert "foogle.com" in variants(character.bitsquatting, "google.com", ctx)

    def test_no_case_only_variants(self, ctx: GenerationContext) -> None:
        out = variants(character.bitsquatting, "google.com", ctx)
        assert all(name.lower() != "google.com" for name in out)

    def test_flips_stay_dns_legal(self, ctx: GenerationContext) -> None:
        for name in variants(character.bitsquatting, "google.com", ctx):
            label = name.removesuffix(".com")
            assert all(ch in BITFLIP_ALPHABET for ch in label)

    def test_dots_not_flipped(self, ctx: GenerationContext) -> None:
        out = variants(character.bitsquatting, "mail.example.com", ctx)
        assert all(name.count(".") == 2 for name in out)
