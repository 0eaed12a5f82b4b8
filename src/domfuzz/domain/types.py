"""Transformation ids, categories, bundles, and check statuses.

Dispatch is by enum member through the registry; the string values are the
user-facing tokens accepted on the command line.
"""

from __future__ import annotations

from enum import StrEnum


class TransformationId(StrEnum):
    """Every registered transformation algorithm."""

    LEETSPEAK = "1337speak"
    MISSPELLING = "misspelling"
    FAT_FINGER = "fat-finger"
    MIXED_ENCODINGS = "mixed-encodings"
    BITSQUATTING = "bitsquatting"
    HOMOPHONES = "homophones"
    COGNITIVE = "cognitive"
    SINGULAR_PLURAL = "singular-plural"
    CARDINAL_SUBSTITUTION = "cardinal-substitution"
    ORDINAL_SUBSTITUTION = "ordinal-substitution"
    WORD_SWAP = "word-swap"
    HYPHENATION = "hyphenation"
    SUBDOMAIN = "subdomain"
    DOT_INSERTION = "dot-insertion"
    DOT_OMISSION = "dot-omission"
    DOT_HYPHEN_SUB = "dot-hyphen-sub"
    TLD_VARIATIONS = "tld-variations"
    INTL_TLD = "intl-tld"
    WRONG_SLD = "wrong-sld"
    COMBOSQUATTING = "combosquatting"
    BRAND_CONFUSION = "brand-confusion"
    DOMAIN_PREFIX = "domain-prefix"
    DOMAIN_SUFFIX = "domain-suffix"


class Category(StrEnum):
    """Algorithm families, in help-listing order."""

    CHARACTER = "character"
    PHONETIC = "phonetic"
    NUMERIC = "numeric"
    STRUCTURE = "structure"
    EXTENSION = "extension"


class BundleId(StrEnum):
    """Named, curated groupings of transformations."""

    LOOKALIKE = "lookalike"
    SYSTEM_FAULT = "system-fault"
    PHONETIC = "phonetic"
    NUMERIC = "numeric"
    STRUCTURE = "structure"
    EXTENSION = "extension"
    ALL = "all"


DEFAULT_BUNDLE = BundleId.LOOKALIKE


class KeyboardLayout(StrEnum):
    """Physical keyboard layouts with adjacency tables."""

    QWERTY = "qwerty"
    QWERTZ = "qwertz"
    AZERTY = "azerty"


class Classification(StrEnum):
    """Outcome a resolver can report for a registrable domain."""

    AVAILABLE = "available"
    REGISTERED = "registered"
    PARKED = "parked"


class CheckStatus(StrEnum):
    """Per-candidate status-check state.

    ``PENDING`` and ``RESOLVING`` are transient; the rest are terminal.
    """

    PENDING = "pending"
    RESOLVING = "resolving"
    AVAILABLE = "available"
    REGISTERED = "registered"
    PARKED = "parked"
    TIMED_OUT = "timeout"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self not in (CheckStatus.PENDING, CheckStatus.RESOLVING)

    @classmethod
    def from_classification(cls, classification: Classification) -> CheckStatus:
        return cls(classification.value)
