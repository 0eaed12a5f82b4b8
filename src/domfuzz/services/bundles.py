"""BundleResolver — expand user tokens into a concrete transformation set."""

from __future__ import annotations

from collections.abc import Iterable

from domfuzz.domain.errors import UnknownTransformationError
from domfuzz.domain.types import DEFAULT_BUNDLE, BundleId, TransformationId
from domfuzz.transforms.registry import TransformationRegistry

ALIASES: dict[str, tuple[TransformationId, ...]] = {
    "leetspeak": (TransformationId.LEETSPEAK,),
    "homoglyphs": (TransformationId.MIXED_ENCODINGS,),
    "misspellings": (TransformationId.MISSPELLING,),
    "visual-lookalike": (TransformationId.LEETSPEAK, TransformationId.MIXED_ENCODINGS),
    "keyboard": (TransformationId.FAT_FINGER,),
}


def split_tokens(tokens: Iterable[str]) -> list[str]:
    """Flatten comma-separated tokens, lowercase them, and drop blanks."""
    out = []
    for token in tokens:
        out.extend(part.strip().lower() for part in token.split(",") if part.strip())
    return out


class BundleResolver:
    """Maps ids, aliases, and bundle names to the union of transformation ids."""

    def __init__(self, registry: TransformationRegistry) -> None:
        self._registry = registry

    def expand(self, token: str) -> tuple[TransformationId, ...]:
        name = token.strip().lower()
        if name in ALIASES:
            return ALIASES[name]
        try:
            return self._registry.in_bundle(BundleId(name))
        except ValueError:
            pass
        try:
            return (TransformationId(name),)
        except ValueError:
            raise UnknownTransformationError(f"Unknown transformation or bundle: {token!r}", token=token) from None

    def resolve(self, tokens: Iterable[str] = ()) -> frozenset[TransformationId]:
        """Resolve *tokens* to an id set; no tokens means the default bundle.

        Raises:
            UnknownTransformationError: a token is not an id, alias, or bundle.
        """
        names = split_tokens(tokens)
        if not names:
            return frozenset(self._registry.in_bundle(DEFAULT_BUNDLE))
        enabled: set[TransformationId] = set()
        for name in names:
            enabled.update(self.expand(name))
        return frozenset(enabled)
