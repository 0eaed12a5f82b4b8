"""CandidateGenerator — merge enabled transformations into one lazy stream."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from domfuzz.domain.errors import MissingDictionaryError
from domfuzz.domain.models import Candidate
from domfuzz.domain.names import Domain
from domfuzz.domain.types import KeyboardLayout, TransformationId
from domfuzz.transforms.context import GenerationContext
from domfuzz.transforms.registry import TransformationRegistry, TransformationSpec

logger = logging.getLogger(__name__)


class CandidateGenerator:
    """Chains each enabled transformation's candidates in registration order.

    The same ``(domain, enabled ids, dictionary)`` always yields the same
    sequence. Closing the returned generator closes the active inner one.
    """

    def __init__(
        self,
        registry: TransformationRegistry,
        enabled: Iterable[TransformationId],
        *,
        dictionary: Iterable[str] | None = None,
        max_substitutions: int | None = None,
        keyboard_layouts: Iterable[KeyboardLayout] | None = None,
    ) -> None:
        self.registry = registry
        self.specs: list[TransformationSpec] = registry.ordered(enabled)
        words = tuple(dictionary) if dictionary is not None else None
        missing = [s.id.value for s in self.specs if s.requires_dictionary and not words]
        if missing:
            raise MissingDictionaryError(
                f"A dictionary is required for: {', '.join(missing)}",
                transformations=missing,
            )
        self.context = GenerationContext(
            tables=registry.tables,
            dictionary=words,
            max_substitutions=max_substitutions,
            keyboard_layouts=tuple(keyboard_layouts) if keyboard_layouts else tuple(KeyboardLayout),
        )

    def is_unicode_source(self, source: TransformationId) -> bool:
        return self.registry.get(source).allows_unicode

    def generate(self, domain: Domain) -> Iterator[Candidate]:
        for spec in self.specs:
            logger.debug("Generating %s for %s", spec.id.value, domain.name)
            yield from spec.generate(domain, self.context, self.registry.scorer)
