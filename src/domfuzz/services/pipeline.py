"""DedupStreamPipeline — validate, deduplicate, cap, and batch candidates.

INVARIANT: no two accepted candidates share a case-insensitive name, the
target itself is never accepted, and at most ``max_variations`` candidates
are accepted per run. Reaching the cap closes the upstream generator.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import asdict, dataclass
from typing import Any

from domfuzz.domain.models import Candidate
from domfuzz.domain.names import Domain, is_valid_hostname
from domfuzz.services.generator import CandidateGenerator

logger = logging.getLogger(__name__)


@dataclass
class PipelineStats:
    """Counters for one pipeline run; owned by the pipeline."""

    accepted: int = 0
    invalid: int = 0
    duplicate: int = 0
    below_threshold: int = 0
    capped: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class DedupStreamPipeline:
    """Single-use filter between the generator and the sinks."""

    def __init__(
        self,
        generator: CandidateGenerator,
        *,
        max_variations: int,
        batch_size: int,
        min_score: float | None = None,
    ) -> None:
        if max_variations <= 0 or batch_size <= 0:
            raise ValueError("max_variations and batch_size must be positive")
        self.generator = generator
        self.max_variations = max_variations
        self.batch_size = batch_size
        self.min_score = min_score
        self.stats = PipelineStats()

    def _is_valid(self, candidate: Candidate, *, unicode_input: bool) -> bool:
        allow_unicode = unicode_input or self.generator.is_unicode_source(candidate.source)
        return is_valid_hostname(candidate.name, allow_unicode=allow_unicode)

    def candidates(self, domain: Domain) -> Iterator[Candidate]:
        """Yield accepted candidates; first producer of a name wins."""
        stats = self.stats
        seen = {domain.key}
        unicode_input = not domain.is_ascii
        stream = self.generator.generate(domain)
        try:
            for candidate in stream:
                if not self._is_valid(candidate, unicode_input=unicode_input):
                    stats.invalid += 1
                    continue
                if self.min_score is not None and candidate.score < self.min_score:
                    stats.below_threshold += 1
                    continue
                if candidate.key in seen:
                    stats.duplicate += 1
                    continue
                seen.add(candidate.key)
                stats.accepted += 1
                yield candidate
                if stats.accepted >= self.max_variations:
                    stats.capped = True
                    logger.debug("Reached cap of %d candidates", self.max_variations)
                    break
        finally:
            stream.close()

    def batches(self, domain: Domain) -> Iterator[list[Candidate]]:
        """Release accepted candidates in lists of at most ``batch_size``."""
        stream = self.candidates(domain)
        try:
            for batch in itertools.batched(stream, self.batch_size):
                yield list(batch)
        finally:
            stream.close()
