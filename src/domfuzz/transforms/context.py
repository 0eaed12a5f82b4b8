"""Per-run inputs shared by every transformation generator."""

from __future__ import annotations

from dataclasses import dataclass

from domfuzz.domain.types import KeyboardLayout
from domfuzz.transforms.combinatorics import effective_bound
from domfuzz.transforms.tables import LookupTables


@dataclass(frozen=True)
class GenerationContext:
    """Read-only view of tables, dictionary, and tuning for one run."""

    tables: LookupTables
    dictionary: tuple[str, ...] | None = None
    max_substitutions: int | None = None
    keyboard_layouts: tuple[KeyboardLayout, ...] = tuple(KeyboardLayout)

    def bound(self, length: int) -> int:
        return effective_bound(length, self.max_substitutions)

    def neighbours(self, ch: str) -> str:
        return self.tables.neighbours(ch.lower(), self.keyboard_layouts)
