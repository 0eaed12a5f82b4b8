"""Shared pytest fixtures and test helpers for domfuzz tests."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from domfuzz.config.models import FuzzConfig
from domfuzz.domain.models import Candidate
from domfuzz.domain.names import Domain, parse_domain
from domfuzz.domain.types import Classification, TransformationId
from domfuzz.infrastructure.dictionary import BUILTIN_WORDS
from domfuzz.services.generator import CandidateGenerator
from domfuzz.services.telemetry import disable_telemetry
from domfuzz.transforms.context import GenerationContext
from domfuzz.transforms.registry import TransformationRegistry, build_registry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(scope="session")
def registry() -> TransformationRegistry:
    """The default registry; immutable, so shared across the session."""
    return build_registry()


@pytest.fixture
def ctx(registry: TransformationRegistry) -> GenerationContext:
    """Generation context with the built-in dictionary."""
    return GenerationContext(tables=registry.tables, dictionary=BUILTIN_WORDS)


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user config and dictionaries from leaking into tests."""
    for var in ("DOMFUZZ_CONFIG", "DOMFUZZ_VERBOSE", "DOMFUZZ_QUIET", "DOMFUZZ_JSON_OUTPUT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Iterator[None]:
    """Undo the logging and telemetry setup a CLI invocation leaves behind."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    pkg_level = logging.getLogger("domfuzz").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("domfuzz").setLevel(pkg_level)
    disable_telemetry()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def variants(
    factory: Callable[[Domain, GenerationContext], Iterable[Domain]], name: str, ctx: GenerationContext
) -> list[str]:
    """Run one transformation factory and return the variant names."""
    return [d.name for d in factory(parse_domain(name), ctx)]


def make_candidates(count: int, source: TransformationId = TransformationId.TLD_VARIATIONS) -> list[Candidate]:
    return [Candidate(Domain(f"host{i}", "com"), source, 0.5) for i in range(count)]


def generator_for(registry: TransformationRegistry, *ids: TransformationId, **kwargs: object) -> CandidateGenerator:
    return CandidateGenerator(registry, ids, **kwargs)  # type: ignore[arg-type]


class FixedResolver:
    """Resolver stub returning one classification, recording every lookup."""

    def __init__(self, classification: Classification = Classification.AVAILABLE, delay: float = 0.0) -> None:
        self.classification = classification
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.peak = 0

    async def resolve(self, name: str, timeout: float) -> Classification:
        self.calls.append(name)
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            return self.classification
        finally:
            self.in_flight -= 1


class MappedResolver:
    """Resolver stub driven by a name -> classification (or exception) map."""

    def __init__(
        self, mapping: dict[str, Classification | Exception], default: Classification = Classification.AVAILABLE
    ) -> None:
        self.mapping = mapping
        self.default = default

    async def resolve(self, name: str, timeout: float) -> Classification:
        outcome = self.mapping.get(name, self.default)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class HangingResolver:
    """Resolver stub that never answers within any sane timeout."""

    async def resolve(self, name: str, timeout: float) -> Classification:
        await asyncio.sleep(3600)
        return Classification.REGISTERED


def quick_config(**overrides: object) -> FuzzConfig:
    return FuzzConfig.model_validate({"dictionary": BUILTIN_WORDS, **overrides})
