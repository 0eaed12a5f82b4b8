"""Tests for config models: defaults, sparse overrides, and FuzzConfig."""

import pytest
from pydantic import ValidationError

from domfuzz.config.models import CheckerConfig, FuzzConfig, GenerationConfig
from domfuzz.config.settings import DomfuzzSettings
from domfuzz.domain.types import KeyboardLayout


class TestSections:
    def test_generation_defaults(self) -> None:
        cfg = GenerationConfig()
        assert cfg.transformations == []
        assert cfg.max_variations == 1000
        assert cfg.batch_size == 20
        assert cfg.max_substitutions is None
        assert cfg.keyboard_layouts == list(KeyboardLayout)
        assert cfg.sort == "generation"

    def test_checker_defaults(self) -> None:
        cfg = CheckerConfig()
        assert cfg.enabled is False
        assert cfg.concurrency_limit == 15
        assert cfg.per_check_timeout == 5.0
        assert (cfg.rdap, cfg.whois, cfg.dns, cfg.http_probe) == (True, True, True, False)

    def test_rejects_zero_max_variations(self) -> None:
        with pytest.raises(ValidationError):
            GenerationConfig(max_variations=0)

    def test_rejects_unknown_layout(self) -> None:
        with pytest.raises(ValidationError):
            GenerationConfig(keyboard_layouts=["dvorak"])


class TestFuzzConfig:
    def test_defaults(self) -> None:
        cfg = FuzzConfig()
        assert cfg.transformations == ()
        assert cfg.check_status is False
        assert cfg.dictionary is None
        assert cfg.keyboard_layouts == tuple(KeyboardLayout)

    def test_only_registered_implies_check(self) -> None:
        assert FuzzConfig(only_registered=True).check_status is True

    def test_only_available_implies_check(self) -> None:
        assert FuzzConfig(only_available=True).check_status is True

    def test_min_score_bounds(self) -> None:
        with pytest.raises(ValidationError):
            FuzzConfig(min_score=1.5)

    def test_frozen(self) -> None:
        cfg = FuzzConfig()
        with pytest.raises(ValidationError):
            cfg.max_variations = 5  # type: ignore[misc]


class TestFromSettings:
    def test_settings_flow_through(self) -> None:
        settings = DomfuzzSettings(
            generation=GenerationConfig(transformations=["all"], max_variations=50, sort="score"),
            checker=CheckerConfig(enabled=True, concurrency_limit=4),
        )
        cfg = FuzzConfig.from_settings(settings)
        assert cfg.transformations == ("all",)
        assert cfg.max_variations == 50
        assert cfg.sort == "score"
        assert cfg.check_status is True
        assert cfg.concurrency_limit == 4

    def test_overrides_win(self) -> None:
        settings = DomfuzzSettings(generation=GenerationConfig(max_variations=50))
        cfg = FuzzConfig.from_settings(settings, max_variations=7, transformations=("bitsquatting",))
        assert cfg.max_variations == 7
        assert cfg.transformations == ("bitsquatting",)

    def test_none_overrides_ignored(self) -> None:
        settings = DomfuzzSettings(generation=GenerationConfig(batch_size=3))
        cfg = FuzzConfig.from_settings(settings, batch_size=None)
        assert cfg.batch_size == 3
