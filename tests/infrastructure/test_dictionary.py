"""Tests for dictionary loading and default lookup."""

from pathlib import Path

import pytest

from domfuzz.infrastructure.dictionary import (
    BUILTIN_WORDS,
    default_dictionary,
    load_dictionary,
    resolve_dictionary,
    user_dictionary_path,
)


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("# brand words\nLogin\n\nsecure\n  pay  \nlogin\n", encoding="utf-8")
    return path


class TestLoadDictionary:
    def test_skips_comments_and_blanks(self, words_file: Path) -> None:
        assert load_dictionary(words_file) == ("login", "secure", "pay")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_dictionary(tmp_path / "nope.txt")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert load_dictionary(path) == ()


class TestDefaultDictionary:
    def test_user_path_follows_xdg(self, tmp_path: Path) -> None:
        assert user_dictionary_path() == tmp_path / "xdg" / "domfuzz" / "dictionary.txt"

    def test_home_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XDG_DATA_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert user_dictionary_path() == tmp_path / ".local" / "share" / "domfuzz" / "dictionary.txt"

    def test_builtin_when_no_user_file(self) -> None:
        assert default_dictionary() == BUILTIN_WORDS

    def test_user_file_wins(self) -> None:
        path = user_dictionary_path()
        path.parent.mkdir(parents=True)
        path.write_text("acme\nwidget\n")
        assert default_dictionary() == ("acme", "widget")


class TestResolveDictionary:
    def test_explicit_path(self, words_file: Path) -> None:
        assert resolve_dictionary(words_file) == ("login", "secure", "pay")

    def test_none_uses_default(self) -> None:
        assert resolve_dictionary(None) == BUILTIN_WORDS
