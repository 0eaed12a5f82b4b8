"""Dictionary word lists for combosquatting, brand confusion, and word swaps.

Lookup order for the default list: ``$XDG_DATA_HOME/domfuzz/dictionary.txt``
(``~/.local/share`` when unset), then the built-in words below.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DICTIONARY_FILENAME = "dictionary.txt"

BUILTIN_WORDS: tuple[str, ...] = (
    "support", "secure", "login", "pay", "help", "service", "account", "portal", "center",
    "app", "online", "store", "shop", "mail", "cloud", "data", "mobile", "web", "digital",
    "tech", "pro", "plus", "premium", "official", "admin", "manage", "bank", "finance",
    "crypto",
)  # fmt: skip


def load_dictionary(path: Path) -> tuple[str, ...]:
    """Read one word per line; blank lines and ``#`` comments are skipped.

    Words are lowercased and de-duplicated, keeping first-seen order.
    """
    seen: dict[str, None] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        word = line.strip().lower()
        if word and not word.startswith("#"):
            seen.setdefault(word, None)
    logger.debug("Loaded %d dictionary words from %s", len(seen), path)
    return tuple(seen)


def user_dictionary_path() -> Path:
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(data_home) / "domfuzz" / DICTIONARY_FILENAME


def default_dictionary() -> tuple[str, ...]:
    """The user's XDG dictionary when present, else the built-in word list."""
    path = user_dictionary_path()
    if path.is_file():
        return load_dictionary(path)
    return BUILTIN_WORDS


def resolve_dictionary(path: Path | None) -> tuple[str, ...]:
    """An explicit *path* wins; otherwise :func:`default_dictionary`."""
    if path is not None:
        return load_dictionary(path)
    return default_dictionary()
