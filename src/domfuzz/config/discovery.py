"""Config file discovery.

Walks up from the working directory looking for ``domfuzz.toml``, the way
git finds ``.git/``. ``DOMFUZZ_CONFIG`` and ``--config`` override the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "domfuzz.toml"
CONFIG_ENV_VAR = "DOMFUZZ_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``domfuzz.toml`` at or above *start*, or None.

    When ``DOMFUZZ_CONFIG`` is set it is used exclusively: an unreadable
    path means no config at all, not a fallback to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
