"""
Environment helpers for the CLI.

- `load_dotenv_if_present()`: load `./.env` once, never overriding variables that
  are already set (handy for a local `OFFICEPARTY_LOG_LEVEL=DEBUG`).
- `resolve_config_path()`: relative config paths are taken from the working
  directory, or from `OFFICEPARTY_CONFIG_ROOT` when that is set.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` from the working directory; returns its path, or None if absent."""
    env_path = Path.cwd() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_config_path(path: str | Path) -> Path:
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    root = os.getenv("OFFICEPARTY_CONFIG_ROOT")
    base = Path(root).expanduser() if root else Path.cwd()
    return (base / p).resolve()
