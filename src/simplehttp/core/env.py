"""`.env` loading for local overrides (timeouts, a custom User-Agent, transport choice)."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load one `.env` file, at most once per process; return its path (or None).

    `SIMPLEHTTP_ENV_FILE` names the file explicitly. Otherwise the nearest `.env`
    at or above the working directory is used. Variables already present in
    the process environment always win.
    """
    explicit = os.getenv("SIMPLEHTTP_ENV_FILE")
    if explicit:
        env_path = Path(explicit).expanduser()
    else:
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        env_path = Path(found)

    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path
