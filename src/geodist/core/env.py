"""
`.env` loading.

Lets a repo-local `.env` file carry `GEODIST_*` variables when the CLI or tests
run from a subdirectory. `GEODIST_ENV_FILE` points at an explicit file instead.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None).

    Never overrides variables already set in the process environment.
    """
    explicit = os.getenv("GEODIST_ENV_FILE")
    if explicit:
        env_path = Path(explicit).expanduser().resolve()
    else:
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        env_path = Path(found).resolve()

    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path
