"""Config file discovery and loading.

Walk-up finder locates netd3.toml from the working directory towards the
filesystem root. The NETD3_CONFIG env var short-circuits the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from netd3.config.models import NetConfig

CONFIG_FILENAME = "netd3.toml"
CONFIG_ENV_VAR = "NETD3_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest netd3.toml at or above *start* (default: cwd)."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> NetConfig:
    """Load and validate config; defaults when no file is found."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return NetConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return NetConfig.model_validate(data)
