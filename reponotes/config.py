"""
Runtime configuration.

Values resolve as: environment variable > config file > default.

  REPONOTES_STORE_PATH      path of the local store file
  REPONOTES_STORE_KEY       namespaced key the notes mapping is stored under
  REPONOTES_MIRROR_URL      base URL of the remote mirror (unset: no mirroring)
  REPONOTES_MIRROR_PATH     mirror endpoint path
  REPONOTES_MIRROR_TIMEOUT  mirror request timeout in seconds
  REPONOTES_CONFIG          alternative config file path
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .store.local import DEFAULT_STORE_KEY
from .store.mirror import DEFAULT_MIRROR_PATH

LOGGER = logging.getLogger(__name__)

config_dir = os.path.expanduser("~/.config/reponotes")
config_path = os.path.join(config_dir, "config.json")


@dataclass(frozen=True)
class NotesConfig:
    store_path: str = os.path.join(config_dir, "store.json")
    store_key: str = DEFAULT_STORE_KEY
    mirror_url: Optional[str] = None
    mirror_path: str = DEFAULT_MIRROR_PATH
    mirror_timeout: float = 10.0


def _read_config_file(path: str) -> Dict[str, Any]:
    try:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
            LOGGER.warning("Ignoring config file %s: not a JSON object", path)
    except (json.JSONDecodeError, OSError) as exc:
        LOGGER.warning("Could not load config file %s: %s", path, exc)
    return {}


def load_config(path: Optional[str] = None) -> NotesConfig:
    """Resolve configuration from the environment and the JSON config file."""
    file_values = _read_config_file(
        path or os.getenv("REPONOTES_CONFIG") or config_path
    )
    defaults = NotesConfig()

    def pick(name: str, default: Any) -> Any:
        env = os.getenv(f"REPONOTES_{name.upper()}")
        if env:
            return env
        return file_values.get(name, default)

    timeout = pick("mirror_timeout", defaults.mirror_timeout)
    try:
        timeout = float(timeout)
    except (TypeError, ValueError):
        LOGGER.warning("Invalid mirror_timeout %r, using %s", timeout, defaults.mirror_timeout)
        timeout = defaults.mirror_timeout

    return NotesConfig(
        store_path=os.path.expanduser(str(pick("store_path", defaults.store_path))),
        store_key=str(pick("store_key", defaults.store_key)),
        mirror_url=pick("mirror_url", defaults.mirror_url) or None,
        mirror_path=str(pick("mirror_path", defaults.mirror_path)),
        mirror_timeout=timeout,
    )
