# storage.py
"""
Filesystem layout and persistence helpers.

All data for the application lives under DATA_ROOT (default /data).
"""

import os
import json
from pathlib import Path
from typing import Any

from nicegui import app

import logging
logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Root & directory layout (configurable)
# -------------------------------------------------------------------

DATA_ROOT: Path = Path(os.getenv("SENTINEL_DATA_ROOT", "/data"))

ADDON_CONFIG_FILE = DATA_ROOT / 'options.json'
SERVERS_FILE = DATA_ROOT / 'servers.json'

# -------------------------------------------------------------------
# Initialization
# -------------------------------------------------------------------
def _ensure_dirs() -> None:
    """
    Ensure required directories exist.
    """
    try:
        DATA_ROOT.mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.warning(f"Data root {DATA_ROOT} could not be created")

_ensure_dirs()


# -------------------------------------------------------------------
# JSON helpers
# -------------------------------------------------------------------
def load_json(path: Path, default: Any):
    if not path.exists():
        logger.debug(f"No JSON file found at {path}")
        return default
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError:
        logger.warning(f"Load JSON file failed: {path}")
        return default

def save_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, sort_keys=True))


# -------------------------------------------------------------------
# Key/value slot stores
# -------------------------------------------------------------------
class JsonFileStore:
    """
    File backed key/value store.

    Behaves like the subset of a dict the server registry needs
    (``get`` and item assignment), so it can stand in for
    ``app.storage.user`` outside a browser session.
    """

    def __init__(self, path: Path = SERVERS_FILE):
        self.path = Path(path)

    def _load(self) -> dict:
        data = load_json(self.path, {})
        if not isinstance(data, dict):
            logger.warning(f"{self.path} does not hold a JSON object, ignoring its content")
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._load()[key]

    def __setitem__(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        save_json(self.path, data)

    def __contains__(self, key: str) -> bool:
        return key in self._load()


def registry_store():
    """
    Backing store for the server registry.

    ``registry.store`` = ``file`` in options.json shares one list (SERVERS_FILE)
    between all browsers. The default keeps a list per browser in
    ``app.storage.user``, falling back to the file outside a page context.
    """
    if get_option('registry', 'store', 'browser') == 'file':
        return JsonFileStore(SERVERS_FILE)
    try:
        return app.storage.user
    except RuntimeError as e:
        logger.warning(f"Browser storage unavailable ({e}), using {SERVERS_FILE}")
        return JsonFileStore(SERVERS_FILE)


# -------------------------------------------------------------------
# Addon config helpers
# -------------------------------------------------------------------
def get_option(section: str, key: str, default: Any = None) -> Any:
    """
    Read a single value from the add-on options file.
    Missing file, section or key falls back to the default.
    """
    addon_options = load_json(ADDON_CONFIG_FILE, {})
    try:
        return addon_options[section][key]
    except (KeyError, TypeError):
        logger.debug(f"Option {section}.{key} not configured, using default {default!r}")
        return default
