"""Persistent JSON config helpers.

Stores the UI theme, ingestion batch size, extra scan directories and the
index keying mode. All access is defensive: malformed or missing config falls
back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .index import DEFAULT_BATCH_SIZE

logger = logging.getLogger(__name__)

APP_NAME = "lazylauncher"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_batch_size() -> int:
    """Return the per-redraw ingestion batch size.

    Booleans and non-positive or non-integer values fall back to the default.
    """
    value = load_config().get("batch_size")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_BATCH_SIZE
    return value


def load_extra_dirs() -> list[Path]:
    """Return additional scan directories; non-string entries are dropped."""
    value = load_config().get("extra_dirs")
    if not isinstance(value, list):
        return []
    return [Path(item).expanduser() for item in value if isinstance(item, str) and item]


def load_key_by_path() -> bool:
    value = load_config().get("key_by_path")
    return value if isinstance(value, bool) else False
