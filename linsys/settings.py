"""
linsys: local JSON storage for settings.

Data is persisted in ``<project>/data/linsys.json``.
"""

import json
import logging
import os

from linsys.formatting import COMPUTE_MODES

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "linsys.json")

# ── Default settings ─────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "compute_mode": "symbolic",    # "symbolic", "numerical"
    "decimal_places": 10,          # numerical mode only
    "log_level": "WARNING",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _ensure_dir() -> None:
    os.makedirs(_DATA_DIR, exist_ok=True)


def _load_db() -> dict:
    if os.path.exists(_DATA_FILE):
        try:
            with open(_DATA_FILE, "r", encoding="utf-8") as f:
                db = json.load(f)
            if isinstance(db, dict):
                return db
            logger.warning("Ignoring malformed settings file %s", _DATA_FILE)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", _DATA_FILE, exc)
    return {"settings": dict(DEFAULT_SETTINGS)}


def _save_db(db: dict) -> None:
    _ensure_dir()
    with open(_DATA_FILE, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


def _validate(settings: dict) -> None:
    unknown = set(settings) - set(DEFAULT_SETTINGS)
    if unknown:
        raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}.")
    mode = settings.get("compute_mode", DEFAULT_SETTINGS["compute_mode"])
    if mode not in COMPUTE_MODES:
        raise ValueError(
            f"compute_mode must be one of {', '.join(COMPUTE_MODES)}. Received {mode!r}."
        )
    places = settings.get("decimal_places", DEFAULT_SETTINGS["decimal_places"])
    if isinstance(places, bool) or not isinstance(places, int) or not 0 <= places <= 30:
        raise ValueError(
            f"decimal_places must be an integer between 0 and 30. Received {places!r}."
        )
    level = settings.get("log_level", DEFAULT_SETTINGS["log_level"])
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {', '.join(_LOG_LEVELS)}. Received {level!r}."
        )


# ── Settings ─────────────────────────────────────────────────────────────

def get_settings() -> dict:
    """Return the stored settings merged over the defaults.

    A stored value that fails validation is logged and replaced by its
    default.
    """
    db = _load_db()
    stored = db.get("settings", {})
    if not isinstance(stored, dict):
        logger.warning("Ignoring malformed settings in %s", _DATA_FILE)
        stored = {}
    merged = dict(DEFAULT_SETTINGS)
    for key, value in stored.items():
        try:
            _validate({key: value})
        except ValueError as exc:
            logger.warning("Ignoring stored setting %r: %s", key, exc)
            continue
        merged[key] = value
    return merged


def save_settings(settings: dict) -> None:
    """Validate and persist *settings* (missing keys keep their value)."""
    _validate(settings)
    db = _load_db()
    current = get_settings()
    current.update(settings)
    db["settings"] = current
    _save_db(db)


def reset_settings() -> None:
    """Restore the defaults."""
    db = _load_db()
    db["settings"] = dict(DEFAULT_SETTINGS)
    _save_db(db)
