"""
Equation recognizer — local JSON storage for settings and history.

Data is persisted in ``<project>/data/recognizer.json``.
"""

import json
import os
import time
from datetime import datetime

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "recognizer.json")

# ── Default settings ────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "prompt": "give an equation: ",
    "sentinel": "!",          # a line starting with this ends the loop
    "keep_history": True,
    "history_limit": 100,
    "log_level": "INFO",
}


def _ensure_dir() -> None:
    os.makedirs(_DATA_DIR, exist_ok=True)


def _load_db() -> dict:
    try:
        _ensure_dir()
        if os.path.exists(_DATA_FILE):
            with open(_DATA_FILE, "r", encoding="utf-8") as f:
                db = json.load(f)
            if isinstance(db, dict):
                return db
    except (json.JSONDecodeError, OSError):
        pass
    return {"settings": dict(DEFAULT_SETTINGS), "history": []}


def _save_db(db: dict) -> None:
    _ensure_dir()
    with open(_DATA_FILE, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


# ── Settings ─────────────────────────────────────────────────────────────

def get_settings() -> dict:
    """Return stored settings merged over the defaults."""
    db = _load_db()
    # Merge with defaults so new keys are always present
    merged = dict(DEFAULT_SETTINGS)
    merged.update(db.get("settings", {}))
    return merged


def save_settings(settings: dict) -> None:
    db = _load_db()
    db["settings"] = settings
    _save_db(db)


# ── History ──────────────────────────────────────────────────────────────

def add_history(equation: str, verdict: str) -> None:
    """Record a classified line (newest first)."""
    db = _load_db()
    limit = db.get("settings", {}).get("history_limit", DEFAULT_SETTINGS["history_limit"])
    record = {
        "equation": equation,
        "verdict": verdict,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "epoch": time.time(),
    }
    history = db.setdefault("history", [])
    history.insert(0, record)
    db["history"] = history[:limit]
    _save_db(db)


def get_history() -> list[dict]:
    return _load_db().get("history", [])


def clear_history() -> None:
    db = _load_db()
    db["history"] = []
    _save_db(db)
