"""Application settings with JSON persistence.

Settings are stored at:
    ~/.local/share/pomotasks/settings.json

Usage::

    settings = load_settings()
    settings.auto_advance = True
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .database.db import APP_SUPPORT_DIR

logger = logging.getLogger(__name__)

SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences.

    Period lengths are fixed in ``timer.engine.DURATIONS``.
    """

    # ── timer ─────────────────────────────────────────────────────────
    auto_advance: bool = False             # start the next period by itself

    # ── history ───────────────────────────────────────────────────────
    history_enabled: bool = True

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool = False
    log_file: str | None = None


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
