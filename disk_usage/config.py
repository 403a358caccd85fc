"""Optionale JSON-Config (Worker-Anzahl, Fortschrittsanzeige, Log-Level)."""

import json
import logging
from pathlib import Path

from .paths import CONFIG_PATH

DEFAULTS = {
    "max_workers": None,  # None = os.cpu_count()
    "progress": False,
    "log_level": "WARNING",
}


def load_config(path: Path = CONFIG_PATH) -> dict:
    """Liest die Config und ergänzt fehlende Werte mit DEFAULTS.

    Fehlende, unlesbare oder ungültige Dateien ergeben die Defaults.
    Unbekannte Keys werden ignoriert.
    """
    config = dict(DEFAULTS)
    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            return config
        if isinstance(data, dict):
            config.update({key: value for key, value in data.items() if key in DEFAULTS})

    workers = config["max_workers"]
    if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
        config["max_workers"] = None
    config["progress"] = bool(config["progress"])
    return config


def log_level(config: dict) -> int:
    """Log-Level aus der Config, WARNING bei unbekanntem Namen."""
    level = logging.getLevelName(str(config.get("log_level", "WARNING")).upper())
    return level if isinstance(level, int) else logging.WARNING
