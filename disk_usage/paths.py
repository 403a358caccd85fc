"""Pfad-Auflösung für Disk Usage.

Die optionale Config liegt im plattformüblichen User-Config-Verzeichnis
(via platformdirs). Geschrieben wird dort nichts.
"""

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "disk-usage"


def get_config_dir() -> Path:
    return Path(user_config_dir(APP_NAME, appauthor=False))


CONFIG_DIR = get_config_dir()

# Datei-Pfade
CONFIG_PATH = CONFIG_DIR / "config.json"
