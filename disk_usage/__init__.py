"""Disk Usage – Ordner, Dateien und Bytes eines Verzeichnisbaums zählen."""

__version__ = "1.0.0"
