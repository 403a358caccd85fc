"""Zähler für Ordner, Dateien und Bytes – threadsicher pro Feld."""

import threading
from typing import NamedTuple


class UsageTotals(NamedTuple):
    """Ergebnis eines Scans: (folders, files, bytes)."""

    folders: int = 0
    files: int = 0
    bytes: int = 0


class UsageCounters:
    """Laufende Summen eines einzelnen Scans.

    Jedes Feld hat ein eigenes Lock, damit sich z.B. Byte- und
    Ordner-Updates aus verschiedenen Threads nicht gegenseitig blockieren.
    Konsistent ist das Tripel erst, wenn der Scan vollständig beendet ist.
    """

    def __init__(self):
        self._folders = 0
        self._files = 0
        self._bytes = 0

        self._folder_lock = threading.Lock()
        self._file_lock = threading.Lock()
        self._byte_lock = threading.Lock()

    def add_file(self, size: int) -> None:
        with self._file_lock:
            self._files += 1
        with self._byte_lock:
            self._bytes += size

    def add_folder(self) -> None:
        with self._folder_lock:
            self._folders += 1

    def reset(self) -> None:
        """Setzt alle Summen auf 0. Nur aufrufen, wenn kein Scan mehr läuft."""
        self._folders = 0
        self._files = 0
        self._bytes = 0

    def snapshot(self) -> UsageTotals:
        """Aktueller Stand. Während eines Scans nur als Fortschritt verwendbar."""
        return UsageTotals(self._folders, self._files, self._bytes)

    def __repr__(self) -> str:
        folders, files, size = self.snapshot()
        return f"UsageCounters(folders={folders}, files={files}, bytes={size})"
