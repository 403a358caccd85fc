"""Fortschrittsanzeige (tqdm) während eines laufenden Scans.

Liest nur Zwischenstände der Zähler; das Ergebnis selbst wird erst nach
Ende des Scans ausgegeben.
"""

import sys
import threading

from tqdm import tqdm

from .counters import UsageCounters

POLL_INTERVAL_SECONDS = 0.1


class ScanProgress:
    """Daemon-Thread, der einen tqdm-Balken aus counters.snapshot() speist.

    Als Context-Manager verwenden::

        with ScanProgress(counters, "Parallel"):
            walk_parallel(path, counters)
    """

    def __init__(self, counters: UsageCounters, desc: str, enabled: bool = True, file=None):
        self._counters = counters
        self._desc = desc
        self._enabled = enabled
        self._file = file if file is not None else sys.stderr
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._bar: tqdm | None = None

    def __enter__(self) -> "ScanProgress":
        if not self._enabled:
            return self
        self._bar = tqdm(desc=self._desc, unit=" Ordner", file=self._file, leave=False)
        self._thread = threading.Thread(target=self._poll, name="disk-usage-progress", daemon=True)
        self._thread.start()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._update()
        self._bar.close()

    def _poll(self) -> None:
        while not self._stop.wait(POLL_INTERVAL_SECONDS):
            self._update()

    def _update(self) -> None:
        folders, files, _ = self._counters.snapshot()
        self._bar.n = folders
        self._bar.set_postfix(files=files, refresh=False)
        self._bar.refresh()
