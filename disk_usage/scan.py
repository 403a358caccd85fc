"""Disk Usage – CLI-Einstiegspunkt.

Berechnet Ordneranzahl, Dateianzahl und Gesamtgröße eines Verzeichnisbaums,
sequentiell (-s), parallel (-p) oder beides nacheinander (-b), jeweils mit
Zeitmessung.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from . import __version__
from .analyzer import walk
from .config import load_config, log_level
from .counters import UsageCounters, UsageTotals
from .progress import ScanProgress
from .report import HELP_MESSAGE, format_header, format_run
from .utils import format_count, format_size

log = logging.getLogger("scan")

# Modus-Flag → Durchläufe (Label, parallel) in Ausführungsreihenfolge
MODES = {
    "-s": [("Sequential", False)],
    "-p": [("Parallel", True)],
    "-b": [("Parallel", True), ("Sequential", False)],
}


def setup_logging(config: dict) -> None:
    """Loggt nach stderr; Dateien werden nicht geschrieben."""
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level(config),
        format="%(asctime)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def time_walk(
    path: str,
    counters: UsageCounters,
    parallel: bool,
    max_workers: int | None = None,
    progress: bool = False,
) -> tuple[float, UsageTotals]:
    """Führt einen Scan aus, misst die Zeit und setzt die Zähler danach zurück.

    Returns:
        (Laufzeit in Sekunden, Summen des Scans)
    """
    label = "Parallel" if parallel else "Sequential"
    log.info(f"Starte {label}-Scan: {path}")

    start = time.perf_counter()
    try:
        with ScanProgress(counters, label, enabled=progress):
            walk(path, counters, parallel, max_workers=max_workers)
        elapsed = time.perf_counter() - start
        totals = counters.snapshot()
    finally:
        counters.reset()

    log.info(
        f"{label}-Scan abgeschlossen in {elapsed:.3f}s: {format_count(totals.folders)} Ordner, "
        f"{format_count(totals.files)} Dateien, {format_size(totals.bytes)}"
    )
    return elapsed, totals


def run_mode(
    mode: str,
    path: str,
    counters: UsageCounters | None = None,
    config: dict | None = None,
    out=None,
) -> list[tuple[str, float, UsageTotals]]:
    """Führt alle Durchläufe eines Modus aus und gibt den Report aus.

    Bei -b läuft der sequentielle Scan erst, wenn der parallele vollständig
    beendet und die Zähler zurückgesetzt sind.

    Raises:
        ValueError: Bei unbekanntem Modus-Flag.
    """
    if mode not in MODES:
        raise ValueError(f"Unbekannter Modus: {mode}")
    if counters is None:
        counters = UsageCounters()
    if config is None:
        config = load_config()

    stream = out if out is not None else sys.stdout
    print(format_header(path), file=stream, flush=True)

    runs = []
    for label, parallel in MODES[mode]:
        elapsed, totals = time_walk(
            path,
            counters,
            parallel,
            max_workers=config.get("max_workers"),
            progress=config.get("progress", False),
        )
        if runs:
            print("", file=stream)
        print(format_run(label, elapsed, totals), file=stream, flush=True)
        runs.append((label, elapsed, totals))
    return runs


def run_usage(path: str, parallel: bool = True, max_workers: int | None = None) -> UsageTotals:
    """Programmatischer Einstiegspunkt (ohne Report/Zeitmessung).

    Args:
        path: Wurzelverzeichnis; die Wurzel selbst zählt nicht als Ordner.
        parallel: Paralleler oder sequentieller Scan.
        max_workers: Pool-Größe für den parallelen Scan (None = CPU-Anzahl).

    Raises:
        FileNotFoundError: Wenn der Pfad nicht existiert.
        NotADirectoryError: Wenn der Pfad kein Verzeichnis ist.
    """
    scan_path = Path(path)
    if not scan_path.exists():
        raise FileNotFoundError(f"Pfad existiert nicht: {scan_path}")
    if not scan_path.is_dir():
        raise NotADirectoryError(f"Pfad ist kein Verzeichnis: {scan_path}")

    counters = UsageCounters()
    walk(scan_path, counters, parallel, max_workers=max_workers)
    return counters.snapshot()


class UsageError(Exception):
    """Ungültiger Aufruf; wird mit dem Hilfetext beantwortet."""


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser, der bei Fehlern nicht beendet, sondern UsageError wirft."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> UsageParser:
    parser = UsageParser(prog="du", add_help=False)
    modes = parser.add_mutually_exclusive_group(required=True)
    modes.add_argument("-s", dest="mode", action="store_const", const="-s", help="Sequentieller Scan")
    modes.add_argument("-p", dest="mode", action="store_const", const="-p", help="Paralleler Scan")
    modes.add_argument("-b", dest="mode", action="store_const", const="-b", help="Parallel, dann sequentiell")
    parser.add_argument("path", help="Pfad zum Ordner")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        parsed = build_parser().parse_args(args)
    except UsageError:
        # Falsche Aufrufe zeigen nur die Hilfe und enden mit Exit-Code 0
        print(HELP_MESSAGE)
        if len(args) == 2:
            print("")
        return

    config = load_config()
    setup_logging(config)
    log.info(f"disk-usage {__version__}, Modus {parsed.mode}")
    run_mode(parsed.mode, parsed.path, config=config)

    print("")


if __name__ == "__main__":
    main()
