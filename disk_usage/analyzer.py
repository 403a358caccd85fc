"""Ordneranalyse – Ordner, Dateien und Bytes rekursiv zählen.

Zwei Strategien mit identischem Ergebnis:

* ``walk_sequential`` – depth-first auf dem aufrufenden Thread.
* ``walk_parallel`` – ein Task pro Unterordner in einem gemeinsamen
  Thread-Pool, Rückkehr erst wenn der gesamte Teilbaum fertig ist.

Nicht lesbare Ordner/Einträge werden stillschweigend übersprungen; die
Summen sind dann eine Untergrenze.
"""

import os
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .counters import UsageCounters


@dataclass
class DirectoryListing:
    """Direkte Dateien (Größen) und Unterordner eines Ordners."""

    file_sizes: list[int] = field(default_factory=list)
    subdirectories: list[str] = field(default_factory=list)


def list_directory(path: str | Path) -> DirectoryListing:
    """Listet einen Ordner mit os.scandir() auf.

    Symlinks werden weder gezählt noch verfolgt. Fehler beim Öffnen ergeben
    ein leeres Listing, Fehler beim Iterieren beenden das Listing mit dem
    bisher Gelesenen, Fehler bei einem einzelnen Eintrag überspringen ihn.
    """
    listing = DirectoryListing()
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_file(follow_symlinks=False):
                        listing.file_sizes.append(entry.stat(follow_symlinks=False).st_size)
                    elif entry.is_dir(follow_symlinks=False):
                        listing.subdirectories.append(entry.path)
                except OSError:
                    continue
    except OSError:
        pass
    return listing


def _visit(path: str, counters: UsageCounters) -> list[str]:
    """Zählt die Dateien eines Ordners und gibt seine Unterordner zurück."""
    listing = list_directory(path)
    for size in listing.file_sizes:
        counters.add_file(size)
    return listing.subdirectories


def walk_sequential(root: str | Path, counters: UsageCounters) -> None:
    """Depth-first Scan, ein Unterordner nach dem anderen.

    Iterativ mit eigenem Stack; die Baumtiefe ist nicht durch das
    Rekursionslimit begrenzt.
    """
    stack = [os.fspath(root)]
    while stack:
        subdirectories = _visit(stack.pop(), counters)
        for subdirectory in reversed(subdirectories):
            counters.add_folder()
            stack.append(subdirectory)


class TaskGroup:
    """Wait-Group über einem Executor.

    ``spawn`` darf auch aus laufenden Tasks heraus aufgerufen werden.
    ``wait`` blockiert bis kein Task mehr offen ist und wirft danach den
    ersten unerwarteten Fehler eines Tasks erneut.
    """

    def __init__(self, executor: Executor):
        self._executor = executor
        self._condition = threading.Condition()
        self._pending = 0
        self._error: BaseException | None = None

    def spawn(self, fn: Callable[..., object], *args) -> None:
        with self._condition:
            self._pending += 1
        try:
            self._executor.submit(self._run, fn, args)
        except BaseException:
            self._task_done()
            raise

    def wait(self) -> None:
        with self._condition:
            while self._pending:
                self._condition.wait()
            error = self._error
        if error is not None:
            raise error

    def _run(self, fn: Callable[..., object], args: tuple) -> None:
        try:
            fn(*args)
        except Exception as e:
            with self._condition:
                if self._error is None:
                    self._error = e
        finally:
            self._task_done()

    def _task_done(self) -> None:
        with self._condition:
            self._pending -= 1
            if self._pending == 0:
                self._condition.notify_all()


def default_worker_count() -> int:
    return os.cpu_count() or 1


def walk_parallel(root: str | Path, counters: UsageCounters, max_workers: int | None = None) -> None:
    """Rekursiver Scan mit einem Task pro Unterordner.

    Die Dateien eines Ordners werden im Task dieses Ordners gezählt, die
    Unterordner als eigene Tasks in den Pool gegeben. Kehrt erst zurück,
    wenn alle Tasks des Baums beendet sind.

    Pool-Threads warten nie auf ihre Kinder-Tasks. Die TaskGroup zählt
    offene Tasks, gewartet wird nur im Aufrufer.
    """
    workers = max_workers or default_worker_count()

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="disk-usage-walk") as executor:
        group = TaskGroup(executor)

        def visit(path: str) -> None:
            for subdirectory in _visit(path, counters):
                counters.add_folder()
                group.spawn(visit, subdirectory)

        visit(os.fspath(root))
        group.wait()


def walk(root: str | Path, counters: UsageCounters, parallel: bool, max_workers: int | None = None) -> None:
    if parallel:
        walk_parallel(root, counters, max_workers=max_workers)
    else:
        walk_sequential(root, counters)
