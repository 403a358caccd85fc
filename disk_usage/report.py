"""Text-Report für die Konsole erzeugen."""

from .counters import UsageTotals
from .utils import format_count, format_seconds

HELP_MESSAGE = (
    "Usage: du [-s] [-p] [-b] <path>\n"
    "Summarize disk usage of the set of FILEs, recursively for directories.\n"
    "\n"
    "You MUST specify one of the parameters, -s, -p, or -b\n"
    "-s       Run in single threaded mode\n"
    "-p       Run in parallel mode (uses all available processors)\n"
    "-b       Run in both single threaded and parallel mode.\n"
    "         Runs parallel follow by sequential mode"
)


def format_totals(totals: UsageTotals) -> str:
    return (
        f"{format_count(totals.folders)} folders, "
        f"{format_count(totals.files)} files, "
        f"{format_count(totals.bytes)} bytes"
    )


def format_run(label: str, elapsed: float, totals: UsageTotals) -> str:
    """Zwei Zeilen: Laufzeit und Summen eines Durchlaufs."""
    return f"{label} Calculated in: {format_seconds(elapsed)}\n{format_totals(totals)}"


def format_header(path: str) -> str:
    """Kopfzeile des Reports, gefolgt von einer Leerzeile."""
    return f"Directory '{path}':\n"
