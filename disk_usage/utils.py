"""Hilfsfunktionen – Formatierung etc."""


def format_count(value: int) -> str:
    """Ganzzahl mit Tausendertrennzeichen (1,234,567)."""
    return f"{value:,}"


def format_size(size_bytes: int) -> str:
    """Konvertiert Bytes in menschenlesbare Größe (SI-Einheiten, wie Finder)."""
    if size_bytes < 1000:
        return f"{size_bytes} B"

    for unit in ("KB", "MB", "GB", "TB"):
        size_bytes /= 1000
        if size_bytes < 1000 or unit == "TB":
            return f"{size_bytes:.1f} {unit}"


def format_seconds(seconds: float) -> str:
    """Laufzeit in Sekunden, max. 7 Nachkommastellen, ohne Nullen am Ende."""
    return f"{seconds:.7f}".rstrip("0").rstrip(".") + "s" if seconds else "0s"
