"""Export of a table as an HTML document ready for printing."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Any, Collection, Iterable, Sequence

_HEAD = (
    "<html>\n"
    "<head>\n"
    '<meta Content="Text/html; charset=Windows-1251">\n'
    "<title>Export PDF</title>\n"
    "</head>\n"
    "<body bgcolor=#ffffff link=#5000A0>\n"
    "<center><h1>Liste des Recherches</h1><br><br>\n"
    "<table border=1 cellspacing=0 cellpadding=2>\n"
)
_TAIL = "</table></center>\n</body>\n</html>\n"


def _simplified(value: Any) -> str:
    return " ".join(("" if value is None else str(value)).split())


def table_to_html(
    headers: Sequence[str],
    rows: Iterable[Sequence[Any]],
    hidden_columns: Collection[int] = (),
) -> str:
    """Render the table with a leading row-number column, skipping hidden columns."""
    visible = [col for col in range(len(headers)) if col not in hidden_columns]
    parts = [_HEAD, "<thead><tr bgcolor=#f0f0f0><th>Numéro</th>"]
    parts.extend(f"<th>{headers[col]}</th>" for col in visible)
    parts.append("</tr></thead>\n")

    for number, row in enumerate(rows, start=1):
        parts.append(f"<tr><td>{number}</td>")
        for col in visible:
            cell = _simplified(row[col]) if col < len(row) else ""
            parts.append(f"<td>{cell or '&nbsp;'}</td>")
        parts.append("</tr>\n")

    parts.append(_TAIL)
    return "".join(parts)


def _with_suffix(path: str | Path, suffix: str) -> str:
    text = str(path)
    _, dot, extension = PurePath(text).name.rpartition(".")
    if dot and extension:
        return text
    return text + suffix


def normalise_export_path(path: str | Path) -> str:
    """Append ".pdf" when the file name has no extension."""
    return _with_suffix(path, ".pdf")


def export_html(
    path: str | Path,
    headers: Sequence[str],
    rows: Iterable[Sequence[Any]],
    hidden_columns: Collection[int] = (),
) -> Path:
    """Write the table as HTML; ".html" is appended when the name has no extension."""
    target = Path(_with_suffix(path, ".html"))
    target.write_text(table_to_html(headers, rows, hidden_columns), encoding="utf-8")
    return target