"""Figures behind the research and equipment charts."""

from __future__ import annotations

import re
import sqlite3
from dataclasses import dataclass
from typing import Any

_RESEARCH_STATUSES = ("En Cours", "Termine", "Annule")
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class PieSlice:
    """One slice of a pie chart: its label, its value and the text shown on it."""

    label: str
    value: float
    text: str


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    return 0 if value is None else int(value)


def research_status_shares(connection: sqlite3.Connection) -> list[PieSlice]:
    """Share of all research records in each of the three known statuses.

    Each value is the status count divided by the total number of records;
    the text shows the slice's percentage of the pie, to one decimal place.
    """
    total = connection.execute("SELECT COUNT(*) FROM RECHERCHES").fetchone()[0] or 0
    counts = dict.fromkeys(_RESEARCH_STATUSES, 0)
    placeholders = ", ".join("?" for _ in _RESEARCH_STATUSES)
    for status, count in connection.execute(
        f"SELECT STATUT, COUNT(*) FROM RECHERCHES WHERE STATUT IN ({placeholders}) "
        "GROUP BY STATUT",
        _RESEARCH_STATUSES,
    ):
        counts[status] = count

    shares = {
        status: (count / total if total > 0 else 0.0) for status, count in counts.items()
    }
    pie_sum = sum(shares.values())
    return [
        PieSlice(
            label=status,
            value=share,
            text=f"{status}: {(share / pie_sum * 100 if pie_sum > 0 else 0.0):.1f}%",
        )
        for status, share in shares.items()
    ]


def equipment_total(connection: sqlite3.Connection) -> int:
    """Number of rows in the EQUIPEMENT table."""
    return _int(connection.execute("SELECT COUNT(*) FROM EQUIPEMENT").fetchone()[0])


def equipment_counts_by(connection: sqlite3.Connection, field: str) -> list[PieSlice]:
    """Equipment counted per distinct value of ``field``; empty groups are left out."""
    if not _IDENTIFIER.match(field):
        raise ValueError(f"invalid column name: {field!r}")
    slices = []
    for category, count in connection.execute(
        f"SELECT {field}, COUNT(*) FROM EQUIPEMENT GROUP BY {field}"
    ):
        label = _text(category)
        count = _int(count)
        if count > 0:
            slices.append(PieSlice(label=label, value=count, text=f"{label} ({count})"))
    return slices


def quantity_by_type(connection: sqlite3.Connection) -> dict[str, int]:
    """Total quantity per equipment type, in type order."""
    return {
        _text(type_eq): _int(total)
        for type_eq, total in connection.execute(
            "SELECT TYPE_EQ, SUM(QUANTITE) FROM EQUIPEMENT "
            "GROUP BY TYPE_EQ ORDER BY TYPE_EQ"
        )
    }


def state_by_type(
    connection: sqlite3.Connection,
) -> tuple[list[str], dict[str, list[int]]]:
    """Equipment counts per state within each type.

    Returns the sorted type categories and, for each state in sorted order,
    the counts aligned with those categories (0 where a type has none).
    """
    data: dict[str, dict[str, int]] = {}
    states: set[str] = set()
    for type_eq, etat, count in connection.execute(
        "SELECT TYPE_EQ, ETAT, COUNT(*) FROM EQUIPEMENT GROUP BY TYPE_EQ, ETAT"
    ):
        type_key, state_key = _text(type_eq), _text(etat)
        data.setdefault(type_key, {})[state_key] = _int(count)
        states.add(state_key)

    categories = sorted(data)
    series = {
        state: [data[category].get(state, 0) for category in categories]
        for state in sorted(states)
    }
    return categories, series