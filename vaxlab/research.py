"""Research records stored in the RECHERCHES table."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Sequence

_FULL_HEADERS = ("ID", "Nom", "Type", "Date", "Statut", "ID Employé", "ETAT")
_SHORT_HEADERS = _FULL_HEADERS[:6]

_SHORT_COLUMNS = "ID_RECH, NOM_RECH, TYPE_RECH, DATE_RECH, STATUT, ID_EMPLOYE"

_SEARCHABLE_COLUMNS = frozenset(
    {"ID_RECH", "NOM_RECH", "TYPE_RECH", "DATE_RECH", "STATUT", "ID_EMPLOYE"}
)

_HEADER_VARIATIONS: tuple[tuple[str, ...], ...] = (
    ("ID Recherche", "IDRecherche", "ID", "ИД", "المعرف"),
    ("Nom Recherche", "NomRecherche", "Nom", "Name", "Имя", "الاسم", "Nome", "Nombre"),
    ("Type Recherche", "TypeRecherche", "Type", "Тип", "النوع", "Tipo", "Typ"),
    ("Date Recherche", "DateRecherche", "Date", "Дата", "التاريخ", "Data", "Datum", "Fecha"),
    ("Statut", "Status", "Статус", "الحالة", "Stato", "Estado"),
    (
        "ID Employé",
        "ID_Employe",
        "ID Employe",
        "ID сотрудника",
        "معرف الموظف",
        "ID Impiegato",
        "ID Empleado",
    ),
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS RECHERCHES (
    ID_RECH INTEGER PRIMARY KEY,
    NOM_RECH TEXT,
    TYPE_RECH TEXT,
    DATE_RECH TEXT,
    STATUT TEXT,
    ID_EMPLOYE INTEGER,
    ETAT INTEGER
);
CREATE TABLE IF NOT EXISTS VACCINS (
    ID_VACCIN INTEGER PRIMARY KEY,
    NOM_VACCIN TEXT,
    EFFET_SECONDAIRE TEXT,
    COMPOSITION TEXT,
    QUANTITE INTEGER,
    DATE_CREATION TEXT,
    DATE_PEREMPTION TEXT,
    TYPE TEXT,
    ID_RECH_PK1 INTEGER REFERENCES RECHERCHES (ID_RECH)
);
"""


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the RECHERCHES and VACCINS tables if they do not exist."""
    connection.executescript(_SCHEMA)
    connection.commit()


@dataclass
class Recherche:
    """One research record."""

    id_rech: int = 0
    nom_rech: str = ""
    type_rech: str = ""
    date_rech: date = field(default_factory=date.today)
    statut: str = ""
    id_employe: int = 0
    etat: int = 1


@dataclass(frozen=True)
class Table:
    """Query result with display headers."""

    headers: tuple[str, ...]
    rows: list[tuple[Any, ...]]

    def __len__(self) -> int:
        return len(self.rows)


def retranslate_headers(
    headers: Sequence[str], translations: Mapping[str, Any]
) -> list[str]:
    """Return the headers with the first six columns translated where possible."""
    result = list(headers)
    for col, variations in zip(range(len(result)), _HEADER_VARIATIONS):
        for variation in variations:
            translated = translations.get(variation)
            if isinstance(translated, str) and translated:
                result[col] = translated
                break
    return result


class ResearchRepository:
    """Create, read, update and delete research records."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def add(self, recherche: Recherche) -> None:
        """Insert a record; raises sqlite3.IntegrityError on a duplicate id."""
        with self.connection:
            self.connection.execute(
                "INSERT INTO RECHERCHES "
                "(ID_RECH, NOM_RECH, TYPE_RECH, DATE_RECH, STATUT, ID_EMPLOYE) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (
                    recherche.id_rech,
                    recherche.nom_rech,
                    recherche.type_rech,
                    recherche.date_rech.isoformat(),
                    recherche.statut,
                    recherche.id_employe,
                ),
            )

    def update(self, recherche: Recherche) -> int:
        """Update the record with the same id; return the number of rows changed."""
        with self.connection:
            cursor = self.connection.execute(
                "UPDATE RECHERCHES SET NOM_RECH = ?, TYPE_RECH = ?, DATE_RECH = ?, "
                "STATUT = ?, ID_EMPLOYE = ? WHERE ID_RECH = ?",
                (
                    recherche.nom_rech,
                    recherche.type_rech,
                    recherche.date_rech.isoformat(),
                    recherche.statut,
                    recherche.id_employe,
                    recherche.id_rech,
                ),
            )
        return cursor.rowcount

    def delete(self, id_rech: int) -> int:
        """Delete a record by id; return the number of rows removed."""
        with self.connection:
            cursor = self.connection.execute(
                "DELETE FROM RECHERCHES WHERE ID_RECH = ?", (id_rech,)
            )
        return cursor.rowcount

    def get(self, id_rech: int) -> Recherche | None:
        """Return the record with this id, or None."""
        row = self.connection.execute(
            "SELECT ID_RECH, NOM_RECH, TYPE_RECH, DATE_RECH, STATUT, ID_EMPLOYE, ETAT "
            "FROM RECHERCHES WHERE ID_RECH = ?",
            (id_rech,),
        ).fetchone()
        if row is None:
            return None
        id_, nom, type_, date_text, statut, id_emp, etat = row
        return Recherche(
            id_rech=id_,
            nom_rech=nom or "",
            type_rech=type_ or "",
            date_rech=date.fromisoformat(date_text) if date_text else date.today(),
            statut=statut or "",
            id_employe=id_emp if id_emp is not None else 0,
            etat=etat if etat is not None else 1,
        )

    def list_all(self) -> Table:
        """All records ordered by id, with the ETAT column."""
        rows = self.connection.execute(
            f"SELECT {_SHORT_COLUMNS}, ETAT FROM RECHERCHES ORDER BY ID_RECH"
        ).fetchall()
        return Table(_FULL_HEADERS, rows)

    def list_ids(self) -> list[int]:
        """All record ids in ascending order."""
        return [
            row[0]
            for row in self.connection.execute(
                "SELECT ID_RECH FROM RECHERCHES ORDER BY ID_RECH"
            )
        ]

    def _sorted_by(self, column: str) -> Table:
        rows = self.connection.execute(
            f"SELECT {_SHORT_COLUMNS} FROM RECHERCHES ORDER BY {column}"
        ).fetchall()
        return Table(_SHORT_HEADERS, rows)

    def sorted_by_name(self) -> Table:
        return self._sorted_by("NOM_RECH")

    def sorted_by_type(self) -> Table:
        return self._sorted_by("TYPE_RECH")

    def sorted_by_status(self) -> Table:
        return self._sorted_by("STATUT")

    def search(self, value: str, criterion: str) -> Table:
        """Records whose ``criterion`` column contains ``value``, ordered by id."""
        column = criterion.upper()
        if column not in _SEARCHABLE_COLUMNS:
            raise ValueError(f"unknown search column: {criterion!r}")
        rows = self.connection.execute(
            f"SELECT {_SHORT_COLUMNS} FROM RECHERCHES "
            f"WHERE {column} LIKE '%' || ? || '%' ORDER BY ID_RECH",
            (value,),
        ).fetchall()
        return Table(_SHORT_HEADERS, rows)