"""Vaccine records stored in the VACCINS table."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from datetime import date

from vaxlab.research import Table


@dataclass
class Vaccin:
    """One vaccine record."""

    id_vaccin: int = 0
    nom_vaccin: str = ""
    effets_secondaires: str = ""
    composition: str = ""
    quantite: int = 0
    date_creation: date = field(default_factory=date.today)
    date_peremption: date = field(default_factory=date.today)
    type_vaccin: str = ""
    id_rech: int = 0

    def _params(self) -> tuple:
        return (
            self.nom_vaccin,
            self.effets_secondaires,
            self.composition,
            self.quantite,
            self.date_creation.isoformat(),
            self.date_peremption.isoformat(),
            self.type_vaccin,
            self.id_rech,
            self.id_vaccin,
        )


class VaccineRepository:
    """Create, read, update and delete vaccine records."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def add(self, vaccin: Vaccin) -> None:
        """Insert a vaccine; raises sqlite3.IntegrityError on a duplicate id."""
        with self.connection:
            self.connection.execute(
                "INSERT INTO VACCINS (NOM_VACCIN, EFFET_SECONDAIRE, COMPOSITION, "
                "QUANTITE, DATE_CREATION, DATE_PEREMPTION, TYPE, ID_RECH_PK1, ID_VACCIN) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                vaccin._params(),
            )

    def update(self, vaccin: Vaccin) -> int:
        """Update the vaccine with the same id; return the number of rows changed."""
        with self.connection:
            cursor = self.connection.execute(
                "UPDATE VACCINS SET NOM_VACCIN = ?, EFFET_SECONDAIRE = ?, "
                "COMPOSITION = ?, QUANTITE = ?, DATE_CREATION = ?, "
                "DATE_PEREMPTION = ?, TYPE = ?, ID_RECH_PK1 = ? WHERE ID_VACCIN = ?",
                vaccin._params(),
            )
        return cursor.rowcount

    def delete(self, id_vaccin: int) -> int:
        """Delete a vaccine by id; return the number of rows removed."""
        with self.connection:
            cursor = self.connection.execute(
                "DELETE FROM VACCINS WHERE ID_VACCIN = ?", (id_vaccin,)
            )
        return cursor.rowcount

    def list_all(self) -> Table:
        """Every column of every vaccine, headed by the column names."""
        cursor = self.connection.execute("SELECT * FROM VACCINS")
        rows = cursor.fetchall()
        headers = tuple(desc[0] for desc in cursor.description)
        return Table(headers, rows)