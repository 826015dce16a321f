"""Employee form checks, statistics and RFID badge records."""

from __future__ import annotations

import logging
import re
import sqlite3
from dataclasses import dataclass
from typing import Any

from vaxlab.rfid import UID_PREFIX

logger = logging.getLogger(__name__)

_NAME = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ]+")
_PHONE = re.compile(r"[0-9]{8}")
_SALARY = re.compile(r"[0-9]+")

UID_LENGTH = 8

_SEARCH_COLUMNS = {"nom": "nom", "prenom": "prenom", "id": "id_employe"}
_SORT_COLUMNS = {"salaire": "salaire", "genre": "genre", "spécialité": "specialite"}
_GROUP_COLUMNS = {"Genre": "genre", "Spécialité": "specialite"}

SALARY_BANDS = ("< 1000", "1000-2000", "> 2000")


@dataclass(frozen=True)
class EmployeeInput:
    """Raw text of the employee form."""

    id_employe: str = ""
    nom: str = ""
    prenom: str = ""
    tel: str = ""
    genre: str = ""
    adresse: str = ""
    specialite: str = ""
    salaire: str = ""
    email: str = ""


def validate_employee(employee: EmployeeInput) -> dict[str, Any]:
    """Check the form and return its cleaned values.

    Every field is stripped; the phone number and salary come back as
    integers. Raises ValueError naming the first field that is wrong.
    """
    values = {
        name: str(getattr(employee, name) or "").strip()
        for name in EmployeeInput.__dataclass_fields__
    }
    if not values["id_employe"]:
        raise ValueError("L'ID de l'employé est obligatoire.")
    if not _NAME.fullmatch(values["nom"]):
        raise ValueError("Le nom ne doit contenir que des lettres.")
    if not _NAME.fullmatch(values["prenom"]):
        raise ValueError("Le prénom ne doit contenir que des lettres.")
    if not _PHONE.fullmatch(values["tel"]):
        raise ValueError(
            "Le numéro de téléphone doit contenir exactement 8 chiffres."
        )
    if not values["genre"]:
        raise ValueError("Veuillez sélectionner un genre.")
    if not values["adresse"]:
        raise ValueError("L'adresse ne peut pas être vide.")
    if not _NAME.fullmatch(values["specialite"]):
        raise ValueError("La spécialité ne doit contenir que des lettres.")
    if not _SALARY.fullmatch(values["salaire"]):
        raise ValueError("Le salaire doit être un nombre.")
    values["tel"] = int(values["tel"])
    values["salaire"] = int(values["salaire"])
    return values


def search_column(criterion: str) -> str | None:
    """Column searched for a search criterion, or None to show everything."""
    return _SEARCH_COLUMNS.get(criterion)


def sort_column(criterion: str) -> str | None:
    """Column sorted on for a sort criterion, or None for the plain listing."""
    return _SORT_COLUMNS.get(criterion)


def employee_stats(
    connection: sqlite3.Connection, criterion: str
) -> list[tuple[str, int]]:
    """Pie chart data for "Genre", "Spécialité" or "Salaire".

    Any other criterion gives an empty list.
    """
    column = _GROUP_COLUMNS.get(criterion)
    if column is not None:
        return [
            ("" if label is None else str(label), int(count or 0))
            for label, count in connection.execute(
                f"SELECT {column}, COUNT(*) FROM employe GROUP BY {column}"
            )
        ]
    if criterion != "Salaire":
        return []

    low = middle = high = 0
    for (salary,) in connection.execute("SELECT salaire FROM employe"):
        salary = int(salary or 0)
        if salary < 1000:
            low += 1
        elif salary <= 2000:
            middle += 1
        else:
            high += 1
    return list(zip(SALARY_BANDS, (low, middle, high)))


def clean_uid(uid: str) -> str:
    """The UID with surrounding blanks and the reader's prefix removed."""
    cleaned = uid.strip()
    if cleaned.startswith(UID_PREFIX):
        cleaned = cleaned[len(UID_PREFIX):]
    return cleaned


def check_uid(connection: sqlite3.Connection, uid: str) -> bool:
    """Whether the UID is eight characters long and belongs to an employee."""
    cleaned = clean_uid(uid)
    if len(cleaned) != UID_LENGTH:
        logger.info("invalid UID received: %s", cleaned)
        return False
    try:
        row = connection.execute(
            "SELECT RFID_UID FROM EMPLOYE WHERE UPPER(RFID_UID) = ?", (cleaned,)
        ).fetchone()
    except sqlite3.Error as exc:
        logger.warning("UID query failed: %s", exc)
        return False
    return row is not None


def assign_uid(
    connection: sqlite3.Connection, uid: str, employee_id: Any
) -> int:
    """Give an employee a badge UID; return the number of rows changed.

    Raises ValueError for a blank UID.
    """
    uid = uid.strip()
    if not uid:
        raise ValueError("Veuillez entrer un UID valide.")
    with connection:
        cursor = connection.execute(
            "UPDATE EMPLOYE SET RFID_UID = ? WHERE ID_EMPLOYE = ?", (uid, employee_id)
        )
    return cursor.rowcount


def list_employees(connection: sqlite3.Connection) -> list[tuple[str, str]]:
    """Every employee as (id, name) text."""
    return [
        ("" if id_ is None else str(id_), "" if name is None else str(name))
        for id_, name in connection.execute("SELECT ID_EMPLOYE, NOM FROM EMPLOYE")
    ]