import dataclasses
import sqlite3

import pytest

from vaxlab.employees import (
    EmployeeInput,
    assign_uid,
    check_uid,
    clean_uid,
    employee_stats,
    list_employees,
    search_column,
    sort_column,
    validate_employee,
)


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE EMPLOYE (ID_EMPLOYE TEXT PRIMARY KEY, NOM TEXT, PRENOM TEXT, "
        "GENRE TEXT, SPECIALITE TEXT, SALAIRE INTEGER, RFID_UID TEXT)"
    )
    conn.executemany(
        "INSERT INTO EMPLOYE VALUES (?, ?, ?, ?, ?, ?, ?)",
        [
            ("1", "Martin", "Alice", "Femme", "Biologie", 500, "ABCD1234"),
            ("2", "Durand", "Bob", "Homme", "Chimie", 1000, None),
            ("3", "Petit", "Chloe", "Femme", "Biologie", 2000, None),
            ("4", "Moreau", "David", "Homme", "Biologie", 2500, None),
        ],
    )
    conn.commit()
    yield conn
    conn.close()


def _valid_input(**changes):
    base = EmployeeInput(
        id_employe=" 7 ",
        nom="Élodie",
        prenom="Jean",
        tel="00000000",
        genre="Femme",
        adresse="Rue des Lilas",
        specialite="Chimie",
        salaire="1500",
        email="someone@example.com",
    )
    return dataclasses.replace(base, **changes)


def test_validate_employee_cleans_values():
    values = validate_employee(_valid_input())
    assert values["id_employe"] == "7"
    assert values["nom"] == "Élodie"
    assert values["tel"] == 0
    assert values["salaire"] == 1500
    assert values["email"] == "someone@example.com"


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"id_employe": "  "}, "L'ID de l'employé est obligatoire."),
        ({"nom": "Jean2"}, "Le nom ne doit contenir que des lettres."),
        ({"nom": "Jean Paul"}, "Le nom ne doit contenir que des lettres."),
        ({"prenom": ""}, "Le prénom ne doit contenir que des lettres."),
        ({"tel": "1234567"}, "Le numéro de téléphone doit contenir exactement 8 chiffres."),
        ({"tel": "abcdefgh"}, "Le numéro de téléphone doit contenir exactement 8 chiffres."),
        ({"genre": ""}, "Veuillez sélectionner un genre."),
        ({"adresse": " "}, "L'adresse ne peut pas être vide."),
        ({"specialite": "Chimie-1"}, "La spécialité ne doit contenir que des lettres."),
        ({"salaire": "12.5"}, "Le salaire doit être un nombre."),
    ],
)
def test_validate_employee_rejects(changes, message):
    with pytest.raises(ValueError) as info:
        validate_employee(_valid_input(**changes))
    assert str(info.value) == message


def test_search_column():
    assert search_column("nom") == "nom"
    assert search_column("prenom") == "prenom"
    assert search_column("id") == "id_employe"
    assert search_column("autre") is None


def test_sort_column():
    assert sort_column("salaire") == "salaire"
    assert sort_column("genre") == "genre"
    assert sort_column("spécialité") == "specialite"
    assert sort_column("trier par") is None


def test_stats_by_gender(connection):
    assert dict(employee_stats(connection, "Genre")) == {"Femme": 2, "Homme": 2}


def test_stats_by_speciality(connection):
    assert dict(employee_stats(connection, "Spécialité")) == {"Biologie": 3, "Chimie": 1}


def test_stats_by_salary(connection):
    assert employee_stats(connection, "Salaire") == [
        ("< 1000", 1),
        ("1000-2000", 2),
        ("> 2000", 1),
    ]


def test_stats_default_option_is_empty(connection):
    assert employee_stats(connection, "stat selon") == []


def test_clean_uid():
    assert clean_uid("  UID reçu : ABCD1234 \n") == "ABCD1234"
    assert clean_uid(" ABCD1234 ") == "ABCD1234"


def test_check_uid(connection):
    assert check_uid(connection, "UID reçu : ABCD1234") is True
    assert check_uid(connection, "ABCD9999") is False
    assert check_uid(connection, "ABC") is False
    assert check_uid(connection, "") is False


def test_check_uid_query_error_refuses():
    conn = sqlite3.connect(":memory:")
    try:
        assert check_uid(conn, "ABCD1234") is False
    finally:
        conn.close()


def test_assign_uid_round_trip(connection):
    assert check_uid(connection, "EFGH5678") is False
    assert assign_uid(connection, " EFGH5678 ", "2") == 1
    assert check_uid(connection, "EFGH5678") is True


def test_assign_uid_unknown_employee(connection):
    assert assign_uid(connection, "EFGH5678", "99") == 0


def test_assign_uid_rejects_blank(connection):
    with pytest.raises(ValueError, match="Veuillez entrer un UID valide."):
        assign_uid(connection, "   ", "1")


def test_list_employees(connection):
    assert list_employees(connection) == [
        ("1", "Martin"),
        ("2", "Durand"),
        ("3", "Petit"),
        ("4", "Moreau"),
    ]