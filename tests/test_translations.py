import json

import pytest

from vaxlab.translations import TranslationCatalog, load_translations

CATALOGUE = {
    "fr": {"Ajouter": "Ajouter", "Nom": "Nom", "ID": "ID"},
    "en": {
        "Ajouter": "Add",
        "Modifier": "Edit",
        "Nom": "Name",
        "ID": "Identifier",
        "Statut": "State",
        "Funded": "Financed",
        "Traduction": "",
    },
    "es": {},
}


@pytest.fixture
def catalog():
    return TranslationCatalog(CATALOGUE, "fr")


def test_load_translations_round_trip(tmp_path):
    path = tmp_path / "translations.json"
    path.write_text(json.dumps(CATALOGUE), encoding="utf-8")
    assert load_translations(path) == CATALOGUE


def test_load_translations_rejects_invalid_json(tmp_path):
    path = tmp_path / "translations.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_translations(path)


def test_load_translations_rejects_array(tmp_path):
    path = tmp_path / "translations.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_translations(path)


def test_load_translations_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_translations(tmp_path / "absent.json")


def test_languages_sorted(catalog):
    assert catalog.languages() == sorted(CATALOGUE)


def test_interface_texts_skip_empty(catalog):
    texts = catalog.interface_texts("en")
    assert texts["Ajouter"] == "Add"
    assert texts["Modifier"] == "Edit"
    assert "Traduction" not in texts
    assert "Funded" not in texts


def test_switch_language_updates_current(catalog):
    texts = catalog.switch_language("en")
    assert texts == catalog.interface_texts("en")
    assert catalog.current_language == "en"


def test_switch_to_same_language_does_nothing(catalog):
    assert catalog.switch_language("fr") is None
    assert catalog.current_language == "fr"


def test_switch_to_empty_language_keeps_current(catalog):
    assert catalog.switch_language("es") is None
    assert catalog.switch_language("") is None
    assert catalog.current_language == "fr"


def test_translate_headers_explicit_language(catalog):
    headers = ["ID", "Nom", "Type", "Date", "Statut", "ID Employé", "ETAT"]
    result = catalog.translate_headers(headers, "en")
    assert result[0] == "Identifier"
    assert result[1] == "Name"
    assert result[4] == "State"
    assert result[6] == "ETAT"
    assert len(result) == len(headers)


def test_translate_headers_base_language_unchanged(catalog):
    headers = ["ID", "Nom", "Type"]
    assert catalog.translate_headers(headers) == headers


def test_translate_headers_follows_current_language(catalog):
    catalog.switch_language("en")
    assert catalog.translate_headers(["ID", "Nom"]) == ["Identifier", "Name"]


def test_translate_cells_replaces_funded(catalog):
    rows = [["Clinic", "Funded", "$10"], ["Other", "Unknown", ""]]
    result = catalog.translate_cells(rows, "en")
    assert result == [["Clinic", "Financed", "$10"], ["Other", "Unknown", ""]]
    assert rows[0][1] == "Funded"


def test_translate_cells_without_translation_keeps_text(catalog):
    rows = [["Funded"]]
    assert catalog.translate_cells(rows, "fr") == [["Funded"]]