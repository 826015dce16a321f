"""Interface translations loaded from a JSON catalogue of languages."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from vaxlab.research import retranslate_headers

logger = logging.getLogger(__name__)

BASE_LANGUAGE = "fr"

INTERFACE_KEYS = (
    "Recherche Informations",
    "Ajouter",
    "Modifier",
    "Supprimer",
    "Export PDF",
    "Statistique",
    "Traduction",
    "ID",
    "Nom",
    "Type",
    "Date",
    "Statut",
    "ID_Employe",
    "Tri par :",
    "Nom Recherche",
    "Type Recherche",
)

FUNDED = "Funded"


def load_translations(path: str | Path) -> dict[str, Any]:
    """Read a translation catalogue whose top level is a JSON object.

    Raises OSError when the file cannot be read and ValueError when it is
    not valid JSON or its top level is not an object.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid translation file {path}: {exc}") from exc
    if not isinstance(document, dict):
        raise ValueError(f"translation file {path} does not hold a JSON object")
    return document


def _text(mapping: Mapping[str, Any], key: str) -> str:
    value = mapping.get(key)
    return value if isinstance(value, str) else ""


class TranslationCatalog:
    """Translations per language, with the language currently shown."""

    def __init__(
        self,
        translations: Mapping[str, Any],
        current_language: str = BASE_LANGUAGE,
    ) -> None:
        self.translations = dict(translations)
        self.current_language = current_language

    def _table(self, language: str) -> Mapping[str, Any]:
        table = self.translations.get(language)
        return table if isinstance(table, Mapping) else {}

    def languages(self) -> list[str]:
        """The languages of the catalogue, in sorted order."""
        return sorted(self.translations)

    def interface_texts(self, language: str) -> dict[str, str]:
        """Translated interface texts, keyed by their original text.

        Only texts with a non-empty translation are included.
        """
        table = self._table(language)
        return {
            key: translated
            for key in INTERFACE_KEYS
            if (translated := _text(table, key))
        }

    def translate_headers(
        self, headers: Sequence[str], language: str | None = None
    ) -> list[str]:
        """Translate research table headers.

        With no language given the current one is used, and the headers are
        left as they are while it is the base language.
        """
        if language is None:
            language = self.current_language
            if not language or language == BASE_LANGUAGE:
                return list(headers)
        table = self._table(language)
        if not table:
            return list(headers)
        return retranslate_headers(headers, table)

    def translate_cells(
        self, rows: Sequence[Sequence[Any]], language: str
    ) -> list[list[Any]]:
        """Rows with every "Funded" cell translated, where a translation exists."""
        translated = _text(self._table(language), FUNDED) or FUNDED
        return [
            [translated if cell == FUNDED else cell for cell in row] for row in rows
        ]

    def switch_language(self, target: str) -> dict[str, str] | None:
        """Make ``target`` the current language and return its interface texts.

        Returns None, leaving the current language unchanged, when the target
        is empty, already current, or has no translations.
        """
        if not target or target == self.current_language:
            return None
        if not self._table(target):
            logger.debug("no translations found for language: %s", target)
            return None
        self.current_language = target
        return self.interface_texts(target)