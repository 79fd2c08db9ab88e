import json

import pytest

from core import i18n
from core.i18n import LANGUAGES, TRANSLATIONS_DIR, language_name, t


def test_spanish_translation_loaded():
    assert t("results", "es") == "Resultados"
    assert t("UnknownKey", "es") == "UnknownKey"


def test_missing_language_falls_back_to_english():
    assert t("results", "fr") == "Results"
    assert t("UnknownKey", "fr") == "UnknownKey"


def test_missing_key_falls_back_to_english(monkeypatch):
    partial = {"results": "Resultados"}
    tables = {"es": partial, "en": i18n.load_translations("en")}
    monkeypatch.setattr(i18n, "load_translations", tables.get)
    assert t("results", "es") == "Resultados"
    assert t("borrow_amount", "es") == "Borrow Amount ($)"


def test_languages_found_on_disk():
    assert LANGUAGES[0] == "en"
    assert set(LANGUAGES) == {"en", "es"}


@pytest.mark.parametrize("lang,name", [("en", "English"), ("es", "Español"), ("fr", "fr")])
def test_language_name(lang, name):
    assert language_name(lang) == name


def test_tables_share_keys():
    tables = [
        json.loads((TRANSLATIONS_DIR / f"{lang}.json").read_text(encoding="utf-8"))
        for lang in LANGUAGES
    ]
    assert all(set(tbl) == set(tables[0]) for tbl in tables)
