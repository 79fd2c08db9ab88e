"""Label tables for the calculator, one JSON file per language.

Each table maps field and widget keys to display text.  A key missing from
a table is looked up in English, then shown as the bare key.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

TRANSLATIONS_DIR = Path(__file__).resolve().parent / "translations"
DEFAULT_LANGUAGE = "en"


def available_languages() -> Tuple[str, ...]:
    """Language codes with a table on disk, English first."""
    codes = (p.stem for p in TRANSLATIONS_DIR.glob("*.json"))
    return tuple(sorted(codes, key=lambda c: (c != DEFAULT_LANGUAGE, c)))


LANGUAGES = available_languages()


@lru_cache()
def load_translations(lang: str) -> Dict[str, str]:
    path = TRANSLATIONS_DIR / f"{lang}.json"
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.debug("No translation table for %s", lang)
        return {}


def t(key: str, lang: str = DEFAULT_LANGUAGE) -> str:
    """Label for ``key`` in ``lang``."""
    for table in (load_translations(lang), load_translations(DEFAULT_LANGUAGE)):
        if key in table:
            return table[key]
    return key


def language_name(lang: str) -> str:
    """A language's own name for itself, e.g. ``Español``."""
    return load_translations(lang).get("language_name", lang)
