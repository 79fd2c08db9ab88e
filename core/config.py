"""Process settings read from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from core.i18n import LANGUAGES
from morpho_apr.calculators import DERIVE_MODES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class Settings:
    language: str = "en"
    derive_mode: str = "ltv"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build ``Settings`` from ``MORPHO_LANG``, ``MORPHO_DERIVE_MODE`` and ``LOG_LEVEL``."""
    settings = Settings(
        language=os.getenv("MORPHO_LANG", "en").strip().lower(),
        derive_mode=os.getenv("MORPHO_DERIVE_MODE", "ltv").strip().lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
    )
    _validate(settings)
    logger.debug("Settings loaded: %s", settings)
    return settings


def _validate(settings: Settings) -> None:
    """Raise on invalid settings."""
    if settings.language not in LANGUAGES:
        raise ValueError(f"Unsupported language '{settings.language}'")
    if settings.derive_mode not in DERIVE_MODES:
        raise ValueError(f"Unknown derive mode '{settings.derive_mode}'")
    if settings.log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level '{settings.log_level}'")
