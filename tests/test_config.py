import pytest

from core.config import Settings, load_settings


def test_defaults(monkeypatch):
    for var in ("MORPHO_LANG", "MORPHO_DERIVE_MODE", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert load_settings() == Settings()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MORPHO_LANG", "ES")
    monkeypatch.setenv("MORPHO_DERIVE_MODE", "borrow")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.language == "es"
    assert s.derive_mode == "borrow"
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize(
    "var,value",
    [("MORPHO_LANG", "fr"), ("MORPHO_DERIVE_MODE", "both"), ("LOG_LEVEL", "LOUD")],
)
def test_invalid_values_raise(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError):
        load_settings()
