import pytest

from number_handler.core.config.settings import env_int
from number_handler.core.errors import ConfigurationError


def test_env_int_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("NUMBER_HANDLER_FILES_COUNT", raising=False)

    assert env_int("NUMBER_HANDLER_FILES_COUNT", 5) == 5


def test_env_int_treats_blank_as_unset(monkeypatch):
    monkeypatch.setenv("NUMBER_HANDLER_FILES_COUNT", "  ")

    assert env_int("NUMBER_HANDLER_FILES_COUNT", 5) == 5


def test_env_int_parses_signed_values(monkeypatch):
    monkeypatch.setenv("NUMBER_HANDLER_MIN_VALUE", " -40 ")

    assert env_int("NUMBER_HANDLER_MIN_VALUE", 0) == -40


@pytest.mark.parametrize("raw", ["ten", "1.5", "0x10"])
def test_env_int_rejects_non_numeric_values(monkeypatch, raw):
    monkeypatch.setenv("NUMBER_HANDLER_FILES_COUNT", raw)

    with pytest.raises(ConfigurationError) as exc_info:
        env_int("NUMBER_HANDLER_FILES_COUNT", 5)

    assert "NUMBER_HANDLER_FILES_COUNT" in str(exc_info.value)
