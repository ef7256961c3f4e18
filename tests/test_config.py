"""Tests for :mod:`protochain.config`."""

import pytest

from protochain import DebugSettings, get_settings, reset_settings
from protochain.constants import DEBUG_ENV_VAR


@pytest.fixture
def clean_settings(monkeypatch):
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
    reset_settings()
    yield monkeypatch
    reset_settings()


def test_defaults_when_unset():
    settings = DebugSettings.from_string(None)

    assert settings == DebugSettings()
    assert settings.argcheck is True
    assert settings.deprecate is None
    assert settings.strict is True


@pytest.mark.parametrize("text", ["", "  ", "1", "true", "ON", "yes"])
def test_truthy_values_select_defaults(text):
    assert DebugSettings.from_string(text) == DebugSettings()


@pytest.mark.parametrize("text", ["0", "false", "Off", "no"])
def test_falsy_values_disable_everything(text):
    assert DebugSettings.from_string(text) == DebugSettings(
        argcheck=False, deprecate=False, strict=False
    )


def test_key_value_pairs_override_fields():
    settings = DebugSettings.from_string("argcheck=0, deprecate=none,")
    assert settings == DebugSettings(argcheck=False, deprecate=None, strict=True)

    assert DebugSettings.from_string("deprecate=1").deprecate is True
    assert DebugSettings.from_string("strict=off").strict is False


@pytest.mark.parametrize("text", ["bogus=1", "argcheck", "strict=maybe", "argcheck=none"])
def test_invalid_settings_raise(text):
    with pytest.raises(ValueError):
        DebugSettings.from_string(text)


def test_get_settings_reads_environment_once(clean_settings):
    clean_settings.setenv(DEBUG_ENV_VAR, "argcheck=0")
    reset_settings()

    settings = get_settings()
    assert settings.argcheck is False

    clean_settings.setenv(DEBUG_ENV_VAR, "argcheck=1")
    assert get_settings() is settings

    reset_settings()
    assert get_settings().argcheck is True
