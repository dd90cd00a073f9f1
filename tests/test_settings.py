"""Tests for formatting settings."""

import pytest
from pydantic import ValidationError
from pipy_text import DEFAULT_SETTINGS, TextSettings, load_settings, settings_from_env


class TestTextSettings:
    def test_defaults(self):
        assert DEFAULT_SETTINGS.tab_size == 8
        assert DEFAULT_SETTINGS.justify is None
        assert DEFAULT_SETTINGS.overflow == "fold"
        assert DEFAULT_SETTINGS.end == "\n"
        assert DEFAULT_SETTINGS.ellipsis == "…"

    def test_tab_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            TextSettings(tab_size=0)

    def test_invalid_justify(self):
        with pytest.raises(ValidationError):
            TextSettings(justify="middle")

    def test_invalid_overflow(self):
        with pytest.raises(ValidationError):
            TextSettings(overflow="wrap")

    def test_ellipsis_must_be_one_cell(self):
        with pytest.raises(ValidationError):
            TextSettings(ellipsis="...")
        with pytest.raises(ValidationError):
            TextSettings(ellipsis="…" * 2)
        assert TextSettings(ellipsis="~").ellipsis == "~"

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.tab_size = 4


class TestLoadSettings:
    def test_load(self):
        settings = load_settings({"tab_size": 4, "overflow": "ellipsis", "justify": "full"})
        assert settings.tab_size == 4
        assert settings.overflow == "ellipsis"
        assert settings.justify == "full"

    def test_missing_keys_use_defaults(self):
        assert load_settings({}) == DEFAULT_SETTINGS

    def test_unknown_keys_ignored(self):
        assert load_settings({"colour": "red"}) == DEFAULT_SETTINGS

    def test_invalid_value(self):
        with pytest.raises(ValidationError):
            load_settings({"tab_size": -1})


class TestSettingsFromEnv:
    def test_reads_prefixed_variables(self):
        settings = settings_from_env(
            {
                "PIPY_TEXT_TAB_SIZE": "2",
                "PIPY_TEXT_OVERFLOW": "crop",
                "PIPY_TEXT_JUSTIFY": "center",
                "PIPY_TEXT_ELLIPSIS": "~",
            }
        )
        assert settings.tab_size == 2
        assert settings.overflow == "crop"
        assert settings.justify == "center"
        assert settings.ellipsis == "~"

    def test_empty_values_ignored(self):
        assert settings_from_env({"PIPY_TEXT_TAB_SIZE": ""}) == DEFAULT_SETTINGS

    def test_other_variables_ignored(self):
        assert settings_from_env({"TAB_SIZE": "3"}) == DEFAULT_SETTINGS

    def test_os_environ(self, monkeypatch):
        monkeypatch.setenv("PIPY_TEXT_TAB_SIZE", "3")
        assert settings_from_env().tab_size == 3

    def test_invalid_env_value(self):
        with pytest.raises(ValidationError):
            settings_from_env({"PIPY_TEXT_TAB_SIZE": "many"})
