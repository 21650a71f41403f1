"""Tests for the TOML/env configuration layer."""

import tomllib

import pytest

from langvoice.internal import config


class TestLoadConfig:
    def test_defaults_without_file(self):
        assert config.get_config_value("base_url") == "https://www.langvoice.pro/api"
        assert config.get_config_value("timeout") == 60.0
        assert config.get_config_value("missing", "fallback") == "fallback"

    def test_file_values_used(self, isolated_config):
        isolated_config.write_text('[langvoice]\nbase_url = "https://example.test/api"\ntimeout = 5.0\n')
        config.reload_config()

        assert config.get_config_value("base_url") == "https://example.test/api"
        assert config.get_config_value("timeout") == 5.0

    def test_env_overrides_file(self, isolated_config, monkeypatch):
        isolated_config.write_text("[langvoice]\ntimeout = 5.0\n")
        monkeypatch.setenv("LANGVOICE_TIMEOUT", "12.5")
        config.reload_config()

        assert config.get_config_value("timeout") == 12.5

    def test_unknown_keys_in_file_ignored(self, isolated_config):
        isolated_config.write_text('[langvoice]\nfavourite_colour = "blue"\n')
        config.reload_config()

        assert "favourite_colour" not in config.load_toml_config()

    def test_malformed_file_falls_back_to_defaults(self, isolated_config):
        isolated_config.write_text("[langvoice\nthis is not toml")
        config.reload_config()

        assert config.load_config() == {}
        assert config.get_config_value("timeout") == 60.0

    def test_values_are_cached_until_reload(self, isolated_config):
        assert config.get_config_value("log_level") == "info"
        isolated_config.write_text('[langvoice]\nlog_level = "debug"\n')

        assert config.get_config_value("log_level") == "info"
        config.reload_config()
        assert config.get_config_value("log_level") == "debug"


class TestSetSetting:
    def test_round_trip_keeps_other_sections(self, isolated_config):
        isolated_config.write_text('[other]\nkeep = "me"\n')

        assert config.set_setting("timeout", "30") is True

        with open(isolated_config, "rb") as f:
            saved = tomllib.load(f)
        assert saved["langvoice"]["timeout"] == 30.0
        assert saved["other"] == {"keep": "me"}
        assert config.get_config_value("timeout") == 30.0

    def test_unknown_setting_rejected(self):
        with pytest.raises(KeyError, match="Unknown setting"):
            config.set_setting("colour", "blue")


class TestGetApiKey:
    def test_none_when_unset(self):
        assert config.get_api_key() is None

    def test_file_key(self):
        config.set_setting("api_key", "file-key")
        assert config.get_api_key() == "file-key"

    def test_env_wins_over_file(self, monkeypatch):
        config.set_setting("api_key", "file-key")
        monkeypatch.setenv("LANGVOICE_API_KEY", "env-key")

        assert config.get_api_key() == "env-key"
