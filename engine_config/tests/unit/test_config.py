"""Unit tests for engine_config.config."""

from __future__ import annotations

import pytest
from engine_config.config import (
    ATTRIBUTE_FIELDS,
    DATABASE_URL_ENV,
    ENGINE_CONFIGURATION_JSON_ENV,
    LEGACY_ENGINE_CONFIGURATION_JSON_ENV,
    Settings,
    load_settings,
)

# ---------------------------------------------------------------------------
# Settings - default values
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    def test_everything_unset(self):
        settings = Settings()
        assert settings.engine_configuration_json is None
        assert settings.database_url is None
        assert settings.license_string_base64 is None
        assert settings.senzing_directory is None
        assert settings.config_path is None
        assert settings.resource_path is None
        assert settings.support_path is None

    def test_full_configuration_json_unset(self):
        assert Settings().full_configuration_json is None


# ---------------------------------------------------------------------------
# Environment variable overrides
# ---------------------------------------------------------------------------


class TestSettingsEnvOverrides:
    def test_database_url(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(DATABASE_URL_ENV, "postgresql://u:p@localhost:5432/G2")
        settings = Settings()
        assert settings.database_url == "postgresql://u:p@localhost:5432/G2"

    def test_config_path(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SENZING_TOOLS_CONFIG_PATH", "/etc/opt/senzing")
        settings = Settings()
        assert settings.config_path == "/etc/opt/senzing"

    def test_empty_value_is_preserved(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SENZING_TOOLS_SUPPORT_PATH", "")
        settings = Settings()
        assert settings.support_path == ""

    def test_primary_engine_configuration_json(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ENGINE_CONFIGURATION_JSON_ENV, '{"a":1}')
        assert Settings().full_configuration_json == '{"a":1}'

    def test_legacy_engine_configuration_json(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(LEGACY_ENGINE_CONFIGURATION_JSON_ENV, '{"x":1}')
        assert Settings().full_configuration_json == '{"x":1}'

    def test_primary_beats_legacy(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ENGINE_CONFIGURATION_JSON_ENV, '{"primary":true}')
        monkeypatch.setenv(LEGACY_ENGINE_CONFIGURATION_JSON_ENV, '{"legacy":true}')
        assert Settings().full_configuration_json == '{"primary":true}'


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------


class TestLoadSettings:
    def test_load_from_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(DATABASE_URL_ENV, "sqlite3://na:na@/tmp/G2C.db")
        settings = load_settings()
        assert isinstance(settings, Settings)
        assert settings.database_url == "sqlite3://na:na@/tmp/G2C.db"

    def test_load_from_mapping(self):
        settings = load_settings({"SENZING_TOOLS_RESOURCE_PATH": "/res"})
        assert settings.resource_path == "/res"

    def test_mapping_ignores_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(DATABASE_URL_ENV, "postgresql://u:p@localhost:5432/G2")
        settings = load_settings({})
        assert settings.database_url is None

    def test_mapping_not_merged_with_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SENZING_TOOLS_CONFIG_PATH", "/host")
        monkeypatch.setenv(ENGINE_CONFIGURATION_JSON_ENV, '{"host":1}')
        settings = load_settings({"SENZING_TOOLS_RESOURCE_PATH": "/res"})
        assert settings.resource_path == "/res"
        assert settings.config_path is None
        assert settings.full_configuration_json is None

    def test_mapping_returns_settings_instance(self):
        assert isinstance(load_settings({}), Settings)

    def test_mapping_ignores_unknown_keys(self):
        settings = load_settings({"PATH": "/usr/bin", "HOME": "/root"})
        assert settings.database_url is None

    def test_mapping_legacy_alias(self):
        settings = load_settings({LEGACY_ENGINE_CONFIGURATION_JSON_ENV: "{}"})
        assert settings.full_configuration_json == "{}"

    def test_mapping_primary_beats_legacy(self):
        settings = load_settings(
            {
                LEGACY_ENGINE_CONFIGURATION_JSON_ENV: '{"legacy":true}',
                ENGINE_CONFIGURATION_JSON_ENV: '{"primary":true}',
            }
        )
        assert settings.full_configuration_json == '{"primary":true}'


# ---------------------------------------------------------------------------
# lookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_set_value(self):
        settings = load_settings({"SENZING_TOOLS_SENZING_DIRECTORY": "/opt/custom"})
        assert settings.lookup("senzingDirectory") == "/opt/custom"

    def test_unset_value(self):
        assert load_settings({}).lookup("configPath") is None

    def test_empty_value_counts_as_unset(self):
        settings = load_settings({"SENZING_TOOLS_LICENSE_STRING_BASE64": ""})
        assert settings.lookup("licenseStringBase64") is None

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            load_settings({}).lookup("databaseUrl")

    def test_every_attribute_has_a_field(self):
        settings = load_settings({})
        for key in ATTRIBUTE_FIELDS:
            assert settings.lookup(key) is None
