"""Unit tests for the root Settings model."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from colloquy.config import get_settings, reload_settings
from colloquy.config.models import DialogsConfig, LoggingConfig
from colloquy.config.settings import Settings


class TestSettingsDefaults:
    """Tests for defaults defined in code."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.app_name == "colloquy"
        assert settings.dialogs.state_key_prefix == "dialog_state"
        assert settings.dialogs.telemetry == "null"
        assert settings.observability.logging.format == "json"
        assert settings.observability.metrics.enabled is True

    def test_invalid_telemetry_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DialogsConfig(telemetry="statsd")

    def test_blank_state_key_prefix_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DialogsConfig(state_key_prefix="")

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")


class TestGetSettings:
    """Tests for layered loading through get_settings."""

    @pytest.fixture
    def config_env(self, test_config_dir: Path, mock_toml_files, env_override):
        mock_toml_files(
            {
                "default.toml": (
                    'app_name = "support-bot"\n'
                    "[dialogs]\n"
                    'state_key_prefix = "stack"\n'
                    "[observability.logging]\n"
                    'level = "WARNING"\n'
                ),
                "development.toml": "[observability.metrics]\nenabled = false\n",
            }
        )
        return lambda extra=None: env_override(
            {
                "COLLOQUY_CONFIG_DIR": str(test_config_dir),
                "COLLOQUY_ENV": "development",
                **(extra or {}),
            }
        )

    def test_loads_toml_layers(self, config_env) -> None:
        with config_env():
            settings = get_settings()

        assert settings.app_name == "support-bot"
        assert settings.observability.metrics.enabled is False
        assert settings.dialogs.state_key_prefix == "stack"
        assert settings.observability.logging.level == "WARNING"

    def test_env_vars_override_toml(self, config_env) -> None:
        with config_env(
            {"COLLOQUY_APP_NAME": "from-env", "COLLOQUY_DIALOGS__TELEMETRY": "logging"}
        ):
            settings = get_settings()

        assert settings.app_name == "from-env"
        assert settings.dialogs.telemetry == "logging"
        assert settings.dialogs.state_key_prefix == "stack"

    def test_settings_are_cached(self, config_env) -> None:
        with config_env():
            assert get_settings() is get_settings()

    def test_reload_settings_rereads(self, config_env) -> None:
        with config_env():
            first = get_settings()
        with config_env({"COLLOQUY_APP_NAME": "reloaded"}):
            second = reload_settings()

        assert first is not second
        assert second.app_name == "reloaded"
