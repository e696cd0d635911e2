"""
Tests for settings models.
"""

import pytest

from yamlconf.core.exceptions import ObfuscationKeyError
from yamlconf.infrastructure.config.models import LoggingConfig, ManagerSettings

from conftest import KEY


class TestManagerSettings:
    """Test cases for ManagerSettings."""

    def test_defaults(self) -> None:
        settings = ManagerSettings(file_path="config.yaml")

        assert settings.obfuscation_key is None
        assert settings.obfuscated is False
        assert settings.file_mode == 0o644
        assert settings.create_if_missing is True
        assert settings.poll_interval == 1.0
        assert settings.use_polling is True
        assert settings.debounce_delay == 0.5

    def test_file_path_required(self) -> None:
        with pytest.raises(ValueError, match="file_path"):
            ManagerSettings()

    @pytest.mark.parametrize("size", [1, 15, 17, 31, 33, 64])
    def test_invalid_key_length(self, size: int) -> None:
        with pytest.raises(ObfuscationKeyError):
            ManagerSettings(file_path="config.yaml", obfuscation_key=bytes(size))

    @pytest.mark.parametrize("size", [16, 24, 32])
    def test_valid_key_length(self, size: int) -> None:
        settings = ManagerSettings(file_path="config.yaml", obfuscation_key=bytes(size))

        assert settings.obfuscated is True

    @pytest.mark.parametrize("field_name", ["poll_interval", "debounce_delay"])
    def test_intervals_must_be_positive(self, field_name: str) -> None:
        with pytest.raises(ValueError, match=field_name):
            ManagerSettings(file_path="config.yaml", **{field_name: 0})

    def test_from_dict_with_hex_key(self) -> None:
        settings = ManagerSettings.from_dict({
            "file_path": "/etc/app/config.yaml",
            "obfuscation_key": KEY.hex(),
            "file_mode": 0o600,
            "use_polling": False,
        })

        assert settings.file_path == "/etc/app/config.yaml"
        assert settings.obfuscation_key == KEY
        assert settings.file_mode == 0o600
        assert settings.use_polling is False

    def test_from_dict_with_invalid_hex(self) -> None:
        with pytest.raises(ObfuscationKeyError, match="hex"):
            ManagerSettings.from_dict({"file_path": "config.yaml", "obfuscation_key": "zz"})

    def test_to_dict_round_trip(self) -> None:
        settings = ManagerSettings(file_path="config.yaml", obfuscation_key=KEY, poll_interval=2.5)

        data = settings.to_dict()

        assert data["obfuscation_key"] == KEY.hex()
        assert ManagerSettings.from_dict(data) == settings


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    def test_defaults(self) -> None:
        config = LoggingConfig()

        assert config.level == "INFO"
        assert config.console_enabled is True
        assert config.file_enabled is False
