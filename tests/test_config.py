# ==============================================
# Tests for Configuration
# ==============================================

import pytest

from zerobuffer.config import get_config, reset_config, AppConfig


class TestGetConfig:
    def test_defaults(self):
        config = get_config()
        assert config.buffer.size == 4096
        assert config.buffer.strict_zero is False
        assert config.logging.level == "WARNING"

    def test_singleton(self):
        assert get_config() is get_config()

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ZEROBUFFER_SIZE", "1")
        monkeypatch.setenv("ZEROBUFFER_STRICT_ZERO", "yes")
        monkeypatch.setenv("ZEROBUFFER_LOG_LEVEL", "debug")

        config = get_config()

        assert config.buffer.size == 1
        assert config.buffer.strict_zero is True
        assert config.logging.level == "DEBUG"

    @pytest.mark.parametrize("name, value", [
        ("ZEROBUFFER_SIZE", "big"),
        ("ZEROBUFFER_SIZE", "0"),
        ("ZEROBUFFER_SIZE", "-5"),
        ("ZEROBUFFER_STRICT_ZERO", "maybe"),
        ("ZEROBUFFER_LOG_LEVEL", "LOUD"),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValueError, match=name):
            get_config()

    def test_app_config_defaults(self):
        config = AppConfig()
        assert config.buffer.size == 4096
        assert config.logging.level == "WARNING"
