"""
Album Service Backend: Settings Tests
=====================================

What:  Validation and defaults of the pydantic-settings configuration.
"""

import pytest
from pydantic import ValidationError

from album_api.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("BACKEND_PORT", "BACKEND_HOST", "CORS_ORIGINS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.backend_port == 8080
        assert settings.log_level == "INFO"
        assert settings.cors_origins_list == ["*"]

    def test_log_level_is_upper_cased(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(_env_file=None, log_level="chatty")

    def test_port_range_enforced(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, backend_port=80)

    def test_port_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("BACKEND_PORT", "9090")
        assert Settings(_env_file=None).backend_port == 9090

    def test_cors_origins_split(self):
        settings = Settings(
            _env_file=None, cors_origins="http://localhost:3000, https://example.com"
        )
        assert settings.cors_origins_list == ["http://localhost:3000", "https://example.com"]
