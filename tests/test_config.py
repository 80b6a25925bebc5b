# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self, monkeypatch):
        for name in ("ENVIRONMENT", "DEBUG", "API_HOST", "API_PORT", "CORS_ORIGINS", "MAX_EPOCH"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.ENVIRONMENT == "development"
        assert config.API_PORT == 3000
        assert config.MAX_EPOCH == 10**12
        assert config.is_development
        assert not config.is_production

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("API_PORT", "8080")
        monkeypatch.setenv("MAX_EPOCH", "5000")

        config = Settings(_env_file=None)

        assert config.is_production
        assert config.API_PORT == 8080
        assert config.MAX_EPOCH == 5000

    def test_cors_origins_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://orbital.example ,")

        config = Settings(_env_file=None)

        assert config.cors_origins_list == ["http://localhost:3000", "https://orbital.example"]

    @pytest.mark.parametrize("name,value", [("API_PORT", "0"), ("MAX_EPOCH", "0"), ("ENVIRONMENT", "qa")])
    def test_rejects_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
