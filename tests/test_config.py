"""Tests for configuration settings."""

import pytest
from pydantic import ValidationError

from csquares.config import CodecSettings, Settings, ViewerSettings, get_settings


class TestSettings:
    """Tests for defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the values used when nothing is configured."""
        monkeypatch.delenv("CSQUARES_CODEC__DEFAULT_DECIMALS", raising=False)
        settings = Settings()
        assert settings.codec.default_decimals == 1
        assert settings.viewer.zoom_start == 6
        assert settings.logging.level == "INFO"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test overriding a nested field through the environment."""
        monkeypatch.setenv("CSQUARES_CODEC__DEFAULT_DECIMALS", "3")
        monkeypatch.setenv("CSQUARES_LOGGING__LEVEL", "DEBUG")
        settings = Settings()
        assert settings.codec.default_decimals == 3
        assert settings.logging.level == "DEBUG"

    def test_default_decimals_bounded_by_ladder(self) -> None:
        """Test that a precision the ladder cannot reach is refused."""
        with pytest.raises(ValidationError):
            CodecSettings(default_decimals=5)
        with pytest.raises(ValidationError):
            CodecSettings(default_decimals=-1)

    def test_viewer_coordinates_validated(self) -> None:
        """Test that the viewer's start point must be on the globe."""
        with pytest.raises(ValidationError):
            ViewerSettings(default_latitude=95.0)

    def test_get_settings_is_cached(self) -> None:
        """Test that the settings singleton is reused."""
        assert get_settings() is get_settings()
