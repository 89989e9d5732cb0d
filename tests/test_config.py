"""Unit tests for configuration module."""

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from image_tag.config import DEFAULT_IMAGE_DAY, Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove FG_* variables inherited from the host."""
    for name in ("FG_IMAGE_DAY", "FG_PORT", "FG_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings(_env_file=None)
        assert settings.image_day == DEFAULT_IMAGE_DAY == 1
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.keep_alive_timeout == 30
        assert settings.log_format == "text"

    def test_image_day_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading the image day from FG_IMAGE_DAY."""
        monkeypatch.setenv("FG_IMAGE_DAY", "0")
        assert Settings(_env_file=None).image_day == 0

    @pytest.mark.parametrize("value", ["abc", "", "7", "-1", "1.5"])
    def test_invalid_image_day_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Test that invalid image days are logged and replaced by the default."""
        monkeypatch.setenv("FG_IMAGE_DAY", value)

        with capture_logs() as logs:
            settings = Settings(_env_file=None)

        assert settings.image_day == DEFAULT_IMAGE_DAY
        assert logs[0]["event"] == "image_day_invalid"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["value"] == value

    def test_other_env_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the FG_ prefix applies to every field."""
        monkeypatch.setenv("FG_PORT", "9090")
        monkeypatch.setenv("FG_LOG_FORMAT", "json")
        settings = Settings(_env_file=None)
        assert settings.port == 9090
        assert settings.log_format == "json"

    def test_invalid_log_format(self) -> None:
        """Test that unknown log formats are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")

    def test_frozen(self) -> None:
        """Test that settings cannot change after startup."""
        settings = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            settings.image_day = 3  # type: ignore[misc]


def test_get_settings_is_cached() -> None:
    """Test that settings are built once."""
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
