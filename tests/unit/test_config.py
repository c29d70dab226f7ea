"""Tests for configuration module."""

from __future__ import annotations

from pathlib import Path

import pytest

from basketball_boxscore.config import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should have sensible defaults."""
        monkeypatch.delenv("LOG_DIR", raising=False)
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_dir == "logs"
        assert settings.log_serialize is True
        assert settings.default_feed_kind == "generic"
        assert settings.strict_detection is False
        assert settings.json_indent == 2

    def test_path_properties(self) -> None:
        """Path properties should return Path objects."""
        settings = Settings()

        assert isinstance(settings.log_dir_obj, Path)

    def test_validation_rejects_empty_path(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Empty paths should be rejected."""
        monkeypatch.setenv("LOG_DIR", "   ")
        with pytest.raises(ValueError, match="cannot be empty"):
            Settings()

    def test_feed_kind_is_case_insensitive(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Feed kind env var should accept any case."""
        monkeypatch.setenv("BOXSCORE_FEED_KIND", "EuroLeague")

        assert Settings().default_feed_kind == "euroleague"

    def test_validation_rejects_unknown_feed_kind(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Only known feed kinds are accepted as default."""
        monkeypatch.setenv("BOXSCORE_FEED_KIND", "acb")
        with pytest.raises(ValueError):
            Settings()

    def test_validation_rejects_invalid_indent(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """JSON indent must be between 0 and 8."""
        monkeypatch.setenv("BOXSCORE_JSON_INDENT", "12")
        with pytest.raises(ValueError):
            Settings()

    def test_strict_detection_from_env(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Strict detection should be read as a boolean."""
        monkeypatch.setenv("BOXSCORE_STRICT_DETECTION", "true")

        assert Settings().strict_detection is True

    def test_ensure_directories_creates_dirs(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """ensure_directories should create required directories."""
        monkeypatch.setenv("LOG_DIR", str(tmp_path / "nested" / "logs"))

        settings = Settings()
        settings.ensure_directories()

        assert (tmp_path / "nested" / "logs").exists()


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_singleton(self) -> None:
        """get_settings should return the same instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should load from environment variables."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("BOXSCORE_FEED_KIND", "nba")

        reset_settings()
        settings = get_settings()

        assert settings.log_level == "WARNING"
        assert settings.default_feed_kind == "nba"


class TestResetSettings:
    """Tests for reset_settings function."""

    def test_reset_clears_singleton(self) -> None:
        """reset_settings should clear the cached instance."""
        settings1 = get_settings()
        reset_settings()
        settings2 = get_settings()

        assert settings1 is not settings2
        assert settings1.log_dir == settings2.log_dir
