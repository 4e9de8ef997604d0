"""Tests for environment configuration."""

from lrcplayer.core.config import DEFAULT_API_URL, AppConfig
from lrcplayer.core.display import DisplayThresholds


class TestAppConfig:
    """Tests for AppConfig.from_env."""

    def test_defaults(self) -> None:
        config = AppConfig.from_env({})

        assert config.api_url == DEFAULT_API_URL
        assert config.tick_hz == 60
        assert config.tick_interval_ms == 17
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.thresholds == DisplayThresholds()

    def test_overrides(self) -> None:
        config = AppConfig.from_env({
            "LRCPLAYER_API_URL": "http://music.lan:8080/",
            "LRCPLAYER_TICK_HZ": "30",
            "LRCPLAYER_HTTP_TIMEOUT": "5",
            "LRCPLAYER_LOG_LEVEL": "debug",
            "LRCPLAYER_LOG_FILE": "player.log",
            "LRCPLAYER_MIN_DISPLAY_S": "2.5",
            "LRCPLAYER_LEAD_IN_S": "1",
        })

        assert config.api_url == "http://music.lan:8080"
        assert config.tick_hz == 30
        assert config.tick_interval_ms == 33
        assert config.http_timeout == 5.0
        assert config.log_level == "DEBUG"
        assert config.log_file == "player.log"
        assert config.thresholds == DisplayThresholds(min_display_s=2.5, lead_in_s=1.0)

    def test_invalid_values_fall_back(self) -> None:
        config = AppConfig.from_env({
            "LRCPLAYER_TICK_HZ": "fast",
            "LRCPLAYER_HTTP_TIMEOUT": "-3",
            "LRCPLAYER_LOG_LEVEL": "LOUD",
        })

        assert config.tick_hz == 60
        assert config.http_timeout == 15.0
        assert config.log_level == "INFO"
