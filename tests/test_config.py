"""
Tests for utils/config.py -- AppConfig env vars.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils.config import AppConfig

_ENV_KEYS = (
    "APP_DATA_PATH", "APP_PORT", "APP_HOST", "APP_LOG_FORMAT",
    "APP_CORS_ORIGINS", "APP_COLLATION_LOCALE", "APP_FETCH_TIMEOUT",
)


class TestAppConfig:
    def test_defaults(self, monkeypatch):
        for key in _ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
        cfg = AppConfig.from_env()
        assert cfg.data_path == "data.json"
        assert cfg.api_port == 8000
        assert cfg.api_host == "127.0.0.1"
        assert cfg.log_format == "text"
        assert cfg.cors_origins == ["*"]
        assert cfg.collation_locale == "zh_CN.UTF-8"
        assert cfg.fetch_timeout == 10.0

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("APP_DATA_PATH", "https://example.org/data.json")
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_HOST", "0.0.0.0")
        monkeypatch.setenv("APP_LOG_FORMAT", "json")
        monkeypatch.setenv("APP_CORS_ORIGINS", "https://a.example, https://b.example,")
        monkeypatch.setenv("APP_COLLATION_LOCALE", "")
        monkeypatch.setenv("APP_FETCH_TIMEOUT", "2.5")
        cfg = AppConfig.from_env()
        assert cfg.data_path == "https://example.org/data.json"
        assert cfg.api_port == 9000
        assert cfg.api_host == "0.0.0.0"
        assert cfg.log_format == "json"
        assert cfg.cors_origins == ["https://a.example", "https://b.example"]
        assert cfg.collation_locale == ""
        assert cfg.fetch_timeout == 2.5

    def test_invalid_port_raises(self, monkeypatch):
        monkeypatch.setenv("APP_PORT", "not-a-port")
        with pytest.raises(ValueError):
            AppConfig.from_env()
