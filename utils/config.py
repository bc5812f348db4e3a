"""Configuration for the media log web application.

Provides:
- AppConfig: web application settings read from environment variables
"""

import os as _os


class AppConfig:
    """Application-level configuration loaded from environment variables.

    All env vars have defaults so the application works out of the box.

    Environment variables:
        APP_DATA_PATH: Path or http(s) URL of the JSON data file (default: data.json)
        APP_PORT: Server port (default: 8000)
        APP_HOST: Server bind address (default: 127.0.0.1)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_CORS_ORIGINS: Comma-separated allowed origins (default: *)
        APP_COLLATION_LOCALE: Locale used to sort tag and status options
            (default: zh_CN.UTF-8; empty string selects code point order)
        APP_FETCH_TIMEOUT: Seconds to wait when the data source is a URL (default: 10)
    """

    def __init__(self) -> None:
        self.data_path = _os.getenv("APP_DATA_PATH", "data.json")
        self.api_port = int(_os.getenv("APP_PORT", "8000"))
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        raw_origins = _os.getenv("APP_CORS_ORIGINS", "*")
        self.cors_origins: list[str] = (
            ["*"] if raw_origins == "*"
            else [o.strip() for o in raw_origins.split(",") if o.strip()]
        )
        self.collation_locale = _os.getenv("APP_COLLATION_LOCALE", "zh_CN.UTF-8")
        self.fetch_timeout = float(_os.getenv("APP_FETCH_TIMEOUT", "10"))

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()
