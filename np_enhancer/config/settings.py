"""Configuration management using Pydantic Settings.

This module provides type-safe configuration management with automatic
environment variable loading and validation using Pydantic Settings v2.

The configuration is organized into logical groups:
- APIConfig: ListenBrainz and MusicBrainz endpoints, user agent and timeouts
- CacheConfig: Response cache key namespace and never-cached hosts
- LoggingConfig: Logging levels, files, and debugging options
- ServerConfig: Bind address for the HTTP handler
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseModel):
    """External service endpoints and request settings."""

    listenbrainz_base_url: str = "https://api.listenbrainz.org/1"
    musicbrainz_base_url: str = "https://musicbrainz.org/ws/2"
    user_agent: str = "listenbrainz-np-meta-enhancer/1.0 github.com/thrzl/workers"
    request_timeout: float = 10.0
    recent_listen_count: int = 1


class CacheConfig(BaseModel):
    """Response cache configuration.

    Cache entries never expire. Hosts listed in ``uncached_hosts`` serve
    volatile listen state and always bypass the cache.
    """

    key_base_url: str = "https://lstnbrnz.thrzl.xyz"
    uncached_hosts: list[str] = ["api.listenbrainz.org"]


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("logs/np_enhancer.log")
    real_time_debug: bool = True


class ServerConfig(BaseModel):
    """Bind address for the now-playing HTTP handler."""

    host: str = "127.0.0.1"
    port: int = 8787


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: LISTENBRAINZ_BASE_URL, CONSOLE_LOG_LEVEL, USER_AGENT
    - Nested: API__LISTENBRAINZ_BASE_URL, LOGGING__CONSOLE_LEVEL

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    api: APIConfig = APIConfig()
    cache: CacheConfig = CacheConfig()
    logging: LoggingConfig = LoggingConfig()
    server: ServerConfig = ServerConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Transform flat environment variables to nested structure.

        Maps flat env vars (USER_AGENT) to the nested structure expected
        by the models (api.user_agent).
        """
        if not isinstance(data, dict):
            return data

        transformed: dict[str, dict[str, Any]] = {}

        flat_mappings = {
            "api": {
                "listenbrainz_base_url": "listenbrainz_base_url",
                "musicbrainz_base_url": "musicbrainz_base_url",
                "user_agent": "user_agent",
                "request_timeout": "request_timeout",
            },
            "cache": {
                "cache_key_base_url": "key_base_url",
            },
            "logging": {
                "console_log_level": "console_level",
                "file_log_level": "file_level",
                "log_file": "log_file",
                "log_real_time_debug": "real_time_debug",
            },
        }
        for section, mapping in flat_mappings.items():
            for env_key, field_key in mapping.items():
                if env_key in data:
                    transformed.setdefault(section, {})[field_key] = data.pop(env_key)

        for section, values in transformed.items():
            existing = data.get(section)
            if isinstance(existing, dict):
                data[section] = {**existing, **values}
            else:
                data[section] = values

        return data


# Singleton instance for application use
settings = Settings()
