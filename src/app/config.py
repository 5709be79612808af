from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RECIPES_BASE_URL = "https://d3jbb8n5wk0qxi.cloudfront.net"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    RECIPES_BASE_URL: str = DEFAULT_RECIPES_BASE_URL
    HTTP_TIMEOUT_SECONDS: float = 15.0
    LOG_LEVEL: str = "INFO"
    APP_ENV: str = "local"


settings = Settings()
