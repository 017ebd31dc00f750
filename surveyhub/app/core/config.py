"""Application configuration.

Defines `Settings` populated from environment variables and the `.env` file.
"""
# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Survey Hub"
    DEBUG: bool = False
    DATABASE_URL: str = "sqlite:///./surveyhub.db"
    SECRET_KEY: str = "change-me-in-env"

    SESSION_COOKIE_NAME: str = "surveyhub_session"
    SESSION_TTL: int = 60 * 60 * 24 * 7  # 7 days

    PUBLIC_URL: str = "http://127.0.0.1:3000"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    LOG_PATH: str = "logging"
    LOG_FILE: str = "surveyhub.log"
    LOG_LEVEL: str = "INFO"

    CASCADE_DELETE_RESPONSES: bool = False
    STRICT_ANSWERS: bool = False


settings = Settings()
