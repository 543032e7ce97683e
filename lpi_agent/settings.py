"""Environment-driven settings for the LPI ask service."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="LPI Ask Service", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    supabase_url: str = Field(default="http://localhost:54321", alias="SUPABASE_URL")
    supabase_anon_key: str = Field(default="", alias="SUPABASE_ANON_KEY")
    store_timeout_seconds: float = Field(default=10.0, alias="STORE_TIMEOUT_SECONDS")
    model_name: str = Field(default="google/flan-t5-base", alias="MODEL_NAME")
    default_top_n: int = Field(default=5, alias="DEFAULT_TOP_N")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
