from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    DATABASE_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True


class ApiSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="API_", extra="ignore")

    title: str = "Movie Catalog"
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = False
