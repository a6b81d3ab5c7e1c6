from pathlib import Path
from typing import Literal, Optional, List

from pydantic import AliasChoices, AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class TMDBSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TMDB_", env_file=".env", extra="ignore")
    api_key: SecretStr
    api_base_url: AnyHttpUrl = "https://api.themoviedb.org/3"
    language: str = "en-US"
    request_timeout: Optional[float] = None  # None keeps the requests default


class FirebaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FIREBASE_", env_file=".env", extra="ignore")
    service_account: Optional[SecretStr] = None  # full service account JSON
    service_account_file: Path = Path("serviceAccountKey.json")
    project_id: Optional[str] = None
    database: Optional[str] = None
    emulator_host: Optional[str] = None


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    verify_ssl: bool = True

    # ---- API server configuration ----
    api_host: str = "0.0.0.0"
    api_port: int = Field(5000, validation_alias=AliasChoices("APP_API_PORT", "PORT"))
    api_reload: bool = False
    api_workers: int = 1
    cors_origins: List[str] = ["*"]

    # ---- storage ----
    storage_backend: Literal["firestore", "memory"] = "firestore"
    reviews_collection: str = "reviews"
    users_collection: str = "users"

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_ENV, APP_LOG_LEVEL, etc.
        env_nested_delimiter='__',
        extra = "ignore"
    )

    # ---- integrations ----
    tmdb: Optional[TMDBSettings] = None  # <-- DO NOT instantiate here
    firebase: Optional[FirebaseSettings] = None


def get_settings() -> Settings:
    """Accessor kept as a function so tests can build fresh settings from a patched env."""
    return Settings()


def get_tmdb_settings(cfg: Settings) -> TMDBSettings:
    """TMDB settings nested under APP_TMDB__*, falling back to plain TMDB_* variables."""
    return cfg.tmdb or TMDBSettings()


def get_firebase_settings(cfg: Settings) -> FirebaseSettings:
    return cfg.firebase or FirebaseSettings()
