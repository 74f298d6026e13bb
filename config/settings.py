from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field, field_validator
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import os
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_anon_key", "supabase_key"),
    )
    db_schema: str = "public"

    # Web server
    host: str = "0.0.0.0"
    port: int = 8080
    session_cookie: str = "eventhub_session"
    session_idle_seconds: int = 12 * 3600
    max_sessions: int = 1000

    # Display
    display_timezone: str = "UTC"

    # Environment
    env: str = "development"
    debug: bool = False

    @field_validator('display_timezone')
    @classmethod
    def check_timezone(cls, v):
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown timezone: {v}")
        return v

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
        populate_by_name=True,
    )

    @property
    def has_supabase_credentials(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


# Create settings instance
settings = Settings()

if os.getenv("DEBUG", "").lower() == "true":
    print(f"Settings loaded:")
    print(f"  SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}")
    print(f"  SUPABASE_ANON_KEY: {'set' if settings.supabase_anon_key else 'MISSING'}")
