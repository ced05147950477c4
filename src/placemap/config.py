"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PLACEMAP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Place Registry Map API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level.")
    data_root: Path = Field(default=Path("data"), description="Root directory for static data files.")
    places_file: Path = Field(
        default=Path("data/places.csv"),
        description="CSV export of the place registry used when no database is configured.",
    )
    place_store: Literal["auto", "csv", "supabase"] = Field(
        default="auto",
        description="Place store backend. 'auto' uses Supabase when credentials are set, otherwise the CSV file.",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )
    supabase_places_table: str = Field(default="places", description="Table holding versioned place records.")
    supabase_page_size: int = Field(default=1000, ge=1, le=10_000)

    # Map delivery
    map_default_zoom: int = Field(default=13, description="Zoom level used when the client sends none.")
    map_cache_enabled: bool = True
    map_cache_ttl_seconds: int = Field(default=300, ge=1)
    map_cache_max_entries: int = Field(default=512, ge=1)

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", "places_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


settings = Settings()
