# terraai/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    app_name: str = Field(default="TerraAI Data API", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Keys
    nasa_api_key: str = Field(default="DEMO_KEY", alias="NASA_API_KEY")

    # Bases
    gibs_base: str = Field(default="https://gibs.earthdata.nasa.gov/wmts/epsg3857/best", alias="GIBS_BASE")
    nasa_probe_url: str = Field(default="https://api.nasa.gov/planetary/apod", alias="NASA_PROBE_URL")

    # Fallback service
    probe_timeout: float = Field(default=5.0, alias="PROBE_TIMEOUT")
    cache_ttl_seconds: float = Field(default=30 * 60, alias="CACHE_TTL_SECONDS")

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[1] / ".env"),  # terraai/.env
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
