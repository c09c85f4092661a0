# src/spotikit/core/config.py

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    spotify_api_base: str = Field("https://api.spotify.com/v1", env="SPOTIFY_API_BASE")
    spotify_access_token: Optional[str] = Field(None, env="SPOTIFY_ACCESS_TOKEN")
    spotify_market: Optional[str] = Field(None, env="SPOTIFY_MARKET")
    spotify_timeout: float = Field(8.0, env="SPOTIFY_TIMEOUT")
    log_level: str = Field("INFO", env="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

settings = Settings()
