"""
Configuration settings for the RASA NLU proxy.
"""
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field
from functools import lru_cache
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream RASA NLU service
    rasa_server_url: str = Field(
        validation_alias=AliasChoices("RASA_SERVER_URL", "DEFAULT_URL")
    )

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    # Inbound body ceiling (50 MB, large enough for bulk training uploads)
    max_body_size: int = Field(default=50 * 1024 * 1024, alias="MAX_BODY_SIZE")

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Path = Field(default=Path("./logs"), alias="LOG_DIR")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.log_dir.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.ensure_directories()
    return settings
