from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    # Remote Provider
    SUPADATA_API_KEY: Optional[str] = None
    SUPADATA_BASE_URL: str = "https://api.supadata.ai/v1/youtube/transcript"
    REQUEST_TIMEOUT: float = 30

    # Cache binding: "memory" or a directory path. Unset disables caching.
    TRANSCRIPT_CACHE: Optional[str] = None
    NOT_FOUND_TTL: int = 3600

    # System Settings
    LOG_LEVEL: str = "INFO"

    # Paths
    OUTPUT_DIR: str = "outputs"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
