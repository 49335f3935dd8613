"""Application configuration using pydantic-settings."""
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CURATED_FILENAME = "prompts.csv"
VIP_FILENAME = "vip-prompts.json"
CUSTOM_FILENAME = "custom-prompts.json"
METADATA_FILENAME = "metadata.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Directory holding the curated CSV, VIP/custom JSON and metadata JSON files
    data_dir: Path = Field(default=Path("data"), validation_alias="DATA_DIR")

    # Server binding, used by `python -m api`
    api_host: str = Field(default="0.0.0.0", validation_alias="API_HOST")
    api_port: int = Field(default=3001, validation_alias="API_PORT")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # Wrap each read-modify-write in a per-file lock. Off by default: concurrent
    # writers race and the last whole-file write wins.
    serialize_writes: bool = Field(default=False, validation_alias="SERIALIZE_WRITES")

    # Raise on failed file writes instead of logging and reporting success.
    strict_writes: bool = Field(default=False, validation_alias="STRICT_WRITES")

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def curated_path(self) -> Path:
        """Path of the curated CSV source."""
        return self.data_dir / CURATED_FILENAME

    @property
    def vip_path(self) -> Path:
        """Path of the VIP prompt collection."""
        return self.data_dir / VIP_FILENAME

    @property
    def custom_path(self) -> Path:
        """Path of the user-created prompt collection."""
        return self.data_dir / CUSTOM_FILENAME

    @property
    def metadata_path(self) -> Path:
        """Path of the favorites/usage metadata document."""
        return self.data_dir / METADATA_FILENAME


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
