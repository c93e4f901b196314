"""Settings for fitness-catalog."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """Runtime settings, read from FITNESS_CATALOG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_CATALOG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = DATA_DIR
    db_filename: str = "fitness_catalog.db"
    log_level: str = "info"
    log_json: bool = False
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_filename


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings."""
    return Settings()
