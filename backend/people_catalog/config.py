"""Application configuration settings."""
from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache

# Get the backend directory path
BACKEND_DIR = Path(__file__).resolve().parent.parent

# Images live next to the backend in the deployed tree
DEFAULT_IMAGES_DIR = BACKEND_DIR.parent / "public" / "images"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Image directory scanned on every request
    images_dir: str = str(DEFAULT_IMAGES_DIR)

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: str = "*"

    # 'development' exposes exception messages in 500 responses
    environment: str = "production"
    log_level: str = "INFO"

    class Config:
        env_file = str(BACKEND_DIR / ".env")
        env_file_encoding = "utf-8"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"

    @property
    def images_path(self) -> Path:
        return Path(self.images_dir)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
