from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Values from .env take precedence over variables already set in the environment.
load_dotenv(override=True)

class Settings(BaseSettings):
    """Settings for the RentX service."""

    # API settings
    PROJECT_NAME: str = "RentX"
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 8090

    # Database settings
    DATABASE_URL: str = "sqlite:///rentx.db"

    # Content directories
    UPLOAD_DIR: str = "uploads"
    STATIC_DIR: str = "dist"
    MAX_UPLOAD_SIZE_MB: int = 10

    # CORS settings, sent on every API response
    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_METHODS: str = "GET, POST, OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type"

    LOG_LEVEL: str = "INFO"

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    model_config = {
        "case_sensitive": True,
        "env_file": ".env"
    }

# Create settings instance
settings = Settings()
