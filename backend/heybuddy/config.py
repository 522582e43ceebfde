from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    # App settings
    APP_NAME: str = "Hey Buddy"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./heybuddy.db"

    # Single-user mode: every syllabus and todo belongs to this user
    DEFAULT_USER_ID: int = 1

    # Uploads
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    # CORS
    CORS_ORIGINS: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

# CORS - Get from environment or use defaults
def get_cors_origins() -> list:
    cors_env = settings.CORS_ORIGINS or os.getenv("CORS_ORIGINS")
    if cors_env:
        # Support comma-separated list
        return [origin.strip() for origin in cors_env.split(",") if origin.strip()]
    return ["http://localhost:3000", "http://localhost:5173"]
