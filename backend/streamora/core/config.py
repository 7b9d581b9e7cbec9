"""Application configuration settings.

All configuration values are loaded from environment variables (.env file).
No sensitive values should be hardcoded here.
"""

from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    PROJECT_NAME: str = "Streamora Creator API"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: list[str] = []

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Record store
    # STORE_BACKEND: memory, local, redis
    STORE_BACKEND: str = "local"
    STORE_KEY_PREFIX: str = "streamora_"

    # Local store (when STORE_BACKEND=local)
    LOCAL_STORAGE_PATH: str = "./storage"

    # Redis store (when STORE_BACKEND=redis)
    REDIS_URL: str = "redis://localhost:6379/0"

    # Privileged account. Admin login is disabled while the password is unset.
    ADMIN_HANDLE: str = "SHUBOWNER2026"
    ADMIN_PASSWORD: Optional[str] = None

    # Session tokens. Override SECRET_KEY outside local development.
    SECRET_KEY: str = "streamora-dev-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Credential hashing (bcrypt cost factor)
    BCRYPT_ROUNDS: int = 12

    # Monetization rules
    MONETIZATION_MIN_SUBSCRIBERS: int = 100
    MONETIZATION_MIN_VIEWS: int = 1000
    MIN_PAYOUT_AMOUNT: float = 100.0
    PAYOUT_DEDUCT_ON_APPROVAL: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
