"""Storefront Configuration"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS - the browser client runs on a different origin
    cors_origins: list[str] = ["*"]

    # Client configuration
    api_base_url: str = "http://localhost:5000"
    request_timeout: float = 30.0

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
