"""
Configuration management using Pydantic settings.
Handles database URL, token signing, payment gateway and server settings.
"""

from pydantic import validator
from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from the environment or a .env file."""

    # Application configuration
    app_name: str = "HomeHunt Marketplace API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database components; declared before database_url so the validator sees them
    postgres_db: str = "homehunt"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    database_url: str = ""
    create_tables_on_startup: bool = True

    # Token configuration
    jwt_secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24

    # Payment gateway configuration
    payment_gateway_url: str = "https://api.stripe.com"
    payment_gateway_secret_key: str = ""
    payment_currency: str = "usd"
    payment_gateway_timeout: float = 20.0

    # HTTP configuration
    cors_origins: List[str] = ["http://localhost:5173"]
    max_request_size: int = 1024 * 1024

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 3000

    @validator("database_url", pre=True, always=True)
    def assemble_database_url(cls, v, values):
        """Build database URL from components if not provided directly."""
        if not v:
            user = values.get("postgres_user", "postgres")
            password = values.get("postgres_password", "postgres")
            host = values.get("postgres_host", "localhost")
            port = values.get("postgres_port", 5432)
            db = values.get("postgres_db", "homehunt")
            return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db}"

        # Ensure an async driver is used
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @validator("jwt_secret_key")
    def validate_jwt_secret_key(cls, v):
        """Refuse an empty signing secret."""
        if not v:
            raise ValueError("JWT_SECRET_KEY is required")
        return v

    @validator("environment")
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()


# Global settings instance
settings = get_settings()
