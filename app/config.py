"""
Application configuration using Pydantic settings.

This module contains all configuration settings for the application,
loaded from environment variables with sensible defaults.
"""

import os
from typing import List, Optional, Union

from pydantic import Field, field_validator, ValidationInfo, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden with environment variables.
    """

    # API Configuration
    PROJECT_NAME: str = "PostoAqui Fuel Price API"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = True

    # CORS Configuration
    # Note: Using Union[str, List] to avoid pydantic-settings 2.6+ JSON parsing issues
    BACKEND_CORS_ORIGINS: Union[str, List[str]] = "http://localhost:3000,http://localhost:8100,http://localhost:19006"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(
        cls, v: Union[str, List[str]]
    ) -> List[str]:
        """
        Parse CORS origins from environment variable.

        Supports:
        - Comma-separated string: "http://localhost,http://example.com"
        - Already parsed list: ["http://localhost"]
        - Empty string: returns empty list
        """
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(f"Invalid CORS origins format: {v}")

    # Database Configuration
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postoaqui"
    POSTGRES_PASSWORD: str = "postoaqui"
    POSTGRES_DB: str = "postoaqui"
    POSTGRES_PORT: int = 5432

    SQLALCHEMY_DATABASE_URI: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("SQLALCHEMY_DATABASE_URI", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> str:
        """Assemble database connection string from individual components."""
        if isinstance(v, str) and v:
            return v

        # DATABASE_URL (Neon/Railway/Heroku style)
        database_url = os.getenv("DATABASE_URL")
        if database_url:
            if database_url.startswith("postgres://"):
                database_url = database_url.replace("postgres://", "postgresql+asyncpg://", 1)
            elif database_url.startswith("postgresql://"):
                database_url = database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return database_url

        values = info.data
        db_name = values.get("POSTGRES_DB")

        # Check if it's a SQLite database (ends with .db)
        if db_name and db_name.endswith(".db"):
            return f"sqlite+aiosqlite:///{db_name}"

        return (
            f"postgresql+asyncpg://{values.get('POSTGRES_USER')}:"
            f"{values.get('POSTGRES_PASSWORD')}@"
            f"{values.get('POSTGRES_SERVER')}:"
            f"{values.get('POSTGRES_PORT')}/"
            f"{db_name}"
        )

    # Tables are normally managed by Alembic; enable for local runs and tests
    CREATE_TABLES_ON_STARTUP: bool = False
    DB_ECHO: bool = False

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW: int = 60  # seconds

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_DIR: str = "logs"

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
    )


# Create global settings instance
settings = Settings()
