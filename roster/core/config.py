# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "roster-service")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    # "sql" persists through SQLAlchemy, "memory" keeps snapshots in-process
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "sql").lower()
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./roster.db")
    POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
    MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))

    PEOPLE_STORAGE_KEY: str = os.getenv("PEOPLE_STORAGE_KEY", "team-organizer:people")
    TEAMS_STORAGE_KEY: str = os.getenv("TEAMS_STORAGE_KEY", "team-organizer:teams")

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
