"""
Configuration settings for the document manager.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application Settings
    app_name: str = Field(default="Document Manager", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Repository Settings
    thread_safe: bool = Field(default=True, description="Guard the store with a read/write lock")
    max_id_attempts: int = Field(default=0, ge=0, description="Max id regenerations on collision; 0 = unbounded")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    class Config:
        env_prefix = "DOCUMENT_MANAGER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
