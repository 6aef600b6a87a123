"""
Configuration management for the travel planner.
"""
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Xyross Travel Planner"

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"

    # Trip Store
    id_strategy: Literal["uuid", "counter"] = "uuid"
    # An HTTP delete without an explicit answer counts as "Cancel" unless set
    confirm_deletes_by_default: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
