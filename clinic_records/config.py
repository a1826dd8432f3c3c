"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.
    
    Attributes:
        database_url: SQLAlchemy connection string for the record tables
        log_level: Root logging level name (DEBUG, INFO, WARNING, ...)
        app_name: Title reported by the API
        cors_origins: Origins allowed by the CORS middleware
    """
    # Database settings
    database_url: str = "sqlite:///./clinic_records.db"

    # Logging settings
    log_level: str = "INFO"

    # API settings
    app_name: str = "Clinic Records API"
    cors_origins: List[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


def get_settings() -> Settings:
    """
    Build a fresh settings instance from the current environment.
    
    Returns:
        Settings: Loaded settings
    """
    return Settings()
