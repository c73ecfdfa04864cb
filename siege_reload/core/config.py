"""
Application configuration management
"""
import logging
from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Ensure repository .env values win over stale exported shell variables.
load_dotenv(override=True)

class Settings(BaseSettings):
    """Application settings"""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Plugin identity
    PLUGIN_NAME: str = "InstantSiegeReload"

    # Persisted reload configuration
    CONFIG_DIR: str = "config"

    # Host integration
    RELOAD_FIELD_NAME: str = "reloadTime"  # private field on Catapult / BallistaGun

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/siege_reload.log"  # empty disables the file handler

    @field_validator('PLUGIN_NAME')
    @classmethod
    def validate_plugin_name(cls, v):
        name = str(v or "").strip()
        if not name:
            raise ValueError('PLUGIN_NAME cannot be empty')
        if any(ch in name for ch in ('/', '\\')):
            raise ValueError('PLUGIN_NAME cannot contain path separators')
        return name

    @field_validator('RELOAD_FIELD_NAME')
    @classmethod
    def validate_reload_field_name(cls, v):
        name = str(v or "").strip()
        if not name.isidentifier():
            raise ValueError('RELOAD_FIELD_NAME must be a valid attribute name')
        return name

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        level = str(v or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown LOG_LEVEL "{v}"')
        return level

    def get_config_path(self) -> Path:
        return Path(self.CONFIG_DIR) / f"{self.PLUGIN_NAME}.json"

# Global settings instance
settings = Settings()
