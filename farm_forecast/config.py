from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"

    # Data paths
    data_dir: str = "sample_data"
    inventory_file: str = "inventory.csv"

    # Forecast settings
    default_horizon_days: int = 30
    horizon_options: List[int] = [7, 14, 30, 60]

    # Seed data settings
    default_seed_farms: int = 8
    default_seed_value: int = 42

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)

def reset_config():
    """Drop the cached AppConfig so the next get_config() re-reads the environment."""
    global _config
    _config = None
