from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"

    # Data source
    data_backend: str = "csv"
    data_dir: str = "sample_data"

    # Dates are bucketed and filtered in this timezone
    timezone: str = "America/Mexico_City"

    # UI settings
    default_category: Optional[str] = "Vinil"
    history_days: int = 30
    min_history_days: int = 7
    max_history_days: int = 365
    unspecified_label: str = "unspecified"

    # Seed data settings
    default_seed_days: int = 60
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
