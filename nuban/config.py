"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BANK_DIRECTORY_URL = (
    "https://raw.githubusercontent.com/Chidiebube-Onah/BanksInNigeria/main/BanksInNigeria.min.json"
)


class NubanConfig(BaseSettings):
    """NUBAN toolkit configuration"""

    model_config = SettingsConfigDict(
        env_prefix="NUBAN_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Bank directory configuration
    bank_directory_url: str = DEFAULT_BANK_DIRECTORY_URL
    bank_directory_timeout: float = 10.0
    bank_directory_cache_ttl_seconds: int = 3600  # 0 disables caching

    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8090

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text


# Global configuration instance
config = NubanConfig()


def get_config() -> NubanConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> NubanConfig:
    """Reload configuration from environment"""
    global config
    config = NubanConfig()
    return config
