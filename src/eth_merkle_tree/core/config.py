"""
Eth Merkle Tree - Configuration
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Eth Merkle Tree"
    VERSION: str = "0.1.0"
    ENV: str = "development"
    LOG_LEVEL: str = "WARNING"

    # Lookup
    LOCATE_LEAVES_ONLY: bool = False

    # Visualization
    GRAPHVIZ_DOT_BINARY: str = "dot"
    GRAPHVIZ_OUTPUT_DIR: str = "./output"

    # Metrics
    METRICS_ENABLED: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
