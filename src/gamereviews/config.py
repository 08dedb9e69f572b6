"""
Configuration management for the game reviews service
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Store
    id_strategy: str = "uuid"  # 'uuid', 'counter', 'random'
    seed_data_path: str | None = None
    seed_defaults: bool = True  # Load the built-in dataset when no seed file is given

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GAMEREVIEWS_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def is_production(current: Settings | None = None) -> bool:
    """Return True when running with a production environment name."""
    current = current or settings
    return current.environment.lower() in ("production", "prod")
