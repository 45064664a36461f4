from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Required at startup
    database_url: str
    jwt_token_key: str

    # "production" turns on the Secure cookie flag
    environment: str = "development"

    # Built single-page client, served for unmatched GET paths
    client_dist_dir: str = "client/dist"

    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    # CORS - production frontend URL
    frontend_url: str | None = None

    @property
    def is_production(self) -> bool:
        """Check if running in a production environment."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
