"""Application configuration for qt-plan."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment (QT_PLAN_* variables or .env)."""

    # Data source
    database_url: str = ""
    db_echo: bool = False

    # Plan collection
    dialect: str = "mysql"
    explain_prefix: str = "EXPLAIN EXTENDED "

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "QT_PLAN_"
        env_file = ".env"

    @property
    def has_database(self) -> bool:
        """Check if a default data source is configured."""
        return bool(self.database_url)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
