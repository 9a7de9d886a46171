import os
import yaml
from pathlib import Path
from typing import Dict, Any
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def load_roster_config() -> Dict[str, Any]:
    """Load service configuration from config.yml"""
    config_path = Path(os.getenv("ROSTER_CONFIG", "/app/server/config.yml"))
    if not config_path.exists():
        # Fallback to relative path for development
        config_path = Path("server/config.yml")

    if config_path.exists():
        with open(config_path, "r") as f:
            return yaml.safe_load(f) or {}
    return {}


# Load roster config from YAML
roster_config = load_roster_config()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database settings
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        roster_config.get("database", {}).get("url", "sqlite+aiosqlite:///./roster.db"),
    )
    DATABASE_ECHO: bool = os.getenv("DATABASE_ECHO", "").lower() in ("true", "1", "yes")
    CREATE_TABLES_ON_STARTUP: bool = os.getenv(
        "CREATE_TABLES_ON_STARTUP", "true"
    ).lower() in ("true", "1", "yes")

    # Paging settings from config.yml with fallbacks
    DEFAULT_PAGE_NUMBER: int = int(
        os.getenv(
            "DEFAULT_PAGE_NUMBER",
            str(roster_config.get("paging", {}).get("page_number", 0)),
        )
    )
    DEFAULT_PAGE_SIZE: int = int(
        os.getenv(
            "DEFAULT_PAGE_SIZE",
            str(roster_config.get("paging", {}).get("page_size", 3)),
        )
    )

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    @model_validator(mode="after")
    def validate_paging(self) -> "Settings":
        """Reject paging defaults that would produce an empty or negative page."""
        if self.DEFAULT_PAGE_SIZE < 1:
            raise ValueError("DEFAULT_PAGE_SIZE must be at least 1.")
        if self.DEFAULT_PAGE_NUMBER < 0:
            raise ValueError("DEFAULT_PAGE_NUMBER must not be negative.")
        return self


settings = Settings()
