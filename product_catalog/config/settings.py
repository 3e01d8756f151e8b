"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the product catalog using Pydantic Settings.

A single cached Settings instance is shared by the whole process through
get_settings().

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

Storage Backends:
----------------
- sql:    SQLAlchemy engine built from DATABASE_URL (SQLite by default)
- memory: Process-local store, discarded on exit

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name used in log banners
        app_env: Environment mode (development/staging/production)
        debug: Force DEBUG logging regardless of log_level
        log_level: Root logging level name
        storage_backend: "sql" or "memory"
        database_url: SQLAlchemy database connection string
        sql_echo: Log every SQL statement emitted by the engine

    Example:
        >>> settings = Settings(storage_backend="memory")
        >>> settings.uses_memory_storage
        True
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Catalog Service",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level name (DEBUG, INFO, WARNING, ERROR)"
    )

    # =========================================================================
    # STORAGE SETTINGS
    # =========================================================================
    storage_backend: str = Field(
        default="sql",
        description="Product store: 'sql' or 'memory'"
    )

    database_url: str = Field(
        default="sqlite:///./storage/db/catalog.db",
        description="SQLAlchemy database connection string"
    )

    sql_echo: bool = Field(
        default=False,
        description="Echo SQL statements to the log"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development'.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Validate the logging level name.

        Raises:
            ValueError: If the level is not a standard logging level
        """
        supported = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        normalized = value.upper().strip()

        if normalized not in supported:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )

        return normalized

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, value: str) -> str:
        """
        Validate the storage backend name.

        Raises:
            ValueError: If the backend is not 'sql' or 'memory'
        """
        normalized = value.lower().strip()

        if normalized not in {"sql", "memory"}:
            raise ValueError(
                f"Unsupported storage backend: {value}. Supported: memory, sql"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def uses_memory_storage(self) -> bool:
        """Check if products are kept in process memory."""
        return self.storage_backend == "memory"

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level, DEBUG when debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def get_database_path(self) -> Optional[Path]:
        """
        Extract database file path for SQLite databases.

        Returns:
            Path to database file, or None for in-memory SQLite
            and non-SQLite databases
        """
        if not self.database_url.startswith("sqlite"):
            return None

        db_path = self.database_url.split(":///", 1)[-1] if ":///" in self.database_url else ""
        if not db_path or db_path == ":memory:":
            return None

        if db_path.startswith("./"):
            db_path = db_path[2:]
        return Path(db_path)

    def ensure_directories(self) -> None:
        """Create the SQLite database directory if one is needed."""
        if self.uses_memory_storage:
            return

        db_path = self.get_database_path()
        if db_path:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Database directory verified: {db_path.parent}")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"storage_backend={self.storage_backend!r})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Uses lru_cache so the environment is read once per process.
    Call get_settings.cache_clear() to pick up environment changes.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
