"""
Tuiter Backend — Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and exposes them on a `Settings` object.
Who:   Read by the application factory, the database layer and Alembic.
When:  Loaded once when the application context is built.

Database URL:
    DATABASE_URL wins when set. Otherwise the URL is assembled from the
    DB_USERNAME / DB_PASSWORD credentials plus host, port and database name.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Production deployments supply
    DB_USERNAME and DB_PASSWORD (or a complete DATABASE_URL).
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Full async URL, e.g. postgresql+asyncpg://user:pw@host:5432/tuiter
    database_url: Optional[str] = Field(
        default=None,
        description="Complete SQLAlchemy async URL; overrides the DB_* parts",
    )

    db_username: str = Field(default="", description="Database user name")
    db_password: str = Field(default="", description="Database password")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432, ge=1, le=65535)
    db_name: str = Field(default="tuiter")
    db_driver: str = Field(default="postgresql+asyncpg")

    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    @property
    def sqlalchemy_url(self) -> str:
        """
        What: The URL handed to create_async_engine.
        How:  Uses DATABASE_URL verbatim, or builds one with URL.create so
              credentials containing '@' or ':' are escaped.
        """
        if self.database_url:
            return self.database_url
        url = URL.create(
            drivername=self.db_driver,
            username=self.db_username or None,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    # PORT from the environment, 4000 otherwise
    port: int = Field(default=4000, ge=1, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Behaviour ─────────────────────────────────────────────────────────
    # False: GET by unknown id answers 200 with null.
    # True:  GET by unknown id answers 404 not_found.
    strict_not_found: bool = Field(default=False)

    # Create missing tables on startup instead of running Alembic.
    create_tables: bool = Field(default=False)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Checks that the database can be reached with credentials.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises one ValueError listing them.
        """
        errors = []
        if not self.database_url and not (self.db_username and self.db_password):
            errors.append(
                "DB_USERNAME and DB_PASSWORD are not set (and no DATABASE_URL was given)."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


def get_settings() -> Settings:
    """Reads a fresh Settings object from the current environment."""
    return Settings()
