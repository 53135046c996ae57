"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- Defaults reproduce the fixed bookstore connection (root@localhost, no password)
- Environment variables (or a .env file) may override each value
- Settings are immutable dataclasses; get_settings() is the single source of truth
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Load .env file if present (development convenience)
load_dotenv()

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection settings for the bookstore database."""

    driver: str = "mysql+pymysql"
    host: str = field(default_factory=lambda: os.getenv("BOOKSTORE_DB_HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("BOOKSTORE_DB_PORT", "3306")))
    user: str = field(default_factory=lambda: os.getenv("BOOKSTORE_DB_USER", "root"))
    password: str = field(default_factory=lambda: os.getenv("BOOKSTORE_DB_PASSWORD", ""))
    name: str = field(default_factory=lambda: os.getenv("BOOKSTORE_DB_NAME", "bookstore"))

    @property
    def url(self) -> URL:
        """SQLAlchemy URL; the password is masked when rendered as a string."""
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.name,
        )


@dataclass(frozen=True)
class Settings:
    """
    Root settings container.

    Usage:
        from bookstore_reviews.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.database.url)
    """

    database: DatabaseSettings = field(default_factory=DatabaseSettings)

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = DEFAULT_LOG_FORMAT

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        if not self.database.password:
            issues.append(
                "WARNING: BOOKSTORE_DB_PASSWORD not set. "
                "Connecting to the database without a password."
            )

        if self.database.user == "root":
            issues.append(
                "WARNING: connecting to the database as 'root'. "
                "Set BOOKSTORE_DB_USER to a dedicated account."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
