import logging
import os
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings
from starlette.config import Config

logger = logging.getLogger(__name__)

project_root = os.path.abspath(os.path.join(os.path.dirname(os.path.realpath(__file__)), "..", "..", ".."))

# First existing file wins; without one, values come from the process environment only.
env_path = next(
    (path for path in ("/code/.env", os.path.join(project_root, ".env")) if os.path.isfile(path)),
    None,
)
logger.info(f"Reading settings from {env_path or 'process environment'}")

config = Config(env_path)


class EnvironmentOption(str, Enum):
    """Deployment environments; logging and docs exposure depend on it."""

    PRODUCTION = "production"
    STAGING = "staging"
    DEVELOPMENT = "development"
    LOCAL = "local"


class EnvironmentSettings(BaseSettings):
    ENVIRONMENT: EnvironmentOption = config("ENVIRONMENT", default=EnvironmentOption.DEVELOPMENT, cast=EnvironmentOption)


class DatabaseSettings(BaseSettings):
    """Connection to the repository database.

    ``REPOSITORY_DATABASE_URL`` takes precedence over the ``POSTGRES_*``
    values, e.g. ``sqlite+aiosqlite:///./repository.db`` for a local archive.
    """

    REPOSITORY_DATABASE_URL: Optional[str] = config("REPOSITORY_DATABASE_URL", default=None)

    POSTGRES_USER: str = config("POSTGRES_USER", default="postgres")
    POSTGRES_PASSWORD: str = config("POSTGRES_PASSWORD", default="postgres")
    POSTGRES_SERVER: str = config("POSTGRES_SERVER", default="localhost")
    POSTGRES_PORT: int = config("POSTGRES_PORT", default=5432, cast=int)
    POSTGRES_DB: str = config("POSTGRES_DB", default="repository")
    POSTGRES_ASYNC_PREFIX: str = config("POSTGRES_ASYNC_PREFIX", default="postgresql+asyncpg://")

    DB_POOL_SIZE: int = config("DB_POOL_SIZE", default=10, cast=int)
    DB_MAX_OVERFLOW: int = config("DB_MAX_OVERFLOW", default=5, cast=int)

    CREATE_TABLES_ON_STARTUP: bool = config("CREATE_TABLES_ON_STARTUP", default=True, cast=bool)

    @property
    def DATABASE_URL(self) -> str:
        if self.REPOSITORY_DATABASE_URL:
            return self.REPOSITORY_DATABASE_URL
        credentials = f"{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
        return f"{self.POSTGRES_ASYNC_PREFIX}{credentials}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def DATABASE_IS_SQLITE(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


class APISettings(BaseSettings):
    """HTTP surface of the adapter."""

    API_PREFIX: str = "/api"
    DOCS_URL: str = config("DOCS_URL", default="/docs")
    REDOC_URL: str = config("REDOC_URL", default="/redoc")
    OPENAPI_URL: str = config("OPENAPI_URL", default="/openapi.json")
    # Docs are hidden in production unless explicitly enabled.
    ENABLE_DOCS_IN_PRODUCTION: bool = config("ENABLE_DOCS_IN_PRODUCTION", default=False, cast=bool)


class AppSettings(BaseSettings):
    APP_NAME: str = "Transcription Adapter API"
    APP_DESCRIPTION: str = "Repository adapter for a crowd-transcription workflow engine"
    VERSION: str = "0.1.0"


class TranscriptionSettings(BaseSettings):
    """Which repository backend the engine talks to, and how imports are stored.

    ``TRANSCRIPTION_IMPORT_TYPE`` is only the default: once the
    ``transcription_import_type`` option is stored in the repository, the
    option wins and is re-read on every import.
    """

    TRANSCRIPTION_BACKEND: str = config("TRANSCRIPTION_BACKEND", default="omeka")
    TRANSCRIPTION_IMPORT_TYPE: str = config("TRANSCRIPTION_IMPORT_TYPE", default="plain_text")
    FILES_BASE_URL: str = config("FILES_BASE_URL", default="http://localhost:8000/files")
    INSTALL_ELEMENT_SETS_ON_STARTUP: bool = config("INSTALL_ELEMENT_SETS_ON_STARTUP", default=True, cast=bool)


class LoggingSettings(BaseSettings):
    """Logging output; handlers per environment are chosen in ``infrastructure.logging.config``."""

    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")
    LOG_FORMAT: str = config("LOG_FORMAT", default="structured")  # simple | detailed | structured | json

    LOG_CONSOLE_ENABLED: bool = config("LOG_CONSOLE_ENABLED", default=True, cast=bool)
    LOG_DEVELOPMENT_VERBOSE: bool = config("LOG_DEVELOPMENT_VERBOSE", default=True, cast=bool)
    # Production console shows WARNING and above only.
    LOG_PRODUCTION_QUIET_CONSOLE: bool = config("LOG_PRODUCTION_QUIET_CONSOLE", default=True, cast=bool)

    LOG_FILE_ENABLED: bool = config("LOG_FILE_ENABLED", default=False, cast=bool)
    LOG_FILE_PATH: str = config("LOG_FILE_PATH", default="logs/transcription.log")
    LOG_FILE_MAX_SIZE: int = config("LOG_FILE_MAX_SIZE", default=10 * 1024 * 1024, cast=int)
    LOG_FILE_BACKUP_COUNT: int = config("LOG_FILE_BACKUP_COUNT", default=5, cast=int)

    @property
    def LOG_LEVEL_INT(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


class Settings(
    EnvironmentSettings,
    DatabaseSettings,
    APISettings,
    AppSettings,
    TranscriptionSettings,
    LoggingSettings,
):
    pass


settings = Settings()


def get_settings() -> Settings:
    return settings
