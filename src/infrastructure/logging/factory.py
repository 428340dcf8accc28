"""Logger factory with lazy, settings-driven configuration.

Modules obtain loggers through ``get_logger(__name__)``; the first call
configures the root logger from the application settings.
"""

import logging
from threading import Lock

from ..config.settings import get_settings
from .config import setup_logging_configuration

_logging_configured = False
_configuration_lock = Lock()


def get_logger(name: str) -> logging.Logger:
    """Get a logger, configuring logging on first use.

    Example:
        ```python
        logger = get_logger(__name__)
        logger.info("Imported page transcription", extra={"document_id": 7, "page_id": 12})
        ```
    """
    if not _logging_configured:
        configure_logging()

    return logging.getLogger(name)


def configure_logging() -> None:
    """Configure logging now instead of on the first ``get_logger`` call."""
    global _logging_configured

    with _configuration_lock:
        if _logging_configured:
            return

        setup_logging_configuration()
        _logging_configured = True

        settings = get_settings()
        logging.getLogger(__name__).info(
            f"Logging configured for {settings.ENVIRONMENT.value} environment",
            extra={
                "log_level": settings.LOG_LEVEL,
                "log_format": settings.LOG_FORMAT,
                "console_enabled": settings.LOG_CONSOLE_ENABLED,
                "file_enabled": settings.LOG_FILE_ENABLED,
            },
        )
