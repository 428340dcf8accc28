"""Centralized logging for the transcription adapter.

Usage:
    ```python
    from src.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Imported document transcription", extra={"document_id": 7})
    ```
"""

from .config import configure_testing_logging, setup_logging_configuration
from .factory import configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "configure_testing_logging",
    "setup_logging_configuration",
]
