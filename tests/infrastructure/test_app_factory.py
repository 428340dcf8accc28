"""Tests for the application factory and logger factory."""

import logging

import pytest
from fastapi import APIRouter

from src.infrastructure.app_factory import create_application
from src.infrastructure.config.settings import get_settings
from src.infrastructure.logging import get_logger


def test_get_logger_returns_named_logger():
    """Test that modules get plain named loggers."""
    logger = get_logger("src.modules.transcription.omeka_adapter")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "src.modules.transcription.omeka_adapter"


@pytest.mark.asyncio
async def test_lifespan_without_database_steps():
    """Test that startup completes when table creation and element set installation are off."""
    app = create_application(
        router=APIRouter(),
        settings=get_settings(),
        create_tables_on_startup=False,
        install_element_sets_on_startup=False,
    )

    async with app.router.lifespan_context(app):
        assert app.title == get_settings().APP_NAME


def test_docs_exposed_outside_production():
    """Test that documentation routes are served in a local environment."""
    app = create_application(router=APIRouter(), create_tables_on_startup=False, install_element_sets_on_startup=False)

    assert app.docs_url == get_settings().DOCS_URL
