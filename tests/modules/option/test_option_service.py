"""Tests for option service."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.modules.option.schemas import IMPORT_TYPE_OPTION, ImportType
from src.modules.option.services import OptionService


@pytest.fixture
def option_service():
    """Create option service instance."""
    return OptionService()


@pytest.mark.asyncio
async def test_get_option_not_set(option_service: OptionService, db_session: AsyncSession):
    """Test reading an option that was never set."""
    assert await option_service.get_option("missing_option", db_session) is None


@pytest.mark.asyncio
async def test_set_option_creates_and_overwrites(option_service: OptionService, db_session: AsyncSession):
    """Test creating an option and then changing it."""
    await option_service.set_option("scripto_home_page", "Welcome", db_session)
    assert await option_service.get_option("scripto_home_page", db_session) == "Welcome"

    await option_service.set_option("scripto_home_page", "Start transcribing", db_session)
    assert await option_service.get_option("scripto_home_page", db_session) == "Start transcribing"


@pytest.mark.asyncio
async def test_import_type_defaults_to_setting(option_service: OptionService, db_session: AsyncSession):
    """Test that the configured default applies until the option is set."""
    assert await option_service.get_import_type(db_session) == ImportType.PLAIN_TEXT


@pytest.mark.asyncio
async def test_set_import_type(option_service: OptionService, db_session: AsyncSession):
    """Test that a changed import type is read back on the next call."""
    await option_service.set_import_type(ImportType.HTML, db_session)
    assert await option_service.get_import_type(db_session) == ImportType.HTML

    await option_service.set_import_type(ImportType.PLAIN_TEXT, db_session)
    assert await option_service.get_import_type(db_session) == ImportType.PLAIN_TEXT


@pytest.mark.asyncio
async def test_unknown_import_type_value_means_plain_text(option_service: OptionService, db_session: AsyncSession):
    """Test that any stored value other than html imports as plain text."""
    await option_service.set_option(IMPORT_TYPE_OPTION, "markdown", db_session)

    import_type = await option_service.get_import_type(db_session)

    assert import_type == ImportType.PLAIN_TEXT
    assert import_type.is_html is False


@pytest.mark.parametrize(
    "value,expected",
    [
        ("html", ImportType.HTML),
        (" HTML ", ImportType.HTML),
        ("plain_text", ImportType.PLAIN_TEXT),
        ("", ImportType.PLAIN_TEXT),
        (None, ImportType.PLAIN_TEXT),
    ],
)
def test_import_type_from_value(value, expected):
    """Test mapping raw option values to import types."""
    assert ImportType.from_value(value) == expected
