"""Factories for repository records used across tests."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.modules.element.constants import DUBLIN_CORE, TITLE
from src.modules.element.schemas import RecordRef
from src.modules.element.services import ElementTextService
from src.modules.file.models import File
from src.modules.item.models import Item


async def create_item(db: AsyncSession, title: Optional[str] = None) -> int:
    """Create an item, optionally with a Dublin Core title."""
    item = Item()
    db.add(item)
    await db.commit()

    if title is not None:
        await ElementTextService().replace_text(RecordRef.item(item.id), TITLE, DUBLIN_CORE, title, db)
    return item.id


async def create_file(
    db: AsyncSession,
    item_id: int,
    original_filename: str,
    title: Optional[str] = None,
    order: Optional[int] = None,
    filename: Optional[str] = None,
) -> int:
    """Attach a file to an item, optionally with a Dublin Core title."""
    file = File(
        item_id=item_id,
        filename=filename or f"stored-{original_filename}",
        original_filename=original_filename,
        mime_type="image/jpeg",
        order=order,
    )
    db.add(file)
    await db.commit()

    if title is not None:
        await ElementTextService().replace_text(RecordRef.file(file.id), TITLE, DUBLIN_CORE, title, db)
    return file.id
