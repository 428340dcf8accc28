"""Option service for process-wide settings stored in the repository."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.config.settings import get_settings
from ...infrastructure.logging import get_logger
from .crud import option_crud
from .models import Option
from .schemas import IMPORT_TYPE_OPTION, ImportType

logger = get_logger(__name__)


class OptionService:
    """Reads and writes options.

    Options are read from the database on every call, so a change made by
    one request is seen by the next one without a restart.
    """

    async def get_option(self, name: str, db: AsyncSession) -> Optional[str]:
        """Get an option value, or None when it was never set."""
        option = await option_crud.get(db=db, name=name)
        if option is None:
            return None
        return option["value"]

    async def set_option(self, name: str, value: str, db: AsyncSession) -> None:
        """Create or overwrite an option."""
        if await option_crud.exists(db=db, name=name):
            await option_crud.update(db=db, object={"value": value}, name=name)
        else:
            db.add(Option(name=name, value=value))
            await db.commit()

        logger.info("Option updated", extra={"option_name": name, "option_value": value})

    async def get_import_type(self, db: AsyncSession) -> ImportType:
        """Current transcription import type.

        Falls back to ``TRANSCRIPTION_IMPORT_TYPE`` when the option was never set.
        """
        value = await self.get_option(IMPORT_TYPE_OPTION, db)
        if value is None:
            value = get_settings().TRANSCRIPTION_IMPORT_TYPE
        return ImportType.from_value(value)

    async def set_import_type(self, import_type: ImportType, db: AsyncSession) -> None:
        """Change the transcription import type for subsequent imports."""
        await self.set_option(IMPORT_TYPE_OPTION, import_type.value, db)
