"""FastAPI dependencies for use in API endpoints."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.database import async_session
from ...modules.option.services import OptionService
from ...modules.transcription.interface import TranscriptionAdapter
from ...modules.transcription.registry import get_adapter

DbSession = Annotated[AsyncSession, Depends(async_session)]


def get_transcription_adapter() -> TranscriptionAdapter:
    """Dependency for providing the adapter of the configured repository backend."""
    return get_adapter()


def get_option_service() -> OptionService:
    """Dependency for providing an OptionService instance."""
    return OptionService()


Adapter = Annotated[TranscriptionAdapter, Depends(get_transcription_adapter)]
Options = Annotated[OptionService, Depends(get_option_service)]
