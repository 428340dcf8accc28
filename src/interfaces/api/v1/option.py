"""Option API endpoints."""

from fastapi import APIRouter, HTTPException, status

from ....modules.common.utils.error_handler import handle_exception
from ....modules.option.schemas import ImportTypeRead, ImportTypeUpdate
from ..dependencies import DbSession, Options

router = APIRouter(prefix="/option", tags=["Options"])


@router.get(
    "/import-type",
    summary="Get Import Type",
    description="Returns whether transcriptions are currently imported as plain text or HTML.",
)
async def get_import_type(options: Options, db: DbSession) -> ImportTypeRead:
    """Get the current transcription import type."""
    try:
        return ImportTypeRead(import_type=await options.get_import_type(db))
    except Exception as e:
        http_exc = handle_exception(e)
        if http_exc:
            raise http_exc
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


@router.put(
    "/import-type",
    summary="Change Import Type",
    description="""
    Changes the storage mode of transcriptions imported from now on.

    The change applies to the next import without a restart; already stored
    transcriptions are not converted.
    """,
)
async def update_import_type(update: ImportTypeUpdate, options: Options, db: DbSession) -> ImportTypeRead:
    """Change the transcription import type."""
    try:
        await options.set_import_type(update.import_type, db)
        return ImportTypeRead(import_type=await options.get_import_type(db))
    except Exception as e:
        http_exc = handle_exception(e)
        if http_exc:
            raise http_exc
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")
