"""Page API endpoints."""

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ....modules.common.utils.error_handler import handle_exception
from ....modules.transcription.interface import TranscriptionAdapter
from ....modules.transcription.schemas import PageRead, StatusImport, TranscriptionImport
from ..dependencies import Adapter, DbSession

router = APIRouter(prefix="/document/{document_id}/page", tags=["Pages"])


async def _ensure_page(adapter: TranscriptionAdapter, document_id: int, page_id: int, db: AsyncSession) -> None:
    if not await adapter.document_page_exists(document_id, page_id, db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")


def _internal_error(e: Exception) -> HTTPException:
    http_exc = handle_exception(e)
    if http_exc:
        return http_exc
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


@router.get(
    "/{page_id}",
    summary="Get Page Details",
    description="""
    Retrieves a page of a document: its name, file URL, transcription and status.

    The transcription is null when none was ever imported. A page without a
    recorded status reports "Not Started".
    """,
    responses={
        200: {"description": "Page details"},
        404: {"description": "Document or page not found"},
    },
)
async def get_page(document_id: int, page_id: int, adapter: Adapter, db: DbSession) -> PageRead:
    """Get one page of a document."""
    try:
        await _ensure_page(adapter, document_id, page_id, db)
        return PageRead(
            id=page_id,
            document_id=document_id,
            name=await adapter.get_document_page_name(document_id, page_id, db) or "",
            file_url=await adapter.get_document_page_file_url(document_id, page_id, db),
            transcription=await adapter.get_document_page_transcription(page_id, db),
            status=await adapter.document_page_transcription_status(page_id, db) or "",
            transcription_imported=await adapter.document_page_transcription_is_imported(document_id, page_id, db),
        )
    except Exception as e:
        raise _internal_error(e)


@router.put(
    "/{page_id}/transcription",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Import Page Transcription",
    description="""
    Overwrites the transcription of a page.

    Wiki parser report comments are removed before storage. Whether the text
    is stored as HTML depends on the current import type option.
    """,
    responses={
        204: {"description": "Transcription stored"},
        404: {"description": "Document or page not found"},
        500: {"description": "Transcription element is not installed"},
    },
)
async def import_page_transcription(
    document_id: int, page_id: int, transcription: TranscriptionImport, adapter: Adapter, db: DbSession
) -> Response:
    """Import a page transcription."""
    try:
        await _ensure_page(adapter, document_id, page_id, db)
        await adapter.import_document_page_transcription(document_id, page_id, transcription.text, db)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        raise _internal_error(e)


@router.put(
    "/{page_id}/status",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Import Page Status",
    description="""
    Overwrites the transcription status of a page.

    - **status**: one of "Not Started", "In Progress", "Needs Review", "Completed"
    """,
    responses={
        204: {"description": "Status stored"},
        404: {"description": "Document or page not found"},
        422: {"description": "Unknown status"},
    },
)
async def import_page_status(
    document_id: int, page_id: int, page_status: StatusImport, adapter: Adapter, db: DbSession
) -> Response:
    """Import a page status."""
    try:
        await _ensure_page(adapter, document_id, page_id, db)
        await adapter.import_page_transcription_status(document_id, page_id, page_status.status.value, db)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        raise _internal_error(e)
