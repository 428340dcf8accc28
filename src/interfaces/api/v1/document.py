"""Document API endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ....modules.common.utils.error_handler import handle_exception
from ....modules.transcription.interface import TranscriptionAdapter
from ....modules.transcription.schemas import (
    DocumentRead,
    PageSummary,
    ProgressImport,
    SortWeightImport,
    TranscriptionImport,
)
from ..dependencies import Adapter, DbSession

router = APIRouter(prefix="/document", tags=["Documents"])


async def _ensure_document(adapter: TranscriptionAdapter, document_id: int, db: AsyncSession) -> None:
    if not await adapter.document_exists(document_id, db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")


def _internal_error(e: Exception) -> HTTPException:
    http_exc = handle_exception(e)
    if http_exc:
        return http_exc
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


@router.get(
    "/{document_id}",
    summary="Get Document Structure",
    description="""
    Retrieves a document's title and its pages in native attachment order.

    A document must exist in the repository and have at least one page;
    anything else is reported as not found.
    """,
    responses={
        200: {"description": "Document title, ordered pages and first page"},
        404: {"description": "Document not found or has no pages"},
    },
)
async def get_document(document_id: int, adapter: Adapter, db: DbSession) -> DocumentRead:
    """Get a document's structure."""
    try:
        await _ensure_document(adapter, document_id, db)
        pages = await adapter.get_document_pages(document_id, db)
        return DocumentRead(
            id=document_id,
            title=await adapter.get_document_title(document_id, db) or "",
            first_page_id=await adapter.get_document_first_page_id(document_id, db),
            pages=[PageSummary(id=page_id, name=name) for page_id, name in pages.items()],
            transcription_imported=await adapter.document_transcription_is_imported(document_id, db),
        )
    except Exception as e:
        raise _internal_error(e)


@router.get(
    "/{document_id}/pages",
    summary="List Document Pages",
    description="Retrieves the pages of a document in native attachment order with their names.",
    responses={
        200: {"description": "Ordered page list"},
        404: {"description": "Document not found or has no pages"},
    },
)
async def get_document_pages(document_id: int, adapter: Adapter, db: DbSession) -> List[PageSummary]:
    """List a document's pages."""
    try:
        await _ensure_document(adapter, document_id, db)
        pages = await adapter.get_document_pages(document_id, db)
        return [PageSummary(id=page_id, name=name) for page_id, name in pages.items()]
    except Exception as e:
        raise _internal_error(e)


@router.put(
    "/{document_id}/transcription",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Import Document Transcription",
    description="""
    Overwrites the whole-document transcription.

    Wiki parser report comments are removed before storage. Whether the text
    is stored as HTML depends on the current import type option.
    """,
    responses={
        204: {"description": "Transcription stored"},
        404: {"description": "Document not found or has no pages"},
        500: {"description": "Transcription element is not installed"},
    },
)
async def import_document_transcription(
    document_id: int, transcription: TranscriptionImport, adapter: Adapter, db: DbSession
) -> Response:
    """Import a document transcription."""
    try:
        await _ensure_document(adapter, document_id, db)
        await adapter.import_document_transcription(document_id, transcription.text, db)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        raise _internal_error(e)


@router.put(
    "/{document_id}/progress",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Import Document Progress",
    description="""
    Overwrites the percent completed and percent needs review of a document.

    A value of 0 is not stored: the corresponding field is left empty.
    """,
    responses={
        204: {"description": "Progress stored"},
        404: {"description": "Document not found or has no pages"},
        422: {"description": "Progress is not a number between 0 and 100"},
    },
)
async def import_document_progress(document_id: int, progress: ProgressImport, adapter: Adapter, db: DbSession) -> Response:
    """Import document progress."""
    try:
        await _ensure_document(adapter, document_id, db)
        await adapter.import_document_transcription_progress(document_id, progress.completed, progress.needs_review, db)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        raise _internal_error(e)


@router.put(
    "/{document_id}/sort-weight",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Import Document Sort Weight",
    description="Stores a nine-digit, zero-padded key used to order documents in listings.",
    responses={
        204: {"description": "Sort weight stored"},
        404: {"description": "Document not found or has no pages"},
        422: {"description": "Weight is not a whole number of at most nine digits"},
    },
)
async def import_document_sort_weight(
    document_id: int, sort_weight: SortWeightImport, adapter: Adapter, db: DbSession
) -> Response:
    """Import a document sort weight."""
    try:
        await _ensure_document(adapter, document_id, db)
        await adapter.import_item_sort_weight(document_id, sort_weight.weight, db)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        raise _internal_error(e)
