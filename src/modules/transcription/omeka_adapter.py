"""Transcription adapter for the Omeka-style item/file/element-text repository.

Documents are items, pages are the files attached to an item in their native
attachment order, and every datum the engine reads or writes is an element
text:

======================  ===========  ===================  ======================
Datum                   Record       Element set          Element
======================  ===========  ===================  ======================
title / page name       Item, File   Dublin Core          Title
sort weight             Item         Dublin Core          Audience
transcription           Item, File   Scripto              Transcription
status                  File         Scripto              Status
progress                Item         Scripto              Percent Completed,
                                                          Percent Needs Review
======================  ===========  ===================  ======================
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.config.settings import get_settings
from ...infrastructure.logging import get_logger
from ..common.exceptions import DocumentNotFoundError, PageNotFoundError
from ..element.constants import (
    AUDIENCE,
    DUBLIN_CORE,
    PERCENT_COMPLETED,
    PERCENT_NEEDS_REVIEW,
    SCRIPTO,
    STATUS,
    TITLE,
    TRANSCRIPTION,
)
from ..element.schemas import RecordRef
from ..element.services import ElementTextService
from ..file.crud import file_crud
from ..file.models import File
from ..item.crud import item_crud
from ..option.services import OptionService
from .formatting import format_progress, format_sort_weight, remove_new_pp_limit_reports
from .interface import AdapterBackend, ImportTypeAccessor, ProgressValue, SortWeight, TranscriptionStatus

logger = get_logger(__name__)


class OmekaAdapter:
    """``TranscriptionAdapter`` over items, files and element texts.

    Args:
        import_type_accessor: Coroutine returning the current import type; called
            on every import. Defaults to ``OptionService.get_import_type``.
        element_texts: Element text service used for all metadata access.
        files_base_url: Base URL of the file archive. Defaults to
            ``settings.FILES_BASE_URL``, read on every call.
    """

    backend = AdapterBackend.OMEKA

    def __init__(
        self,
        import_type_accessor: Optional[ImportTypeAccessor] = None,
        element_texts: Optional[ElementTextService] = None,
        files_base_url: Optional[str] = None,
    ) -> None:
        self._import_type = import_type_accessor or OptionService().get_import_type
        self._element_texts = element_texts or ElementTextService()
        self._files_base_url = files_base_url

    async def document_exists(self, document_id: int, db: AsyncSession) -> bool:
        """Check whether the item exists and has at least one file."""
        return await self._valid_document(document_id, db)

    async def document_page_exists(self, document_id: int, page_id: int, db: AsyncSession) -> bool:
        """Check whether the file exists and is attached to a valid document."""
        if not await self._valid_document(document_id, db):
            return False
        # The file id is the page id; it must be attached to this item.
        return await file_crud.exists(db=db, id=page_id, item_id=document_id)

    async def get_document_pages(self, document_id: int, db: AsyncSession) -> Dict[int, str]:
        """Get the pages of a document in native order.

        Args:
            document_id: Item id

        Returns:
            Mapping of file id to page name; empty for an unknown item or one without files
        """
        document_pages: Dict[int, str] = {}
        for file in await self._get_files(document_id, db):
            document_pages[file.id] = await self._page_name(file.id, file.original_filename, db)
        return document_pages

    async def get_document_page_file_url(self, document_id: int, page_id: int, db: AsyncSession) -> Optional[str]:
        """URL of the page's original file in the archive, or None if the page is not in the document."""
        file = await self._get_document_file(document_id, page_id, db)
        if file is None:
            return None

        base_url = self._files_base_url or get_settings().FILES_BASE_URL
        return f"{base_url.rstrip('/')}/original/{quote(file['filename'])}"

    async def get_document_first_page_id(self, document_id: int, db: AsyncSession) -> int:
        """Get the id of the first file in native order.

        Raises:
            DocumentNotFoundError: If the item is unknown or has no files
        """
        files = await self._get_files(document_id, db)
        if not files:
            raise DocumentNotFoundError(f"Document {document_id} has no pages")
        return files[0].id

    async def get_document_title(self, document_id: int, db: AsyncSession) -> Optional[str]:
        """Dublin Core title of the item: None for an unknown item, "" when untitled."""
        if not await item_crud.exists(db=db, id=document_id):
            return None

        title = await self._element_texts.get_text(RecordRef.item(document_id), TITLE, DUBLIN_CORE, db)
        return title if title is not None else ""

    async def get_document_page_name(self, document_id: int, page_id: int, db: AsyncSession) -> Optional[str]:
        """Title of the file, falling back to its original filename."""
        file = await self._get_document_file(document_id, page_id, db)
        if file is None:
            return None
        return await self._page_name(file["id"], file["original_filename"], db)

    async def get_document_page_transcription(self, page_id: int, db: AsyncSession) -> Optional[str]:
        """Stored transcription of a file, or None if the file or the value is missing."""
        if not await file_crud.exists(db=db, id=page_id):
            return None
        return await self._element_texts.get_text(RecordRef.file(page_id), TRANSCRIPTION, SCRIPTO, db)

    async def document_transcription_is_imported(self, document_id: int, db: AsyncSession) -> bool:
        """Check whether the item holds a stored transcription."""
        if not await item_crud.exists(db=db, id=document_id):
            return False
        return await self._element_texts.has_text(RecordRef.item(document_id), TRANSCRIPTION, SCRIPTO, db)

    async def document_page_transcription_is_imported(self, document_id: int, page_id: int, db: AsyncSession) -> bool:
        """Check whether the page of this document holds a stored transcription."""
        if await self._get_document_file(document_id, page_id, db) is None:
            return False
        return await self._element_texts.has_text(RecordRef.file(page_id), TRANSCRIPTION, SCRIPTO, db)

    async def import_document_page_transcription(
        self, document_id: int, page_id: int, text: str, db: AsyncSession
    ) -> None:
        """Replace the transcription of a page.

        Parser reports are stripped from the text, and the value is flagged as
        HTML when the current import type is html. The file's ``updated_at`` is
        refreshed in the same commit.

        Args:
            document_id: Item id
            page_id: File id; must be attached to the item
            text: Rendered transcription

        Raises:
            PageNotFoundError: If the file is not attached to the item
            ElementNotFoundError: If the Scripto element set is not installed
        """
        await self._require_page(document_id, page_id, db)
        import_type = await self._import_type(db)

        await self._element_texts.replace_text(
            RecordRef.file(page_id),
            TRANSCRIPTION,
            SCRIPTO,
            remove_new_pp_limit_reports(text),
            db,
            html=import_type.is_html,
        )
        logger.info(
            "Imported page transcription",
            extra={"document_id": document_id, "page_id": page_id, "import_type": import_type.value},
        )

    async def import_document_transcription(self, document_id: int, text: str, db: AsyncSession) -> None:
        """Replace the transcription of a whole document.

        Args:
            document_id: Item id
            text: Rendered transcription of all pages

        Raises:
            DocumentNotFoundError: If the item is unknown or has no files
            ElementNotFoundError: If the Scripto element set is not installed
        """
        await self._require_document(document_id, db)
        import_type = await self._import_type(db)

        await self._element_texts.replace_text(
            RecordRef.item(document_id),
            TRANSCRIPTION,
            SCRIPTO,
            remove_new_pp_limit_reports(text),
            db,
            html=import_type.is_html,
        )
        logger.info(
            "Imported document transcription",
            extra={"document_id": document_id, "import_type": import_type.value},
        )

    async def document_page_transcription_status(self, page_id: int, db: AsyncSession) -> Optional[str]:
        """Get the transcription status of a file.

        Returns:
            The last stored status, "Not Started" when none is stored, or None for an unknown file
        """
        if not await file_crud.exists(db=db, id=page_id):
            return None

        texts = await self._element_texts.get_texts(RecordRef.file(page_id), STATUS, SCRIPTO, db)
        status = texts[-1].text if texts else None
        # No recorded status means the page has not been started.
        return status or TranscriptionStatus.NOT_STARTED.value

    async def import_page_transcription_status(
        self, document_id: int, page_id: int, status: Union[str, TranscriptionStatus], db: AsyncSession
    ) -> None:
        """Replace the transcription status of a page.

        Args:
            document_id: Item id
            page_id: File id; must be attached to the item
            status: A ``TranscriptionStatus`` or its text

        Raises:
            PageNotFoundError: If the file is not attached to the item
            ElementNotFoundError: If the Scripto element set is not installed
        """
        await self._require_page(document_id, page_id, db)
        status_text = status.value if isinstance(status, Enum) else status

        await self._element_texts.replace_text(RecordRef.file(page_id), STATUS, SCRIPTO, status_text, db)
        logger.info(
            "Imported page status",
            extra={"document_id": document_id, "page_id": page_id, "status": status_text},
        )

    async def import_document_transcription_progress(
        self,
        document_id: int,
        completed_progress: ProgressValue,
        needs_review_progress: ProgressValue,
        db: AsyncSession,
    ) -> None:
        """Replace both progress percentages of a document in one commit.

        A zero percentage is not stored, which leaves that field empty.

        Args:
            document_id: Item id
            completed_progress: Percent of pages completed, 0 to 100
            needs_review_progress: Percent of pages needing review, 0 to 100

        Raises:
            ValidationError: If either value is not a number between 0 and 100
            DocumentNotFoundError: If the item is unknown or has no files
            ElementNotFoundError: If the Scripto element set is not installed
        """
        completed = format_progress(completed_progress, "completed_progress")
        needs_review = format_progress(needs_review_progress, "needs_review_progress")
        await self._require_document(document_id, db)

        await self._element_texts.replace_texts(
            RecordRef.item(document_id),
            {
                (PERCENT_COMPLETED, SCRIPTO): completed,
                (PERCENT_NEEDS_REVIEW, SCRIPTO): needs_review,
            },
            db,
        )
        logger.info(
            "Imported document progress",
            extra={"document_id": document_id, "completed": completed, "needs_review": needs_review},
        )

    async def import_item_sort_weight(self, document_id: int, weight: SortWeight, db: AsyncSession) -> None:
        """Store the sort weight in the item's Dublin Core Audience, zero-padded to nine digits.

        Args:
            document_id: Item id
            weight: Non-negative whole number of at most nine digits

        Raises:
            ValidationError: If the weight is invalid
            DocumentNotFoundError: If the item is unknown or has no files
            ElementNotFoundError: If the Dublin Core element set is not installed
        """
        sort_weight = format_sort_weight(weight)
        await self._require_document(document_id, db)

        await self._element_texts.replace_text(RecordRef.item(document_id), AUDIENCE, DUBLIN_CORE, sort_weight, db)
        logger.info("Imported sort weight", extra={"document_id": document_id, "sort_weight": sort_weight})

    async def _valid_document(self, document_id: int, db: AsyncSession) -> bool:
        """An item is a document only if it exists and has at least one file."""
        if not await item_crud.exists(db=db, id=document_id):
            return False
        return await file_crud.exists(db=db, item_id=document_id)

    async def _get_files(self, document_id: int, db: AsyncSession) -> List[Any]:
        stmt = await file_crud.select(item_id=document_id)
        stmt = stmt.order_by(*File.native_order())

        result = await db.execute(stmt)
        return list(result.all())

    async def _get_document_file(self, document_id: int, page_id: int, db: AsyncSession) -> Optional[Dict[str, Any]]:
        file = await file_crud.get(db=db, id=page_id)
        if file is None or file["item_id"] != document_id:
            return None
        return file

    async def _page_name(self, file_id: int, original_filename: str, db: AsyncSession) -> str:
        """Dublin Core title of the file, else its original filename."""
        title = await self._element_texts.get_text(RecordRef.file(file_id), TITLE, DUBLIN_CORE, db)
        if title is None:
            return original_filename
        return title

    async def _require_document(self, document_id: int, db: AsyncSession) -> None:
        if not await self._valid_document(document_id, db):
            raise DocumentNotFoundError(f"Document {document_id} not found or has no pages")

    async def _require_page(self, document_id: int, page_id: int, db: AsyncSession) -> None:
        if await self._get_document_file(document_id, page_id, db) is None:
            raise PageNotFoundError(f"Page {page_id} not found in document {document_id}")
