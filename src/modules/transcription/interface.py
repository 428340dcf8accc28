"""Adapter interface between the transcription engine and a content repository.

The engine sees documents made of ordered pages, each with a transcription
and a status. A repository backend makes its own data model look like that by
providing one object that satisfies ``TranscriptionAdapter``. Backends are
looked up by ``AdapterBackend`` tag (see ``registry``); they implement the
protocol directly rather than subclassing each other.
"""

from enum import Enum
from typing import Awaitable, Callable, Dict, Optional, Protocol, Union, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncSession

from ..option.schemas import ImportType

ImportTypeAccessor = Callable[[AsyncSession], Awaitable[ImportType]]

ProgressValue = Union[int, str]
SortWeight = Union[int, str]


class AdapterBackend(str, Enum):
    """Repository backends an adapter can be registered for."""

    OMEKA = "omeka"


class TranscriptionStatus(str, Enum):
    """Page statuses the engine works with."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    NEEDS_REVIEW = "Needs Review"
    COMPLETED = "Completed"


@runtime_checkable
class TranscriptionAdapter(Protocol):
    """Capability interface every repository backend must provide.

    All methods are stateless: each call reads from or writes to the
    repository through the given session. Document and page identifiers are
    the repository's own.
    """

    backend: AdapterBackend

    async def document_exists(self, document_id: int, db: AsyncSession) -> bool:
        """Whether the document exists and has at least one page."""
        ...

    async def document_page_exists(self, document_id: int, page_id: int, db: AsyncSession) -> bool:
        """Whether the document is valid and the page is one of its pages."""
        ...

    async def get_document_pages(self, document_id: int, db: AsyncSession) -> Dict[int, str]:
        """Page id -> page name for every page of the document, in page order."""
        ...

    async def get_document_page_file_url(self, document_id: int, page_id: int, db: AsyncSession) -> Optional[str]:
        """Web location of the page's file."""
        ...

    async def get_document_first_page_id(self, document_id: int, db: AsyncSession) -> int:
        """Id of the first page. Callers check ``document_exists`` first."""
        ...

    async def get_document_title(self, document_id: int, db: AsyncSession) -> Optional[str]:
        """Document title, empty string when the document has none."""
        ...

    async def get_document_page_name(self, document_id: int, page_id: int, db: AsyncSession) -> Optional[str]:
        """Page name, derived exactly as in ``get_document_pages``."""
        ...

    async def get_document_page_transcription(self, page_id: int, db: AsyncSession) -> Optional[str]:
        """Stored page transcription, None when none was ever imported."""
        ...

    async def document_transcription_is_imported(self, document_id: int, db: AsyncSession) -> bool:
        """Whether a whole-document transcription has been imported."""
        ...

    async def document_page_transcription_is_imported(self, document_id: int, page_id: int, db: AsyncSession) -> bool:
        """Whether a page transcription has been imported."""
        ...

    async def import_document_page_transcription(
        self, document_id: int, page_id: int, text: str, db: AsyncSession
    ) -> None:
        """Overwrite the page transcription."""
        ...

    async def import_document_transcription(self, document_id: int, text: str, db: AsyncSession) -> None:
        """Overwrite the whole-document transcription."""
        ...

    async def document_page_transcription_status(self, page_id: int, db: AsyncSession) -> Optional[str]:
        """Stored page status, "Not Started" when none was recorded."""
        ...

    async def import_page_transcription_status(
        self, document_id: int, page_id: int, status: str, db: AsyncSession
    ) -> None:
        """Overwrite the page status."""
        ...

    async def import_document_transcription_progress(
        self,
        document_id: int,
        completed_progress: ProgressValue,
        needs_review_progress: ProgressValue,
        db: AsyncSession,
    ) -> None:
        """Overwrite the completed and needs-review percentages. Zero is not stored."""
        ...

    async def import_item_sort_weight(self, document_id: int, weight: SortWeight, db: AsyncSession) -> None:
        """Overwrite the nine-digit key used to sort documents in listings."""
        ...
