"""Element services: schema installation and single-valued element text writes."""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from ..common.exceptions import ElementNotFoundError
from ..file.models import File
from ..item.models import Item
from .constants import DEFAULT_ELEMENT_SETS, ELEMENT_SET_DESCRIPTIONS
from .crud import element_crud, element_set_crud, element_text_crud
from .models import Element, ElementSet, ElementText, RecordType
from .schemas import ElementRead, ElementTextRead, RecordRef

logger = get_logger(__name__)

ElementKey = Tuple[str, str]


class ElementTextService:
    """Reads and writes element texts of items and files.

    The underlying store allows any number of texts per (record, element).
    Every write in this service goes through ``replace_text`` /
    ``replace_texts``, which delete all existing texts of the element before
    inserting at most one new text, so from the caller's point of view an
    element holds a single value.

    Element lookups by (element name, element set name) raise
    ``ElementNotFoundError`` when the element is not installed; reads and
    writes never silently skip a missing element.
    """

    async def get_element(self, element_name: str, element_set_name: str, db: AsyncSession) -> ElementRead:
        """Resolve an element by name within a named element set.

        Args:
            element_name: Element name, e.g. "Transcription"
            element_set_name: Element set name, e.g. "Scripto"
            db: Database session

        Returns:
            The resolved element

        Raises:
            ElementNotFoundError: If the set or the element does not exist
        """
        stmt = (
            select(Element)
            .join(ElementSet, Element.element_set_id == ElementSet.id)
            .where(Element.name == element_name, ElementSet.name == element_set_name)
        )
        element = (await db.execute(stmt)).scalars().first()

        if element is None:
            logger.error(
                "Element is not installed",
                extra={"element_name": element_name, "element_set_name": element_set_name},
            )
            raise ElementNotFoundError(element_name, element_set_name)

        return ElementRead.model_validate(element)

    async def get_texts(
        self,
        record: RecordRef,
        element_name: str,
        element_set_name: str,
        db: AsyncSession,
    ) -> List[ElementTextRead]:
        """Get all texts stored for an element of a record, oldest first."""
        element = await self.get_element(element_name, element_set_name, db)

        stmt = (
            select(ElementText)
            .where(
                ElementText.record_type == record.record_type.value,
                ElementText.record_id == record.record_id,
                ElementText.element_id == element.id,
            )
            .order_by(ElementText.id)
        )
        result = await db.execute(stmt)

        return [ElementTextRead.model_validate(row) for row in result.scalars().all()]

    async def get_text(
        self,
        record: RecordRef,
        element_name: str,
        element_set_name: str,
        db: AsyncSession,
    ) -> Optional[str]:
        """Get the first stored text of an element, or None when it has no value."""
        texts = await self.get_texts(record, element_name, element_set_name, db)
        if not texts:
            return None
        return texts[0].text

    async def has_text(
        self,
        record: RecordRef,
        element_name: str,
        element_set_name: str,
        db: AsyncSession,
    ) -> bool:
        """Whether at least one text is stored for an element of a record."""
        element = await self.get_element(element_name, element_set_name, db)

        return await element_text_crud.exists(
            db=db,
            record_type=record.record_type.value,
            record_id=record.record_id,
            element_id=element.id,
        )

    async def delete_texts(self, record: RecordRef, element_ids: Sequence[int], db: AsyncSession) -> None:
        """Delete every text of the given elements for a record. Does not commit."""
        stmt = delete(ElementText).where(
            ElementText.record_type == record.record_type.value,
            ElementText.record_id == record.record_id,
            ElementText.element_id.in_(list(element_ids)),
        )
        await db.execute(stmt)

    def add_text(self, record: RecordRef, element: ElementRead, text: str, db: AsyncSession, html: bool = False) -> None:
        """Stage a new text for an element of a record. Does not commit."""
        db.add(
            ElementText(
                record_type=record.record_type.value,
                record_id=record.record_id,
                element_id=element.id,
                text=text,
                html=html,
            )
        )

    async def save(self, record: RecordRef, db: AsyncSession) -> None:
        """Persist pending element text changes and mark the record as modified."""
        model = Item if record.record_type == RecordType.ITEM else File
        instance = await db.get(model, record.record_id)
        if instance is not None:
            instance.touch()

        await db.commit()

    async def replace_text(
        self,
        record: RecordRef,
        element_name: str,
        element_set_name: str,
        text: Optional[str],
        db: AsyncSession,
        html: bool = False,
    ) -> None:
        """Replace the value of one element of a record.

        All existing texts of the element are deleted; ``text`` is inserted
        unless it is None, in which case the element is left without a value.
        Calling this twice with the same arguments leaves the same state as
        calling it once.

        Raises:
            ElementNotFoundError: If the element is not installed; nothing is deleted
        """
        await self.replace_texts(record, {(element_name, element_set_name): text}, db, html=html)

    async def replace_texts(
        self,
        record: RecordRef,
        values: Mapping[ElementKey, Optional[str]],
        db: AsyncSession,
        html: bool = False,
    ) -> None:
        """Replace the values of several elements of a record in one save.

        Args:
            record: Item or file the texts belong to
            values: New text per (element name, element set name); None clears the element
            db: Database session
            html: Whether the inserted texts are HTML

        Raises:
            ElementNotFoundError: If any element is not installed; nothing is deleted
        """
        elements = [(await self.get_element(name, set_name, db), text) for (name, set_name), text in values.items()]

        await self.delete_texts(record, [element.id for element, _ in elements], db)
        for element, text in elements:
            if text is not None:
                self.add_text(record, element, text, db, html=html)

        await self.save(record, db)


class ElementSetService:
    """Installs the element sets and elements the adapter binds to."""

    async def install_default_element_sets(self, db: AsyncSession) -> Dict[str, List[str]]:
        """Create any missing default element set or element.

        Safe to run on every startup: existing sets and elements are kept.

        Returns:
            Names of the elements created, per element set
        """
        created: Dict[str, List[str]] = {}

        for set_name, element_names in DEFAULT_ELEMENT_SETS.items():
            element_set = await element_set_crud.get(db=db, name=set_name)
            if element_set is None:
                new_set = ElementSet(name=set_name, description=ELEMENT_SET_DESCRIPTIONS.get(set_name))
                db.add(new_set)
                await db.flush()
                element_set_id = new_set.id
            else:
                element_set_id = element_set["id"]

            for position, element_name in enumerate(element_names, start=1):
                exists = await element_crud.exists(db=db, element_set_id=element_set_id, name=element_name)
                if exists:
                    continue
                db.add(Element(element_set_id=element_set_id, name=element_name, order=position))
                created.setdefault(set_name, []).append(element_name)

        await db.commit()

        if created:
            logger.info("Installed element sets", extra={"created_elements": created})

        return created
