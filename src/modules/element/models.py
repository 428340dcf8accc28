"""SQLAlchemy models for element sets, elements and element texts.

Together these form the repository's schema-flexible metadata store: an
element set ("Dublin Core", "Scripto") groups named elements ("Title",
"Transcription"), and an element text stores one value of one element for one
record (an item or a file). Nothing at this level prevents a record from
holding several texts for the same element.
"""

from enum import Enum
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class RecordType(str, Enum):
    """Kinds of records element texts can be attached to."""

    ITEM = "Item"
    FILE = "File"


class ElementSet(Base):
    """Named group of elements."""

    __tablename__ = "element_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    name: Mapped[str] = mapped_column(String(255), unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, default=None)


class Element(Base):
    """Named metadata field within an element set."""

    __tablename__ = "elements"
    __table_args__ = (UniqueConstraint("element_set_id", "name", name="uq_elements_set_name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    element_set_id: Mapped[int] = mapped_column(Integer, ForeignKey("element_sets.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(255))
    order: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    description: Mapped[Optional[str]] = mapped_column(Text, default=None)


class ElementText(Base, TimestampMixin):
    """One stored value of an element for a record."""

    __tablename__ = "element_texts"
    __table_args__ = (Index("ix_element_texts_record_element", "record_type", "record_id", "element_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    record_type: Mapped[str] = mapped_column(String(50))
    record_id: Mapped[int] = mapped_column(Integer)
    element_id: Mapped[int] = mapped_column(Integer, ForeignKey("elements.id", ondelete="CASCADE"), index=True)
    text: Mapped[str] = mapped_column(Text)
    html: Mapped[bool] = mapped_column(Boolean, default=False)
