"""Pydantic schemas for element entities."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from .models import RecordType


@dataclass(frozen=True)
class RecordRef:
    """Reference to the record (item or file) an element text belongs to."""

    record_type: RecordType
    record_id: int

    @classmethod
    def item(cls, item_id: int) -> "RecordRef":
        return cls(RecordType.ITEM, item_id)

    @classmethod
    def file(cls, file_id: int) -> "RecordRef":
        return cls(RecordType.FILE, file_id)


class ElementRead(BaseModel):
    """Schema for reading an element."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    element_set_id: int
    name: str


class ElementTextRead(BaseModel):
    """Schema for reading one stored element text."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    record_type: str
    record_id: int
    element_id: int
    text: str
    html: bool
