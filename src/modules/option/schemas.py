"""Pydantic schemas for options."""

from enum import Enum

from pydantic import BaseModel, Field

IMPORT_TYPE_OPTION = "transcription_import_type"


class ImportType(str, Enum):
    """Storage mode of imported transcription text."""

    PLAIN_TEXT = "plain_text"
    HTML = "html"

    @property
    def is_html(self) -> bool:
        return self is ImportType.HTML

    @classmethod
    def from_value(cls, value: str | None) -> "ImportType":
        """Anything other than "html" imports as plain text."""
        if value is not None and value.strip().lower() == cls.HTML.value:
            return cls.HTML
        return cls.PLAIN_TEXT


class ImportTypeRead(BaseModel):
    """Schema for reading the current import type."""

    import_type: ImportType


class ImportTypeUpdate(BaseModel):
    """Schema for changing the import type."""

    import_type: ImportType = Field(description="Storage mode for transcriptions imported from now on")
