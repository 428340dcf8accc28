"""Pydantic schemas for the transcription HTTP surface."""

from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, Field

from .interface import TranscriptionStatus


class PageSummary(BaseModel):
    """One entry of a document's ordered page list."""

    id: int
    name: str


class DocumentRead(BaseModel):
    """Schema for reading a document's structure."""

    id: int
    title: str
    first_page_id: int
    pages: List[PageSummary] = Field(description="Pages in native attachment order")
    transcription_imported: bool


class PageRead(BaseModel):
    """Schema for reading one page."""

    id: int
    document_id: int
    name: str
    file_url: Optional[str]
    transcription: Optional[str] = Field(description="None when no transcription was ever imported")
    status: str
    transcription_imported: bool


class TranscriptionImport(BaseModel):
    """Schema for importing a transcription."""

    text: str = Field(description="Transcription text, plain text or HTML depending on the import type")


class StatusImport(BaseModel):
    """Schema for setting a page status."""

    status: TranscriptionStatus


ProgressField = Annotated[Union[int, str], Field(description="Percentage between 0 and 100; 0 is not stored")]


class ProgressImport(BaseModel):
    """Schema for setting document progress."""

    completed: ProgressField
    needs_review: ProgressField


class SortWeightImport(BaseModel):
    """Schema for setting a document sort weight."""

    weight: Annotated[Union[int, str], Field(description="Whole number of at most nine digits")]
