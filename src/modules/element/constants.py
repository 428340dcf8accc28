"""Element sets and elements the transcription adapter binds to."""

from typing import Dict, List

DUBLIN_CORE = "Dublin Core"
SCRIPTO = "Scripto"

TITLE = "Title"
AUDIENCE = "Audience"

TRANSCRIPTION = "Transcription"
STATUS = "Status"
PERCENT_COMPLETED = "Percent Completed"
PERCENT_NEEDS_REVIEW = "Percent Needs Review"

DEFAULT_ELEMENT_SETS: Dict[str, List[str]] = {
    DUBLIN_CORE: [TITLE, "Creator", "Subject", "Description", "Date", "Identifier", AUDIENCE],
    SCRIPTO: [TRANSCRIPTION, STATUS, PERCENT_COMPLETED, PERCENT_NEEDS_REVIEW],
}

ELEMENT_SET_DESCRIPTIONS: Dict[str, str] = {
    DUBLIN_CORE: "The Dublin Core metadata element set.",
    SCRIPTO: "Transcription text, page status and document progress written by the transcription engine.",
}
