from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import get_settings
from ..interfaces.api import router as api_router

settings = get_settings()

app = create_application(
    router=api_router,
    settings=settings,
    title="Transcription Adapter API",
    summary="Repository adapter for a crowd-transcription workflow engine",
    description="""
    # Transcription Adapter API

    Exposes the repository adapter a transcription engine uses to read
    documents and write back transcriptions:

    * **Structure**: documents, their pages in native order, page names and file URLs
    * **Transcriptions**: per-page and whole-document text, plain text or HTML
    * **Tracking**: page status, document progress and listing sort weight

    Every write replaces the previous value of its field; repeating a write
    leaves the repository unchanged.
    """,
    version=settings.VERSION,
)
