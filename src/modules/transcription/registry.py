"""Lookup of the adapter implementation for a repository backend."""

from typing import Callable, Dict, Optional, Union

from ...infrastructure.config.settings import get_settings
from ..common.exceptions import UnknownBackendError
from .interface import AdapterBackend, TranscriptionAdapter
from .omeka_adapter import OmekaAdapter

AdapterFactory = Callable[[], TranscriptionAdapter]

_adapter_factories: Dict[AdapterBackend, AdapterFactory] = {
    AdapterBackend.OMEKA: OmekaAdapter,
}


def register_adapter(backend: AdapterBackend, factory: AdapterFactory) -> None:
    """Register the adapter factory for a backend, replacing any previous one."""
    _adapter_factories[backend] = factory


def get_adapter(backend: Optional[Union[AdapterBackend, str]] = None) -> TranscriptionAdapter:
    """Build the adapter for a backend.

    Args:
        backend: Backend tag; defaults to ``settings.TRANSCRIPTION_BACKEND``

    Returns:
        A new adapter instance

    Raises:
        UnknownBackendError: If the tag is unknown or has no registered adapter
    """
    if backend is None:
        backend = get_settings().TRANSCRIPTION_BACKEND

    try:
        backend_tag = AdapterBackend(backend)
    except ValueError:
        raise UnknownBackendError(f"Unknown repository backend: {backend}")

    factory = _adapter_factories.get(backend_tag)
    if factory is None:
        raise UnknownBackendError(f"No adapter registered for backend: {backend_tag.value}")

    adapter = factory()
    if not isinstance(adapter, TranscriptionAdapter):
        raise UnknownBackendError(f"Adapter for backend {backend_tag.value} does not implement TranscriptionAdapter")
    return adapter
