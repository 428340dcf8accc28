"""Tests for adapter lookup by repository backend."""

import pytest

from src.modules.common.exceptions import UnknownBackendError, ValidationError
from src.modules.transcription import registry
from src.modules.transcription.interface import AdapterBackend, TranscriptionAdapter
from src.modules.transcription.omeka_adapter import OmekaAdapter
from src.modules.transcription.registry import get_adapter, register_adapter


@pytest.fixture
def restore_registry():
    """Restore the registered factories after a test replaces them."""
    saved = dict(registry._adapter_factories)
    yield
    registry._adapter_factories.clear()
    registry._adapter_factories.update(saved)


def test_get_adapter_default_backend():
    """Test that the configured backend resolves to the Omeka adapter."""
    adapter = get_adapter()

    assert isinstance(adapter, OmekaAdapter)
    assert isinstance(adapter, TranscriptionAdapter)
    assert adapter.backend == AdapterBackend.OMEKA


@pytest.mark.parametrize("backend", [AdapterBackend.OMEKA, "omeka"])
def test_get_adapter_by_tag(backend):
    """Test lookup by enum member and by raw tag."""
    assert isinstance(get_adapter(backend), OmekaAdapter)


def test_get_adapter_returns_new_instances():
    """Test that each lookup builds a fresh adapter."""
    assert get_adapter() is not get_adapter()


def test_get_adapter_unknown_backend():
    """Test that an unknown tag is rejected."""
    with pytest.raises(UnknownBackendError) as exc_info:
        get_adapter("wordpress")

    assert isinstance(exc_info.value, ValidationError)
    assert "wordpress" in str(exc_info.value)


def test_get_adapter_unregistered_backend(restore_registry):
    """Test that a known tag without a factory is rejected."""
    registry._adapter_factories.clear()

    with pytest.raises(UnknownBackendError):
        get_adapter(AdapterBackend.OMEKA)


def test_register_adapter_replaces_factory(restore_registry):
    """Test that a registered factory is used for its backend."""
    custom = OmekaAdapter(files_base_url="https://archive.example.org/files")
    register_adapter(AdapterBackend.OMEKA, lambda: custom)

    assert get_adapter(AdapterBackend.OMEKA) is custom


def test_register_adapter_rejects_incomplete_adapter(restore_registry):
    """Test that a factory producing an object without the adapter methods is rejected."""

    class PartialAdapter:
        backend = AdapterBackend.OMEKA

        async def document_exists(self, document_id, db):
            return True

    register_adapter(AdapterBackend.OMEKA, PartialAdapter)

    with pytest.raises(UnknownBackendError):
        get_adapter(AdapterBackend.OMEKA)
