"""FastAPI dependencies."""

from __future__ import annotations

from viralaudit.config import settings
from viralaudit.services.inference import GeminiInferenceClient
from viralaudit.session.registry import SessionRegistry

_session_registry: SessionRegistry | None = None


def init_session_registry(registry: SessionRegistry | None = None) -> SessionRegistry:
    """Initialize the global SessionRegistry (called at app startup)."""
    global _session_registry
    _session_registry = registry or SessionRegistry(
        client_factory=GeminiInferenceClient,
        max_upload_bytes=settings.max_upload_bytes,
    )
    return _session_registry


def get_session_registry() -> SessionRegistry:
    """Dependency that provides the SessionRegistry instance."""
    if _session_registry is None:
        raise RuntimeError("SessionRegistry not initialized; call init_session_registry() first")
    return _session_registry
