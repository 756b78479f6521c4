"""In-memory registry of analysis sessions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from uuid import uuid4

from viralaudit.services.inference.base import IInferenceClient
from viralaudit.services.ingest import FileIngestor
from viralaudit.session.machine import AnalysisStateMachine
from viralaudit.session.models import AnalysisPhase

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Holds one state machine per user session.

    Sessions live only in memory. All of them share the same inference
    client; each has its own state and in-flight task.
    """

    def __init__(
        self,
        client_factory: Callable[[], IInferenceClient],
        max_upload_bytes: int | None = None,
    ) -> None:
        self._client_factory = client_factory
        self._client: IInferenceClient | None = None
        self._max_upload_bytes = max_upload_bytes
        self._sessions: dict[str, AnalysisStateMachine] = {}

    @property
    def client(self) -> IInferenceClient:
        """Shared inference client, built on first use."""
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def create(self) -> tuple[str, AnalysisStateMachine]:
        """Create a new idle session."""
        ingestor = (
            FileIngestor(self._max_upload_bytes)
            if self._max_upload_bytes is not None
            else FileIngestor()
        )
        session_id = str(uuid4())
        machine = AnalysisStateMachine(self.client, ingestor=ingestor)
        self._sessions[session_id] = machine
        logger.info("Created session %s", session_id)
        return session_id, machine

    def get(self, session_id: str) -> AnalysisStateMachine | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        """Drop a session, cancelling its analysis if one is running."""
        machine = self._sessions.pop(session_id, None)
        if machine is None:
            return False
        if machine.phase is AnalysisPhase.ANALYZING:
            machine.cancel()
        logger.info("Removed session %s", session_id)
        return True

    def __len__(self) -> int:
        return len(self._sessions)
