"""Analysis state machine driving a single video critique."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from viralaudit.errors import (
    FileIngestError,
    InvalidTransitionError,
    SizeExceededError,
)
from viralaudit.models.analysis import AnalysisResult
from viralaudit.models.media import SelectedFile
from viralaudit.services.inference.base import IInferenceClient
from viralaudit.services.ingest import FileIngestor
from viralaudit.services.validator import ResultValidator
from viralaudit.session.models import AnalysisPhase, AnalysisState

logger = logging.getLogger(__name__)

StateListener = Callable[[AnalysisState], None]

SIZE_EXCEEDED_MESSAGE = "File too large. Please upload a video under {limit_mb}MB."
UNSUPPORTED_TYPE_MESSAGE = "Unsupported file type. Please upload a video file."
GENERIC_FAILURE_MESSAGE = (
    "Failed to analyze video. The file might be too complex for inline analysis, "
    "or the format is unsupported."
)


class AnalysisStateMachine:
    """Owns the phase of one user session: idle, analyzing, success or error.

    A submission is only accepted while idle, so at most one analysis is in
    flight. Upload checks run before the phase changes; a rejected file
    goes straight to ERROR with a specific message. Everything after that
    (encoding, inference, validation) runs as one asyncio task whose
    failures are logged in full and reported with a single generic message.
    """

    def __init__(
        self,
        client: IInferenceClient,
        ingestor: FileIngestor | None = None,
        validator: ResultValidator | None = None,
    ) -> None:
        self._client = client
        self._ingestor = ingestor or FileIngestor()
        self._validator = validator or ResultValidator()
        self._state = AnalysisState()
        self._task: asyncio.Task[None] | None = None
        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # Read-only view for the presentation layer
    # ------------------------------------------------------------------

    @property
    def state(self) -> AnalysisState:
        """Current state snapshot."""
        return self._state

    @property
    def phase(self) -> AnalysisPhase:
        return self._state.phase

    @property
    def result(self) -> AnalysisResult | None:
        return self._state.result

    @property
    def error_message(self) -> str | None:
        return self._state.error

    @property
    def max_upload_bytes(self) -> int:
        """Largest file the upload checks accept."""
        return self._ingestor.max_bytes

    @property
    def can_submit(self) -> bool:
        """Whether a new file may be submitted now."""
        return self._state.phase is AnalysisPhase.IDLE

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a callback invoked with every new state.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, file: SelectedFile) -> asyncio.Task[None] | None:
        """Submit a file and run the analysis in the background.

        Must be called from a running event loop.

        Args:
            file: The selected video.

        Returns:
            The analysis task, or None if the file was rejected by the
            upload checks (the machine is then in ERROR).

        Raises:
            InvalidTransitionError: If the machine is not idle.
        """
        if not self.can_submit:
            raise InvalidTransitionError("submit", self.phase.value)

        try:
            self._ingestor.check(file)
        except FileIngestError as exc:
            logger.warning("Rejected %s: %s", file.name, exc)
            self._set_state(AnalysisState.failed(self._rejection_message(exc), file.name))
            return None

        self._set_state(AnalysisState.analyzing(file.name))
        self._task = asyncio.create_task(self._run(file))
        return self._task

    async def submit(self, file: SelectedFile) -> AnalysisState:
        """Submit a file and wait until the analysis settles.

        Returns:
            The resulting state: ERROR or SUCCESS, or IDLE if the analysis
            was cancelled meanwhile.

        Raises:
            InvalidTransitionError: If the machine is not idle.
        """
        task = self.start(file)
        if task is None:
            return self._state

        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            if self._task is task:
                self.cancel()
            raise
        return self._state

    def cancel(self) -> None:
        """Abandon the in-flight analysis and return to IDLE.

        Raises:
            InvalidTransitionError: If no analysis is running.
        """
        if self.phase is not AnalysisPhase.ANALYZING:
            raise InvalidTransitionError("cancel", self.phase.value)

        task, self._task = self._task, None
        if task is not None:
            task.cancel()
        logger.info("Analysis of %s cancelled", self._state.file_name)
        self._set_state(AnalysisState())

    def reset(self) -> None:
        """Discard the result or error and return to IDLE.

        A no-op when already idle.

        Raises:
            InvalidTransitionError: While an analysis is running.
        """
        if self.phase is AnalysisPhase.IDLE:
            return
        if self.phase is AnalysisPhase.ANALYZING:
            raise InvalidTransitionError("reset", self.phase.value)
        self._set_state(AnalysisState())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _run(self, file: SelectedFile) -> None:
        """Encode, infer and validate; record the outcome if still current."""
        try:
            payload = await self._ingestor.encode(file)
            raw_text = await self._client.analyze(payload)
            result = self._validator.validate(raw_text)
        except asyncio.CancelledError:
            logger.debug("Analysis task for %s stopped", file.name)
            if self._task is asyncio.current_task():
                self._task = None
                self._set_state(AnalysisState())
            raise
        except Exception:
            logger.exception("Analysis of %s failed", file.name)
            outcome = AnalysisState.failed(GENERIC_FAILURE_MESSAGE, file.name)
        else:
            logger.info(
                "Analysis of %s succeeded: overall score %d",
                file.name,
                result.overall_score,
            )
            outcome = AnalysisState.succeeded(result, file.name)

        if self._task is asyncio.current_task():
            self._task = None
            self._set_state(outcome)

    def _rejection_message(self, exc: FileIngestError) -> str:
        if isinstance(exc, SizeExceededError):
            return SIZE_EXCEEDED_MESSAGE.format(limit_mb=exc.limit // (1024 * 1024))
        return UNSUPPORTED_TYPE_MESSAGE

    def _set_state(self, state: AnalysisState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
