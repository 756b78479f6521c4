"""Base interface for inference clients."""

from typing import Protocol

from viralaudit.models.media import AnalysisRequest


class IInferenceClient(Protocol):
    """Protocol defining the contract for multimodal inference backends.

    A client issues exactly one request per call and returns the engine's
    raw structured text. It does not interpret the text; that is the
    validator's job.
    """

    async def analyze(self, payload: AnalysisRequest) -> str:
        """Request a critique of an encoded video.

        Args:
            payload: Encoded video and its MIME type.

        Returns:
            Raw JSON text produced by the engine.

        Raises:
            TransportError: On any network or service failure.
            EmptyResponseError: If the engine returned no text.
        """
        ...

    @property
    def name(self) -> str:
        """Backend name identifier."""
        ...
