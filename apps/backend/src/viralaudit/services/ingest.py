"""File ingestion: upload checks and base64 encoding."""

import asyncio
import base64
import logging

from viralaudit.config import MAX_UPLOAD_BYTES
from viralaudit.errors import SizeExceededError, UnsupportedTypeError
from viralaudit.models.media import AnalysisRequest, SelectedFile

logger = logging.getLogger(__name__)


class FileIngestor:
    """Validates a selected video and turns it into an inline payload.

    The checks only look at file metadata, so a rejected file is never
    read. Encoding reads the bytes off the event loop.
    """

    def __init__(self, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self.max_bytes = max_bytes

    def check(self, file: SelectedFile) -> None:
        """Apply the blocking upload checks.

        Args:
            file: The selected file.

        Raises:
            SizeExceededError: If the file is larger than the limit.
            UnsupportedTypeError: If the MIME type is not ``video/*``.
        """
        if file.size > self.max_bytes:
            raise SizeExceededError(file.size, self.max_bytes)
        if not file.is_video:
            raise UnsupportedTypeError(file.mime_type)

    async def encode(self, file: SelectedFile) -> AnalysisRequest:
        """Read and base64-encode the file.

        Args:
            file: A file that already passed :meth:`check`.

        Returns:
            AnalysisRequest carrying the encoded bytes and MIME type.
        """
        if file.data is not None:
            raw = file.data
        else:
            raw = await asyncio.to_thread(file.path.read_bytes)  # type: ignore[union-attr]

        encoded = await asyncio.to_thread(_b64encode, raw)
        logger.debug("Encoded %s (%d bytes, %s)", file.name, len(raw), file.mime_type)

        return AnalysisRequest(
            data=encoded,
            mime_type=file.mime_type or "",
            name=file.name,
            size=len(raw),
        )

    async def ingest(self, file: SelectedFile) -> AnalysisRequest:
        """Check then encode a file."""
        self.check(file)
        return await self.encode(file)


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")
