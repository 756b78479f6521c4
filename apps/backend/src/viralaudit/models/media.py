"""Media-related data models."""

import mimetypes
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SelectedFile(BaseModel):
    """A video chosen by the user, before it is read or encoded.

    Exactly one byte source is set: a path on disk or in-memory data
    (e.g. an HTTP upload already spooled by the server).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Original file name")
    mime_type: str | None = Field(None, description="Declared MIME type")
    size: int = Field(..., ge=0, description="File size in bytes")
    path: Path | None = Field(None, description="File path")
    data: bytes | None = Field(None, repr=False, description="In-memory file content")

    @model_validator(mode="after")
    def _one_source(self) -> "SelectedFile":
        if (self.path is None) == (self.data is None):
            raise ValueError("exactly one of path or data must be set")
        return self

    @classmethod
    def from_path(cls, path: Path | str, mime_type: str | None = None) -> "SelectedFile":
        """Describe a file on disk, guessing its MIME type from the extension."""
        path = Path(path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            mime_type=mime_type,
            size=path.stat().st_size,
            path=path,
        )

    @classmethod
    def from_bytes(cls, data: bytes, name: str, mime_type: str | None) -> "SelectedFile":
        """Describe an in-memory file."""
        return cls(name=name, mime_type=mime_type, size=len(data), data=data)

    @property
    def is_video(self) -> bool:
        """Check if the declared type is a video type."""
        return bool(self.mime_type) and self.mime_type.startswith("video/")


class AnalysisRequest(BaseModel):
    """Encoded payload for a single inference call."""

    model_config = ConfigDict(frozen=True)

    data: str = Field(..., repr=False, description="Base64-encoded file content")
    mime_type: str = Field(..., description="MIME type of the encoded file")
    name: str = Field("", description="Original file name")
    size: int = Field(0, ge=0, description="Size of the original file in bytes")


# The payload produced by ingestion is the request itself.
EncodedPayload = AnalysisRequest
