"""Analysis session domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from viralaudit.models.analysis import AnalysisResult


class AnalysisPhase(str, Enum):
    """Phase of an analysis session."""

    IDLE = "idle"
    ANALYZING = "analyzing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class AnalysisState:
    """Snapshot of a session's state.

    ``result`` is only set in SUCCESS and ``error`` only in ERROR.
    """

    phase: AnalysisPhase = AnalysisPhase.IDLE
    result: AnalysisResult | None = None
    error: str | None = None
    file_name: str | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def analyzing(cls, file_name: str) -> AnalysisState:
        return cls(phase=AnalysisPhase.ANALYZING, file_name=file_name)

    @classmethod
    def succeeded(cls, result: AnalysisResult, file_name: str) -> AnalysisState:
        return cls(phase=AnalysisPhase.SUCCESS, result=result, file_name=file_name)

    @classmethod
    def failed(cls, message: str, file_name: str | None = None) -> AnalysisState:
        return cls(phase=AnalysisPhase.ERROR, error=message, file_name=file_name)
