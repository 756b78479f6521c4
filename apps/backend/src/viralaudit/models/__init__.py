"""Data models for ViralAudit."""

from viralaudit.models.analysis import (
    CATEGORY_KEYS,
    CHECK_LABELS,
    FIX_SENTINEL,
    AnalysisResult,
    Categories,
    CategoryResult,
    CheckLabel,
    Checks,
    CheckStatus,
    SpecificCheck,
    TimestampedNote,
)
from viralaudit.models.media import AnalysisRequest, EncodedPayload, SelectedFile

__all__ = [
    # Media
    "SelectedFile",
    "AnalysisRequest",
    "EncodedPayload",
    # Analysis
    "AnalysisResult",
    "Categories",
    "CategoryResult",
    "Checks",
    "SpecificCheck",
    "CheckStatus",
    "CheckLabel",
    "TimestampedNote",
    "CHECK_LABELS",
    "CATEGORY_KEYS",
    "FIX_SENTINEL",
]
